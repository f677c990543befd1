from treegestures.app.config import AppConfig, default_config, load_config
from treegestures.app.navigator import MemoryNavigator

__all__ = [
    "AppConfig",
    "MemoryNavigator",
    "default_config",
    "load_config",
]
