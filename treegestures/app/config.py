from __future__ import annotations
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from treegestures.domain.config import GestureConfig
from treegestures.domain.errors import ConfigError


@dataclass(frozen=True)
class AppConfig:
    """
    Central configuration injected into all components.
    Gesture tunables live in the nested GestureConfig.
    """
    # ---- camera --------------------------------------------------------
    camera_device: int = 0
    fps_limit: int = 30
    frame_width: int = 320
    frame_height: int = 240

    # ---- hand model ----------------------------------------------------
    model_complexity: int = 0
    min_detection_confidence: float = 0.6
    min_tracking_confidence: float = 0.6

    # ---- display -------------------------------------------------------
    show_ui: bool = True
    window_name: str = "Memory Tree"

    # ---- memory tree ---------------------------------------------------
    memory_count: int = 12

    # ---- logging -------------------------------------------------------
    log_level: str = "INFO"

    gestures: GestureConfig = field(default_factory=GestureConfig)

    def __post_init__(self) -> None:
        if self.fps_limit <= 0:
            raise ConfigError("fps_limit must be positive")
        if self.memory_count < 0:
            raise ConfigError("memory_count must not be negative")
        for name in ("min_detection_confidence", "min_tracking_confidence"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ConfigError(f"{name} must be within [0, 1]")

    def with_overrides(self, **overrides: Any) -> "AppConfig":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


# Default instance — import and use directly, or override in tests.
default_config = AppConfig()

_SECTIONS = {
    "camera": {
        "device": "camera_device",
        "fps": "fps_limit",
        "width": "frame_width",
        "height": "frame_height",
    },
    "mediapipe": {
        "model_complexity": "model_complexity",
        "min_detection_confidence": "min_detection_confidence",
        "min_tracking_confidence": "min_tracking_confidence",
    },
    "display": {
        "show_ui": "show_ui",
        "window_name": "window_name",
    },
    "tree": {
        "memory_count": "memory_count",
    },
    "logging": {
        "level": "log_level",
    },
}


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Load configuration from a YAML file. Every section is optional and
    only overrides the defaults it names:

        camera:    {device, fps, width, height}
        mediapipe: {model_complexity, min_detection_confidence, min_tracking_confidence}
        display:   {show_ui, window_name}
        tree:      {memory_count}
        logging:   {level}
        gestures:  {<any GestureConfig field>}

    Args:
        path: Path to config file. If None, the defaults are returned.
    """
    if path is None:
        return AppConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    return config_from_dict(data)


def config_from_dict(data: Mapping[str, Any]) -> AppConfig:
    """Convert a nested mapping into an AppConfig."""
    if not isinstance(data, Mapping):
        raise ConfigError("Config root must be a mapping")

    unknown = sorted(set(data) - set(_SECTIONS) - {"gestures"})
    if unknown:
        raise ConfigError(f"Unknown config section(s): {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for section, mapping in _SECTIONS.items():
        section_data = data.get(section) or {}
        if not isinstance(section_data, Mapping):
            raise ConfigError(f"Section '{section}' must be a mapping")
        bad = sorted(set(section_data) - set(mapping))
        if bad:
            raise ConfigError(f"Unknown key(s) in '{section}': {', '.join(bad)}")
        for key, attr in mapping.items():
            if key in section_data:
                values[attr] = section_data[key]

    try:
        values["gestures"] = GestureConfig.from_dict(data.get("gestures") or {})
        return AppConfig(**values)
    except TypeError as exc:
        raise ConfigError(str(exc)) from exc


def config_to_dict(config: AppConfig) -> Dict[str, Any]:
    """Inverse of config_from_dict, for writing a starter YAML file."""
    data: Dict[str, Any] = {
        section: {key: getattr(config, attr) for key, attr in mapping.items()}
        for section, mapping in _SECTIONS.items()
    }
    data["gestures"] = config.gestures.to_dict()
    return data


def dump_config(config: AppConfig, path: Union[str, Path]) -> Path:
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config_to_dict(config), f, sort_keys=False)
    return path


__all__ = [
    "AppConfig",
    "config_from_dict",
    "config_to_dict",
    "default_config",
    "dump_config",
    "load_config",
]
