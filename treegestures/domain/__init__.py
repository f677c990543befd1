from treegestures.domain.config import GestureConfig
from treegestures.domain.enums import ActiveMode, GestureEvent
from treegestures.domain.errors import CameraError, ConfigError
from treegestures.domain.models import (
    EmittedEvent,
    FrameData,
    FrameResult,
    GestureSnapshot,
    HandSample,
    Landmark,
    SourceFrame,
)

__all__ = [
    "ActiveMode",
    "CameraError",
    "ConfigError",
    "EmittedEvent",
    "FrameData",
    "FrameResult",
    "GestureConfig",
    "GestureEvent",
    "GestureSnapshot",
    "HandSample",
    "Landmark",
    "SourceFrame",
]
