"""
treegestures — hand-gesture navigation for the memory tree.

    from treegestures import GestureManager, GestureCallbacks

    manager = GestureManager(callbacks=GestureCallbacks(on_select=...))
    result  = manager.update(landmarks, timestamp_ms)
"""
from treegestures.core.emitter import GestureCallbacks
from treegestures.core.gesture_manager import GestureManager
from treegestures.core.session import TrackingSession
from treegestures.domain.config import GestureConfig
from treegestures.domain.enums import ActiveMode, GestureEvent
from treegestures.domain.models import FrameResult, GestureSnapshot, Landmark

__version__ = "0.1.0"

__all__ = [
    "ActiveMode",
    "FrameResult",
    "GestureCallbacks",
    "GestureConfig",
    "GestureEvent",
    "GestureManager",
    "GestureSnapshot",
    "Landmark",
    "TrackingSession",
]
