from treegestures.core.arbiter import arbitrate
from treegestures.core.cooldown_manager import CooldownManager
from treegestures.core.emitter import EventDispatcher, GestureCallbacks, SnapshotPublisher
from treegestures.core.frame_source import FrameSource, ReplayFrameSource
from treegestures.core.gesture_manager import GestureManager
from treegestures.core.recorder import LandmarkRecorder
from treegestures.core.session import TrackingSession
from treegestures.core.smoothing import DeltaTracker, PointerSmoother
from treegestures.core.stability import StabilityCounter
from treegestures.core.validation import validate_sample

__all__ = [
    "arbitrate",
    "CooldownManager",
    "DeltaTracker",
    "EventDispatcher",
    "FrameSource",
    "GestureCallbacks",
    "GestureManager",
    "LandmarkRecorder",
    "PointerSmoother",
    "ReplayFrameSource",
    "SnapshotPublisher",
    "StabilityCounter",
    "TrackingSession",
    "validate_sample",
]
