from enum import Enum


class ActiveMode(str, Enum):
    """The single primary interaction mode resolved for a frame."""
    NONE        = "NONE"
    PINCH       = "PINCH"
    FIVE_FINGER = "FIVE_FINGER"
    SCROLL      = "SCROLL"


class GestureEvent(str, Enum):
    """Discrete events dispatched to the callbacks."""
    SELECT           = "SELECT"
    INDEX_MOVE       = "INDEX_MOVE"
    DELTA_MOVE       = "DELTA_MOVE"
    ZOOM             = "ZOOM"
    FIVE_FINGER_ZOOM = "FIVE_FINGER_ZOOM"
    SCROLL_MOVE      = "SCROLL_MOVE"
