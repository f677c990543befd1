from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, NamedTuple, Optional, Tuple

from treegestures.domain.enums import ActiveMode, GestureEvent
from treegestures.utils.constants import (
    INDEX_TIP,
    POSITION_TOLERANCE,
    SCROLL_TOLERANCE,
)


class Landmark(NamedTuple):
    """Normalised camera-frame point (x/y in 0-1, z relative depth)."""
    x: float
    y: float
    z: float = 0.0


# Type aliases
Point2D = Tuple[float, float]
HandSample = Tuple[Landmark, ...]   # exactly 21 landmarks


@dataclass(frozen=True)
class FrameData:
    """
    One validated hand sample plus the caller's monotonic timestamp (ms).
    Passed through the classifiers instead of individual arguments.
    """
    sample: HandSample
    timestamp: float

    # ---- convenience accessors ----------------------------------------
    @property
    def index_tip(self) -> Landmark:
        return self.sample[INDEX_TIP]

    def landmark(self, index: int) -> Landmark:
        return self.sample[index]


@dataclass(frozen=True)
class EmittedEvent:
    kind: GestureEvent
    args: Tuple[float, ...] = ()


@dataclass(frozen=True)
class GestureSnapshot:
    """Externally visible gesture state of one update."""
    is_pinching: bool = False
    pinch_distance: float = 0.0
    palm_position: Point2D = (0.5, 0.5)
    index_position: Point2D = (0.5, 0.5)
    is_tapping: bool = False
    is_zooming: bool = False
    zoom_delta: float = 0.0
    is_five_finger_mode: bool = False
    hand_spread: float = 0.0
    spread_delta: float = 0.0
    rotation_multiplier: float = 1.0
    is_scroll_mode: bool = False
    scroll_y: float = 0.5
    delta_x: float = 0.0
    delta_y: float = 0.0
    mode: ActiveMode = ActiveMode.NONE
    timestamp: float = 0.0

    def approx_equal(
        self,
        other: "GestureSnapshot",
        tolerance: float = POSITION_TOLERANCE,
        scroll_tolerance: float = SCROLL_TOLERANCE,
    ) -> bool:
        """
        Booleans must match exactly; continuous values within tolerance.
        Timestamps are ignored.
        """
        return (
            self.is_pinching == other.is_pinching
            and self.is_tapping == other.is_tapping
            and self.is_five_finger_mode == other.is_five_finger_mode
            and self.is_zooming == other.is_zooming
            and self.is_scroll_mode == other.is_scroll_mode
            and abs(self.pinch_distance - other.pinch_distance) < tolerance
            and abs(self.index_position[0] - other.index_position[0]) < tolerance
            and abs(self.index_position[1] - other.index_position[1]) < tolerance
            and abs(self.zoom_delta - other.zoom_delta) < tolerance
            and abs(self.spread_delta - other.spread_delta) < tolerance
            and abs(self.scroll_y - other.scroll_y) < scroll_tolerance
        )

    def without_hand(self, timestamp: float, clear_modes: bool) -> "GestureSnapshot":
        """
        Copy for a frame with no hand: last positions kept, motion cleared.
        With ``clear_modes`` the mode flags drop back to plain tracking too.
        """
        snapshot = replace(
            self,
            is_tapping=False,
            is_zooming=False,
            zoom_delta=0.0,
            spread_delta=0.0,
            delta_x=0.0,
            delta_y=0.0,
            timestamp=timestamp,
        )
        if clear_modes:
            snapshot = replace(
                snapshot,
                is_pinching=False,
                is_five_finger_mode=False,
                is_scroll_mode=False,
                rotation_multiplier=1.0,
                mode=ActiveMode.NONE,
            )
        return snapshot


@dataclass(frozen=True)
class FrameResult:
    """What one call to GestureManager.update produced."""
    snapshot: GestureSnapshot
    events: Tuple[EmittedEvent, ...] = ()
    published: bool = False
    hand_present: bool = False

    def kinds(self) -> Tuple[GestureEvent, ...]:
        return tuple(e.kind for e in self.events)


@dataclass(frozen=True)
class SourceFrame:
    """A frame delivered by a FrameSource."""
    sample: Optional[Any]
    timestamp: float
    image: Optional[Any] = field(default=None, compare=False)
