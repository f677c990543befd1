"""
Temporal smoothing for the index fingertip.

PointerSmoother  — exponential moving average of the reported pointer.
DeltaTracker     — frame-to-frame raw delta with a per-axis dead-zone and
                   hand-visibility bookkeeping.
"""
from __future__ import annotations
from typing import Optional, Tuple

from treegestures.utils.constants import DELTA_DEADZONE, SMOOTHING_FACTOR

Point2D = Tuple[float, float]


class PointerSmoother:
    """estimate += (raw - estimate) * factor, starting at the frame centre."""

    def __init__(self, factor: float = SMOOTHING_FACTOR, start: Point2D = (0.5, 0.5)) -> None:
        self._factor = factor
        self._start = start
        self._x, self._y = start

    def update(self, x: float, y: float) -> Point2D:
        self._x += (x - self._x) * self._factor
        self._y += (y - self._y) * self._factor
        return (self._x, self._y)

    @property
    def position(self) -> Point2D:
        return (self._x, self._y)

    def reset(self) -> None:
        self._x, self._y = self._start


class DeltaTracker:
    """
    Parameters
    ----------
    deadzone : float
        Per-axis magnitude at or below which a delta is reported as 0.
    """

    def __init__(self, deadzone: float = DELTA_DEADZONE) -> None:
        self._deadzone = deadzone
        self.reset()

    # ------------------------------------------------------------------
    def update(self, x: float, y: float) -> Point2D:
        """Feed the raw index position of a frame that has a hand."""
        dx = dy = 0.0
        if self._last is not None and self._visible:
            raw_dx = x - self._last[0]
            raw_dy = y - self._last[1]
            dx = raw_dx if abs(raw_dx) > self._deadzone else 0.0
            dy = raw_dy if abs(raw_dy) > self._deadzone else 0.0

        self._last = (x, y)
        self._visible = True
        return (dx, dy)

    def hand_lost(self) -> None:
        """Forget the last position so re-entry does not produce a jump."""
        self._last = None
        self._visible = False

    @property
    def last_position(self) -> Optional[Point2D]:
        return self._last

    @property
    def visible(self) -> bool:
        return self._visible

    def reset(self) -> None:
        self._last: Optional[Point2D] = None
        self._visible: bool = False
