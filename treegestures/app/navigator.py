"""
MemoryNavigator — turns gesture callbacks into memory-tree navigation.

  delta move        → accumulated orbit (infinite horizontal spin,
                      clamped vertical tilt), scaled by the rotation
                      multiplier of the latest snapshot
  five-finger zoom  → camera distance (spread = zoom out)
  index move        → highlighted memory from the mirrored X position
  scroll            → highlighted memory from the index finger's Y
  select            → selects the highlighted memory and moves closer

ease() then moves the camera toward those targets a little each frame and
returns its position on a sphere around the tree.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from treegestures.core.emitter import GestureCallbacks
from treegestures.domain.models import GestureSnapshot

logger = logging.getLogger(__name__)

ROTATION_SENSITIVITY = math.pi * 2.5
VERTICAL_SENSITIVITY = 1.2
VERTICAL_MULT_CAP = 1.5
ORBIT_Y_MIN, ORBIT_Y_MAX = -0.3, 0.8
ZOOM_MIN, ZOOM_MAX = 4.0, 15.0
SELECT_ZOOM_FLOOR = 5.0
PLAIN_ZOOM_SCALE = 0.3
SCROLL_TOP, SCROLL_SPAN = 0.2, 0.6
EASE_FACTOR = 0.15
LOOK_AT = (0.0, 1.0, 0.0)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class CameraPose:
    orbit_x: float = 0.0
    orbit_y: float = 0.3
    zoom: float = 8.0

    def position(self) -> Tuple[float, float, float]:
        """Spherical → Cartesian around LOOK_AT."""
        tilt = _clamp(self.orbit_y, ORBIT_Y_MIN, ORBIT_Y_MAX)
        return (
            math.sin(self.orbit_x) * math.cos(tilt) * self.zoom,
            math.sin(tilt) * self.zoom + LOOK_AT[1],
            math.cos(self.orbit_x) * math.cos(tilt) * self.zoom,
        )


class MemoryNavigator:
    """
    Parameters
    ----------
    memory_count : int
        Number of memories hanging on the tree.
    """

    def __init__(self, memory_count: int = 0) -> None:
        self._count = memory_count
        self._rotation_multiplier = 1.0
        self.target = CameraPose()
        self.current = CameraPose()
        self.highlighted: Optional[int] = None
        self.selected: Optional[int] = None

    # ---- wiring ----------------------------------------------------------
    def callbacks(self) -> GestureCallbacks:
        return GestureCallbacks(
            on_select=self.on_select,
            on_index_move=self.on_index_move,
            on_delta_move=self.on_delta_move,
            on_zoom=self.on_zoom,
            on_five_finger_zoom=self.on_five_finger_zoom,
            on_scroll_move=self.on_scroll_move,
        )

    def on_snapshot(self, snapshot: GestureSnapshot) -> None:
        self._rotation_multiplier = snapshot.rotation_multiplier

    @property
    def rotation_multiplier(self) -> float:
        return self._rotation_multiplier

    @property
    def memory_count(self) -> int:
        return self._count

    @memory_count.setter
    def memory_count(self, count: int) -> None:
        self._count = max(0, count)
        if self._count == 0:
            self.highlighted = None
            self.selected = None
        elif self.highlighted is not None:
            self.highlighted = min(self.highlighted, self._count - 1)

    # ---- callbacks -------------------------------------------------------
    def on_delta_move(self, dx: float, dy: float) -> None:
        mult = self._rotation_multiplier
        # hand moves opposite to the camera orbit
        self.target.orbit_x += -dx * ROTATION_SENSITIVITY * mult
        self.target.orbit_y = _clamp(
            self.target.orbit_y - dy * VERTICAL_SENSITIVITY * min(mult, VERTICAL_MULT_CAP),
            ORBIT_Y_MIN,
            ORBIT_Y_MAX,
        )

    def on_zoom(self, delta: float) -> None:
        self.target.zoom = _clamp(self.target.zoom - delta * PLAIN_ZOOM_SCALE, ZOOM_MIN, ZOOM_MAX)

    def on_five_finger_zoom(self, delta: float) -> None:
        self.target.zoom = _clamp(self.target.zoom + delta, ZOOM_MIN, ZOOM_MAX)

    def on_index_move(self, x: float, y: float) -> None:
        # camera image is mirrored
        self._highlight(math.floor((1.0 - x) * self._count))

    def on_scroll_move(self, y: float) -> None:
        normalized = _clamp((y - SCROLL_TOP) / SCROLL_SPAN, 0.0, 1.0)
        self._highlight(math.floor(normalized * self._count))

    def on_select(self) -> None:
        if self._count == 0 or self.highlighted is None:
            return
        self.selected = self.highlighted
        self.target.zoom = max(SELECT_ZOOM_FLOOR, self.target.zoom - 1.0)
        logger.info("Selected memory %d", self.selected)

    def _highlight(self, index: int) -> None:
        if self._count == 0:
            self.highlighted = None
            return
        self.highlighted = int(_clamp(index, 0, self._count - 1))

    # ---- camera rig ------------------------------------------------------
    def ease(self, factor: float = EASE_FACTOR) -> Tuple[float, float, float]:
        self.current.orbit_x += (self.target.orbit_x - self.current.orbit_x) * factor
        self.current.orbit_y += (self.target.orbit_y - self.current.orbit_y) * factor
        self.current.zoom += (self.target.zoom - self.current.zoom) * factor
        return self.current.position()

    def clear(self) -> None:
        """Drop highlight and selection, e.g. when tracking is switched off."""
        self.highlighted = None
        self.selected = None
