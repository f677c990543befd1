"""
OpenCVUI — all rendering logic isolated from detection and navigation.

The pipeline never calls cv2 directly — it delegates to this class.
"""
from __future__ import annotations
from typing import Any, Optional, Sequence

import cv2

from treegestures.app.navigator import MemoryNavigator
from treegestures.domain.enums import ActiveMode
from treegestures.domain.models import GestureSnapshot, Landmark
from treegestures.utils.constants import FINGERTIP_INDICES, HAND_CONNECTIONS

# BGR
_MODE_COLORS = {
    ActiveMode.NONE:        (200, 200, 200),
    ActiveMode.PINCH:       (255, 0,   255),
    ActiveMode.FIVE_FINGER: (0,   255, 0),
    ActiveMode.SCROLL:      (255, 255, 0),
}
_SKELETON_COLOR = (76, 201, 242)
_TIP_COLORS = (
    (76,  201, 242),   # thumb
    (197, 209, 79),    # index
    (160, 175, 224),   # middle
    (53,  57,  229),   # ring
    (176, 39,  156),   # pinky
)


class OpenCVUI:
    """Renders the hand skeleton and a gesture HUD, and shows the window."""

    def __init__(self, window_name: str = "Memory Tree") -> None:
        self._name = window_name

    def render(
        self,
        frame: Any,
        sample: Optional[Sequence[Landmark]],
        snapshot: GestureSnapshot,
        navigator: Optional[MemoryNavigator] = None,
    ) -> None:
        """Draw overlays, flip frame (mirror view), show window."""
        h, w = frame.shape[:2]

        if sample is not None:
            self._draw_hand(frame, sample, w, h)

        frame = cv2.flip(frame, 1)

        color = _MODE_COLORS.get(snapshot.mode, (255, 255, 255))
        cv2.putText(frame, f"Mode: {snapshot.mode.value}",
                    (10, 25), cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 2)
        cv2.putText(frame, f"Pinch {snapshot.pinch_distance:.3f}  Spread {snapshot.hand_spread:.3f}",
                    (10, 45), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (200, 200, 200), 1)
        cv2.putText(frame, f"dX {snapshot.delta_x:+.3f}  dY {snapshot.delta_y:+.3f}  x{snapshot.rotation_multiplier:.1f}",
                    (10, 62), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (200, 200, 200), 1)

        if navigator is not None:
            pose = navigator.target
            cv2.putText(frame, f"Orbit {pose.orbit_x:+.2f}/{pose.orbit_y:+.2f}  Zoom {pose.zoom:.1f}",
                        (10, 79), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (150, 150, 150), 1)
            cv2.putText(frame, f"Memory {navigator.highlighted}  Selected {navigator.selected}",
                        (10, 96), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (150, 150, 150), 1)

        cv2.putText(frame, "ESC to quit",
                    (w - 100, h - 10), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (255, 255, 255), 1)

        cv2.imshow(self._name, frame)

    @staticmethod
    def _draw_hand(frame: Any, sample: Sequence[Landmark], w: int, h: int) -> None:
        def px(i: int):
            return (int(sample[i].x * w), int(sample[i].y * h))

        for chain in HAND_CONNECTIONS:
            for a, b in zip(chain, chain[1:]):
                cv2.line(frame, px(a), px(b), _SKELETON_COLOR, 2)
        for tip, color in zip(FINGERTIP_INDICES, _TIP_COLORS):
            cv2.circle(frame, px(tip), 5, color, -1)

    def should_quit(self) -> bool:
        """Returns True if the user pressed ESC."""
        return (cv2.waitKey(1) & 0xFF) == 27

    def close(self) -> None:
        cv2.destroyAllWindows()
