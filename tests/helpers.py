"""
Synthetic hand poses in normalised image coordinates.

All poses share the same wrist and knuckles; only the fingertips move.
Intermediate joints are interpolated and play no part in the predicates.
"""
from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from treegestures.domain.models import Landmark
from treegestures.utils.geometry import hand_spread

WRIST = (0.5, 0.8)

MCP = {
    "THUMB":  (0.42, 0.72),
    "INDEX":  (0.45, 0.60),
    "MIDDLE": (0.50, 0.58),
    "RING":   (0.55, 0.60),
    "PINKY":  (0.60, 0.63),
}

_CHAINS = {
    "THUMB":  (1, 2, 3, 4),
    "INDEX":  (5, 6, 7, 8),
    "MIDDLE": (9, 10, 11, 12),
    "RING":   (13, 14, 15, 16),
    "PINKY":  (17, 18, 19, 20),
}

OPEN_TIPS = {
    "THUMB":  (0.32, 0.62),
    "INDEX":  (0.42, 0.40),
    "MIDDLE": (0.50, 0.36),
    "RING":   (0.58, 0.40),
    "PINKY":  (0.66, 0.48),
}

PINCH_TIPS = {
    "THUMB":  (0.44, 0.50),
    "INDEX":  (0.45, 0.50),
    "MIDDLE": (0.50, 0.36),
    "RING":   (0.58, 0.40),
    "PINKY":  (0.66, 0.48),
}

POINT_TIPS = {
    "THUMB":  (0.30, 0.65),
    "INDEX":  (0.42, 0.40),
    "MIDDLE": (0.50, 0.66),
    "RING":   (0.55, 0.68),
    "PINKY":  (0.60, 0.70),
}

SCROLL_TIPS = {
    "THUMB":  (0.50, 0.68),
    "INDEX":  (0.42, 0.40),
    "MIDDLE": (0.50, 0.66),
    "RING":   (0.54, 0.68),
    "PINKY":  (0.58, 0.70),
}

FIST_TIPS = {
    "THUMB":  (0.50, 0.68),
    "INDEX":  (0.47, 0.66),
    "MIDDLE": (0.50, 0.66),
    "RING":   (0.54, 0.68),
    "PINKY":  (0.58, 0.70),
}

Sample = Tuple[Landmark, ...]


def _lerp(a: Tuple[float, float], b: Tuple[float, float], t: float) -> Tuple[float, float]:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def build_hand(tips: Dict[str, Tuple[float, float]]) -> Sample:
    points: List[Optional[Tuple[float, float]]] = [None] * 21
    points[0] = WRIST
    for finger, (base, j1, j2, tip) in _CHAINS.items():
        mcp, end = MCP[finger], tips[finger]
        if finger == "THUMB":
            points[base] = _lerp(WRIST, mcp, 0.5)
            points[j1] = mcp
            points[j2] = _lerp(mcp, end, 0.5)
        else:
            points[base] = mcp
            points[j1] = _lerp(mcp, end, 1 / 3)
            points[j2] = _lerp(mcp, end, 2 / 3)
        points[tip] = end
    return tuple(Landmark(x, y, 0.0) for x, y in points)


def _with_index(tips: Dict[str, Tuple[float, float]], index: Optional[Tuple[float, float]]):
    if index is None:
        return tips
    return dict(tips, INDEX=index)


def open_palm(spread: Optional[float] = None) -> Sample:
    """Five fingers extended; ``spread`` rescales the tips around the wrist."""
    if spread is None:
        return build_hand(OPEN_TIPS)
    scale = spread / hand_spread(build_hand(OPEN_TIPS))
    tips = {
        finger: (WRIST[0] + (x - WRIST[0]) * scale, WRIST[1] + (y - WRIST[1]) * scale)
        for finger, (x, y) in OPEN_TIPS.items()
    }
    return build_hand(tips)


def pinch() -> Sample:
    return build_hand(PINCH_TIPS)


def point(index: Optional[Tuple[float, float]] = None) -> Sample:
    """Index out, other fingers curled, thumb away: plain pointer tracking."""
    return build_hand(_with_index(POINT_TIPS, index))


def scroll_pose(index: Optional[Tuple[float, float]] = None) -> Sample:
    return build_hand(_with_index(SCROLL_TIPS, index))


def fist() -> Sample:
    return build_hand(FIST_TIPS)


class Clock:
    """Monotonic millisecond clock driven by the test."""

    def __init__(self, start: float = 0.0, step: float = 10.0) -> None:
        self.now = start
        self.step = step

    def tick(self, ms: Optional[float] = None) -> float:
        self.now += self.step if ms is None else ms
        return self.now
