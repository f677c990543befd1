"""
Pure geometric utility functions over hand landmarks.
No imports from the rest of the project except landmark indices.
"""
from __future__ import annotations
import math
from typing import Sequence, Tuple

from treegestures.utils.constants import (
    FINGER_EXTENSION_MARGIN,
    FINGERTIP_INDICES,
    WRIST,
)

Point2D = Tuple[float, float]
Point3D = Tuple[float, float, float]


def distance_3d(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two 3D points."""
    return math.hypot(a[0] - b[0], a[1] - b[1], a[2] - b[2])


def distance_2d(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance in the image plane (depth ignored)."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def is_finger_extended(
    sample: Sequence[Sequence[float]],
    tip_index: int,
    mcp_index: int,
    margin: float = FINGER_EXTENSION_MARGIN,
) -> bool:
    """
    A finger counts as extended when its tip is farther from the wrist
    than its base knuckle, by at least ``margin``.
    """
    wrist = sample[WRIST]
    return distance_3d(wrist, sample[tip_index]) > margin * distance_3d(wrist, sample[mcp_index])


def hand_spread(sample: Sequence[Sequence[float]]) -> float:
    """Mean wrist→fingertip distance over the five fingertips."""
    wrist = sample[WRIST]
    total = sum(distance_3d(wrist, sample[i]) for i in FINGERTIP_INDICES)
    return total / len(FINGERTIP_INDICES)


def palm_position(sample: Sequence[Sequence[float]]) -> Point2D:
    wrist = sample[WRIST]
    return (wrist[0], wrist[1])
