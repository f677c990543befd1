"""
Geometry helpers and landmark constants for the gesture engine.
"""

from .constants import *
from .geometry import (
    distance_2d,
    distance_3d,
    hand_spread,
    is_finger_extended,
    palm_position,
)

__all__ = [
    'distance_2d',
    'distance_3d',
    'hand_spread',
    'is_finger_extended',
    'palm_position',
    'WRIST',
    'THUMB_TIP',
    'INDEX_TIP',
    'MIDDLE_TIP',
    'RING_TIP',
    'PINKY_TIP',
    'FINGERTIP_INDICES',
    'FINGERS',
    'NUM_LANDMARKS',
]
