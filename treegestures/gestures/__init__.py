"""
Mode classifiers, one module per gesture.
"""

from .base import Gesture
from .five_finger import FiveFingerGesture
from .pinch import PinchTapGesture
from .scroll import ScrollGesture

__all__ = [
    'Gesture',
    'FiveFingerGesture',
    'PinchTapGesture',
    'ScrollGesture',
]
