"""
Mode arbitration — resolves the classifier outputs into one ActiveMode.

Priority is pinch > five-finger > scroll. The classifiers are already gated
in that order by GestureManager; this function is the single place that
turns their flags into the exclusive mode the snapshot is built from.
"""
from __future__ import annotations

from treegestures.domain.enums import ActiveMode


def arbitrate(pinch_active: bool, five_finger_active: bool, scroll_active: bool) -> ActiveMode:
    if pinch_active:
        return ActiveMode.PINCH
    if five_finger_active:
        return ActiveMode.FIVE_FINGER
    if scroll_active:
        return ActiveMode.SCROLL
    return ActiveMode.NONE


def claims_pointer(mode: ActiveMode) -> bool:
    """Scroll takes over the index finger, so pointer/delta moves are muted."""
    return mode is ActiveMode.SCROLL
