"""
ScrollGesture — one-finger scroll.

Thumb, middle, ring and pinky fold together into a clump while the index
finger points out; the raw index-tip Y is then reported every frame.
Unlike pinch and five-finger there is no stability counter: the compound
predicate is specific enough that it switches on and off per frame.
"""
from __future__ import annotations
from typing import List

from treegestures.domain.config import GestureConfig
from treegestures.domain.enums import GestureEvent
from treegestures.domain.models import EmittedEvent, FrameData
from treegestures.gestures.base import Gesture
from treegestures.utils.constants import (
    INDEX_MCP,
    INDEX_TIP,
    MIDDLE_TIP,
    PINKY_TIP,
    RING_TIP,
    THUMB_TIP,
)
from treegestures.utils.geometry import distance_2d, is_finger_extended

# fingertip pairs that must all be close for the clump
_CLUMP_PAIRS = (
    (THUMB_TIP, MIDDLE_TIP),
    (THUMB_TIP, RING_TIP),
    (THUMB_TIP, PINKY_TIP),
    (MIDDLE_TIP, RING_TIP),
    (RING_TIP, PINKY_TIP),
)


class ScrollGesture(Gesture):
    NAME = "SCROLL"

    def __init__(self, config: GestureConfig) -> None:
        self._cfg = config
        self.reset()

    # ------------------------------------------------------------------
    def detect(self, frame_data: FrameData, blocked: bool = False) -> List[EmittedEvent]:
        """``blocked`` is True while pinch or five-finger holds the hand."""
        sample = frame_data.sample
        self._active = not blocked and self.matches(sample)
        if not self._active:
            return []
        return [EmittedEvent(GestureEvent.SCROLL_MOVE, (frame_data.index_tip.y,))]

    def matches(self, sample) -> bool:
        """The geometric predicate alone, without gating."""
        clumped = all(
            distance_2d(sample[a], sample[b]) < self._cfg.clump_threshold
            for a, b in _CLUMP_PAIRS
        )
        if not clumped:
            return False
        return (
            distance_2d(sample[THUMB_TIP], sample[INDEX_TIP]) > self._cfg.index_extension_threshold
            and is_finger_extended(sample, INDEX_TIP, INDEX_MCP, self._cfg.finger_extension_margin)
        )

    # ------------------------------------------------------------------
    def reset(self) -> None:
        self._active: bool = False

    @property
    def active(self) -> bool:
        return self._active
