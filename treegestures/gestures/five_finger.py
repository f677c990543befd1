"""
FiveFingerGesture — open hand with all five fingers extended.

While held the rotation multiplier is raised, and spreading or closing the
fingers produces a zoom delta proportional to the change in hand spread.
"""
from __future__ import annotations
import logging
from typing import List, Optional

from treegestures.core.stability import StabilityCounter
from treegestures.domain.config import GestureConfig
from treegestures.domain.enums import GestureEvent
from treegestures.domain.models import EmittedEvent, FrameData
from treegestures.gestures.base import Gesture
from treegestures.utils.constants import FINGERS
from treegestures.utils.geometry import hand_spread, is_finger_extended

logger = logging.getLogger(__name__)


class FiveFingerGesture(Gesture):
    NAME = "FIVE_FINGER"

    def __init__(self, config: GestureConfig) -> None:
        self._cfg = config
        self._stability = StabilityCounter(config.five_finger_stability_frames)
        self.reset()

    # ------------------------------------------------------------------
    def detect(self, frame_data: FrameData, pinch_active: bool = False) -> List[EmittedEvent]:
        events: List[EmittedEvent] = []
        sample = frame_data.sample
        was_active = self._active

        self._spread = hand_spread(sample)
        self._spread_delta = 0.0

        all_extended = all(
            is_finger_extended(sample, tip, mcp, self._cfg.finger_extension_margin)
            for tip, mcp in FINGERS.values()
        )

        if not all_extended or pinch_active:
            self._stability.reset()
            self._last_spread = None
            self._active = False
            return events

        if not self._stability.update(True):
            self._active = False
            return events

        self._active = True
        if was_active and self._last_spread is not None:
            self._spread_delta = (self._spread - self._last_spread) * self._cfg.spread_zoom_sensitivity
            if abs(self._spread_delta) > self._cfg.zoom_delta_threshold:
                events.append(EmittedEvent(GestureEvent.FIVE_FINGER_ZOOM, (self._spread_delta,)))

        self._last_spread = self._spread
        return events

    # ------------------------------------------------------------------
    def reset(self) -> None:
        self._stability.reset()
        self._active:       bool            = False
        self._last_spread:  Optional[float] = None
        self._spread:       float           = 0.0
        self._spread_delta: float           = 0.0

    @property
    def active(self) -> bool:
        return self._active

    @property
    def spread(self) -> float:
        return self._spread

    @property
    def spread_delta(self) -> float:
        return self._spread_delta

    @property
    def last_spread(self) -> Optional[float]:
        return self._last_spread

    @property
    def stability_count(self) -> int:
        return self._stability.count

    @property
    def rotation_multiplier(self) -> float:
        return self._cfg.five_finger_rotation_mult if self._active else 1.0

    @property
    def zooming(self) -> bool:
        return self._active and abs(self._spread_delta) > self._cfg.zoom_delta_threshold
