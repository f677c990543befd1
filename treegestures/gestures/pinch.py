"""
PinchTapGesture — thumb-to-index pinch, released quickly, selects.

The predicate is asymmetric: thumb and index must be very close while the
other three fingertips stay clearly away from the thumb, so a closed fist
never reads as a pinch. A pinch is debounced by a stability counter; the
select fires on release when the hold lasted between the min/max bounds
and the select cooldown has elapsed.
"""
from __future__ import annotations
import logging
from typing import List, Optional

from treegestures.core.cooldown_manager import CooldownManager
from treegestures.core.stability import StabilityCounter
from treegestures.domain.config import GestureConfig
from treegestures.domain.enums import GestureEvent
from treegestures.domain.models import EmittedEvent, FrameData
from treegestures.gestures.base import Gesture
from treegestures.utils.constants import (
    INDEX_TIP,
    MIDDLE_TIP,
    PINKY_TIP,
    RING_TIP,
    THUMB_TIP,
)
from treegestures.utils.geometry import distance_2d

logger = logging.getLogger(__name__)


class PinchTapGesture(Gesture):
    NAME = "SELECT"

    def __init__(self, config: GestureConfig, cooldown: CooldownManager) -> None:
        self._cfg = config
        self._cooldown = cooldown
        self._stability = StabilityCounter(config.pinch_stability_frames)
        self.reset()

    # ------------------------------------------------------------------
    def detect(self, frame_data: FrameData) -> List[EmittedEvent]:
        events: List[EmittedEvent] = []
        sample = frame_data.sample
        now = frame_data.timestamp

        thumb = sample[THUMB_TIP]
        self._distance = distance_2d(thumb, sample[INDEX_TIP])
        self._tapped = False

        exclusion = self._cfg.pinch_exclusion
        valid = (
            self._distance < self._cfg.pinch_threshold
            and distance_2d(thumb, sample[MIDDLE_TIP]) > exclusion
            and distance_2d(thumb, sample[RING_TIP]) > exclusion
            and distance_2d(thumb, sample[PINKY_TIP]) > exclusion
        )

        if valid:
            if self._stability.update(True):
                if not self._active:
                    self._start = now
                    logger.debug("Pinch started at %.0f ms", now)
                self._active = True
            return events

        if self._active:
            if self._is_tap(now):
                self._tapped = True
                events.append(EmittedEvent(GestureEvent.SELECT))
                logger.debug("Pinch released after %.0f ms → select", now - self._start)
            else:
                logger.debug("Pinch released after %.0f ms, no select", now - self._start)

        self._stability.reset()
        self._active = False
        return events

    def _is_tap(self, now: float) -> bool:
        duration = now - self._start
        if not self._cfg.pinch_min_hold_ms <= duration <= self._cfg.pinch_max_hold_ms:
            return False
        # ok() records the select time only when the hold window matched
        return self._cooldown.ok(self.NAME, now, self._cfg.select_cooldown_ms)

    # ------------------------------------------------------------------
    def reset(self) -> None:
        self._stability.reset()
        self._active:   bool            = False
        self._start:    Optional[float] = None
        self._distance: float           = 0.0
        self._tapped:   bool            = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def tapped(self) -> bool:
        """True only on the frame a select fired."""
        return self._tapped

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def stability_count(self) -> int:
        return self._stability.count

    @property
    def start_time(self) -> Optional[float]:
        return self._start
