"""
GestureManager — the per-frame gesture pipeline.

    sample → validation → smoothing → classifiers → arbiter → emitter

Design decisions:
  - One synchronous update(sample, timestamp_ms) per frame; no I/O, no threads.
  - Classifiers are evaluated in priority order and gated on each other
    (pinch, then five-finger, then scroll).
  - The exclusive ActiveMode is resolved once by the arbiter and every
    snapshot flag is derived from it.
  - Timestamps come from the caller's monotonic clock, so tests need no
    real time.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, List, Optional

from treegestures.core.arbiter import arbitrate, claims_pointer
from treegestures.core.cooldown_manager import CooldownManager
from treegestures.core.emitter import EventDispatcher, GestureCallbacks, SnapshotPublisher
from treegestures.core.smoothing import DeltaTracker, PointerSmoother
from treegestures.core.validation import validate_sample
from treegestures.domain.config import GestureConfig
from treegestures.domain.enums import ActiveMode, GestureEvent
from treegestures.domain.models import (
    EmittedEvent,
    FrameData,
    FrameResult,
    GestureSnapshot,
)
from treegestures.gestures.five_finger import FiveFingerGesture
from treegestures.gestures.pinch import PinchTapGesture
from treegestures.gestures.scroll import ScrollGesture
from treegestures.utils.geometry import palm_position

logger = logging.getLogger(__name__)


class GestureManager:
    """
    The single entry point for gesture processing.

    Usage
    -----
    manager = GestureManager(config, callbacks)
    result  = manager.update(sample, timestamp_ms)

    Parameters
    ----------
    config : GestureConfig
        Thresholds and timing bounds.
    callbacks : GestureCallbacks
        Immediate-channel consumers.
    on_snapshot : callable, optional
        Throttled-channel consumer.
    """

    def __init__(
        self,
        config: Optional[GestureConfig] = None,
        callbacks: Optional[GestureCallbacks] = None,
        on_snapshot: Optional[Callable[[GestureSnapshot], None]] = None,
    ) -> None:
        self._cfg = config or GestureConfig()
        self._cooldown = CooldownManager(default_cooldown=self._cfg.select_cooldown_ms)

        # ---- classifiers, in priority order ---------------------------
        self._pinch       = PinchTapGesture(self._cfg, self._cooldown)
        self._five_finger = FiveFingerGesture(self._cfg)
        self._scroll      = ScrollGesture(self._cfg)

        # ---- smoothing ------------------------------------------------
        self._pointer = PointerSmoother(self._cfg.smoothing_factor)
        self._delta   = DeltaTracker(self._cfg.delta_deadzone)

        # ---- emission -------------------------------------------------
        self._dispatcher = EventDispatcher(callbacks)
        self._publisher  = SnapshotPublisher(
            on_snapshot,
            interval_ms=self._cfg.publish_interval_ms,
            tolerance=self._cfg.position_tolerance,
            scroll_tolerance=self._cfg.scroll_tolerance,
        )

        self._snapshot = GestureSnapshot()

    # ------------------------------------------------------------------
    def update(self, sample: Any, timestamp: float) -> FrameResult:
        """
        Process one frame. ``sample`` may be None (no hand) or anything
        validate_sample() understands; malformed input counts as no hand.
        """
        validated = validate_sample(sample)
        if validated is None:
            return self._no_hand(timestamp)

        frame = FrameData(sample=validated, timestamp=timestamp)
        index = frame.index_tip

        smoothed = self._pointer.update(index.x, index.y)
        delta_x, delta_y = self._delta.update(index.x, index.y)

        # 1. Pinch / tap — gates everything below
        events: List[EmittedEvent] = list(self._pinch.detect(frame))
        # 2. Five-finger, gated on pinch
        events.extend(self._five_finger.detect(frame, pinch_active=self._pinch.active))
        # 3. Scroll, gated on both
        events.extend(self._scroll.detect(
            frame, blocked=self._pinch.active or self._five_finger.active,
        ))

        mode = arbitrate(self._pinch.active, self._five_finger.active, self._scroll.active)
        if mode is not self._snapshot.mode:
            logger.debug("Mode %s → %s", self._snapshot.mode.value, mode.value)

        # 4./5. Pointer signals, unless scroll owns the index finger
        if not claims_pointer(mode):
            if delta_x != 0.0 or delta_y != 0.0:
                events.append(EmittedEvent(GestureEvent.DELTA_MOVE, (delta_x, delta_y)))
            events.append(EmittedEvent(GestureEvent.INDEX_MOVE, smoothed))

        five_finger = mode is ActiveMode.FIVE_FINGER
        snapshot = GestureSnapshot(
            is_pinching=mode is ActiveMode.PINCH,
            pinch_distance=self._pinch.distance,
            palm_position=palm_position(validated),
            index_position=smoothed,
            is_tapping=self._pinch.tapped,
            is_zooming=five_finger and self._five_finger.zooming,
            zoom_delta=self._five_finger.spread_delta,
            is_five_finger_mode=five_finger,
            hand_spread=self._five_finger.spread,
            spread_delta=self._five_finger.spread_delta,
            rotation_multiplier=self._five_finger.rotation_multiplier,
            is_scroll_mode=mode is ActiveMode.SCROLL,
            scroll_y=index.y,
            delta_x=delta_x,
            delta_y=delta_y,
            mode=mode,
            timestamp=timestamp,
        )
        return self._finish(snapshot, events, timestamp, hand_present=True)

    def _no_hand(self, timestamp: float) -> FrameResult:
        self._delta.hand_lost()
        if self._cfg.reset_on_hand_loss:
            self._reset_classifiers()
        snapshot = self._snapshot.without_hand(timestamp, clear_modes=self._cfg.reset_on_hand_loss)
        return self._finish(snapshot, [], timestamp, hand_present=False)

    def _finish(
        self,
        snapshot: GestureSnapshot,
        events: List[EmittedEvent],
        timestamp: float,
        hand_present: bool,
    ) -> FrameResult:
        self._snapshot = snapshot
        if any(e.kind is GestureEvent.SELECT for e in events):
            logger.info("Select at %.0f ms", timestamp)
        # consumers see the new mode before reacting to this frame's events
        published = self._publisher.offer(snapshot, timestamp)
        self._dispatcher.dispatch(events)
        return FrameResult(
            snapshot=snapshot,
            events=tuple(events),
            published=published,
            hand_present=hand_present,
        )

    # ------------------------------------------------------------------
    def _reset_classifiers(self) -> None:
        # the select cooldown mark survives a hand loss
        self._pinch.reset()
        self._five_finger.reset()
        self._scroll.reset()

    def reset_all(self) -> None:
        """Restore every counter, cache and timestamp to its initial value."""
        self._reset_classifiers()
        self._cooldown.reset_all()
        self._pointer.reset()
        self._delta.reset()
        self._publisher.reset()
        self._snapshot = GestureSnapshot()

    # ---- read-only state ------------------------------------------------
    @property
    def snapshot(self) -> GestureSnapshot:
        return self._snapshot

    @property
    def config(self) -> GestureConfig:
        return self._cfg

    @property
    def pinch(self) -> PinchTapGesture:
        return self._pinch

    @property
    def five_finger(self) -> FiveFingerGesture:
        return self._five_finger

    @property
    def scroll(self) -> ScrollGesture:
        return self._scroll

    @property
    def delta_tracker(self) -> DeltaTracker:
        return self._delta

    @property
    def pointer(self) -> PointerSmoother:
        return self._pointer

    @property
    def cooldown(self) -> CooldownManager:
        return self._cooldown

    @property
    def publisher(self) -> SnapshotPublisher:
        return self._publisher
