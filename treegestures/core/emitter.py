"""
Event and snapshot emission.

GestureCallbacks   — the optional consumer callbacks, fired synchronously.
EventDispatcher    — routes EmittedEvents to the matching callback.
SnapshotPublisher  — throttles republishing of the continuous snapshot.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from treegestures.domain.enums import GestureEvent
from treegestures.domain.models import EmittedEvent, GestureSnapshot
from treegestures.utils.constants import (
    POSITION_TOLERANCE,
    PUBLISH_INTERVAL_MS,
    SCROLL_TOLERANCE,
)

logger = logging.getLogger(__name__)


@dataclass
class GestureCallbacks:
    """All callbacks are optional and fire-and-forget."""
    on_select: Optional[Callable[[], None]] = None
    on_index_move: Optional[Callable[[float, float], None]] = None
    on_delta_move: Optional[Callable[[float, float], None]] = None
    # reserved: no current predicate emits a plain zoom
    on_zoom: Optional[Callable[[float], None]] = None
    on_five_finger_zoom: Optional[Callable[[float], None]] = None
    on_scroll_move: Optional[Callable[[float], None]] = None

    def handler_for(self, kind: GestureEvent) -> Optional[Callable[..., None]]:
        return {
            GestureEvent.SELECT:           self.on_select,
            GestureEvent.INDEX_MOVE:       self.on_index_move,
            GestureEvent.DELTA_MOVE:       self.on_delta_move,
            GestureEvent.ZOOM:             self.on_zoom,
            GestureEvent.FIVE_FINGER_ZOOM: self.on_five_finger_zoom,
            GestureEvent.SCROLL_MOVE:      self.on_scroll_move,
        }[kind]


class EventDispatcher:
    """
    Fires each event's callback in emission order. A failing callback is
    logged and skipped; it never interrupts the frame.
    """

    def __init__(self, callbacks: Optional[GestureCallbacks] = None) -> None:
        self._callbacks = callbacks or GestureCallbacks()

    @property
    def callbacks(self) -> GestureCallbacks:
        return self._callbacks

    def dispatch(self, events: Iterable[EmittedEvent]) -> None:
        for event in events:
            handler = self._callbacks.handler_for(event.kind)
            if handler is None:
                continue
            try:
                handler(*event.args)
            except Exception:
                logger.exception("Callback for %s raised", event.kind.value)


class SnapshotPublisher:
    """
    Republishes the snapshot at most once per ``interval_ms`` while it stays
    approximately the same, and immediately when it changes beyond tolerance.

    Parameters
    ----------
    on_publish : callable, optional
        Slow consumer receiving each published snapshot.
    interval_ms : float
        Minimum time between publishes of an unchanged snapshot.
    """

    def __init__(
        self,
        on_publish: Optional[Callable[[GestureSnapshot], None]] = None,
        interval_ms: float = PUBLISH_INTERVAL_MS,
        tolerance: float = POSITION_TOLERANCE,
        scroll_tolerance: float = SCROLL_TOLERANCE,
    ) -> None:
        self._on_publish = on_publish
        self._interval = interval_ms
        self._tolerance = tolerance
        self._scroll_tolerance = scroll_tolerance
        self.reset()

    # ------------------------------------------------------------------
    def offer(self, snapshot: GestureSnapshot, now: float) -> bool:
        """Returns True when the snapshot was published."""
        if not self._due(snapshot, now):
            return False

        self._last = snapshot
        self._last_time = now
        if self._on_publish is not None:
            try:
                self._on_publish(snapshot)
            except Exception:
                logger.exception("Snapshot consumer raised")
        return True

    def _due(self, snapshot: GestureSnapshot, now: float) -> bool:
        if self._last is None or self._last_time is None:
            return True
        if now - self._last_time >= self._interval:
            return True
        return not snapshot.approx_equal(self._last, self._tolerance, self._scroll_tolerance)

    @property
    def last_published(self) -> Optional[GestureSnapshot]:
        return self._last

    @property
    def last_publish_time(self) -> Optional[float]:
        return self._last_time

    def reset(self) -> None:
        self._last: Optional[GestureSnapshot] = None
        self._last_time: Optional[float] = None
