"""
TrackingSession — lifecycle of hand tracking.

enable() opens a frame source and creates a fresh GestureManager;
disable() closes the source and drops the manager, so no gesture state
survives a disable/enable cycle. step() moves one frame through the
pipeline; run() loops until the source runs dry or tracking is disabled.
"""
from __future__ import annotations
import logging
from typing import Callable, Optional

from treegestures.core.emitter import GestureCallbacks
from treegestures.core.frame_source import FrameSource
from treegestures.core.gesture_manager import GestureManager
from treegestures.domain.config import GestureConfig
from treegestures.domain.models import FrameResult, GestureSnapshot, SourceFrame

logger = logging.getLogger(__name__)

FrameHook = Callable[[SourceFrame, FrameResult], Optional[bool]]


class TrackingSession:
    """
    Parameters
    ----------
    config : GestureConfig
    callbacks : GestureCallbacks
        Handed to every engine the session creates.
    source_factory : callable
        Returns a new, unopened FrameSource on each enable().
    on_snapshot : callable, optional
        Throttled snapshot consumer.
    """

    def __init__(
        self,
        config: Optional[GestureConfig] = None,
        callbacks: Optional[GestureCallbacks] = None,
        source_factory: Optional[Callable[[], FrameSource]] = None,
        on_snapshot: Optional[Callable[[GestureSnapshot], None]] = None,
    ) -> None:
        if source_factory is None:
            raise ValueError("source_factory is required")
        self._cfg = config or GestureConfig()
        self._callbacks = callbacks or GestureCallbacks()
        self._source_factory = source_factory
        self._on_snapshot = on_snapshot

        self._source:  Optional[FrameSource]    = None
        self._engine:  Optional[GestureManager] = None
        self._error:   Optional[str]            = None
        self._initializing = False

    # ------------------------------------------------------------------
    def enable(self) -> bool:
        """Start tracking. Returns True when tracking is running."""
        if self._engine is not None or self._initializing:
            logger.debug("Tracking already enabled, skipping")
            return self._engine is not None

        self._initializing = True
        logger.info("Starting hand tracking")
        source: Optional[FrameSource] = None
        try:
            source = self._source_factory()
            source.open()
        except Exception as exc:
            self._error = str(exc) or exc.__class__.__name__
            logger.error("Hand tracking failed to start: %s", self._error)
            if source is not None:
                self._close_source(source)
            return False
        finally:
            self._initializing = False

        self._source = source
        self._engine = GestureManager(self._cfg, self._callbacks, self._on_snapshot)
        self._error = None
        logger.info("Hand tracking started")
        return True

    def disable(self) -> None:
        """Stop tracking and discard all gesture state."""
        if self._engine is None and self._source is None:
            return
        if self._source is not None:
            self._close_source(self._source)
        self._source = None
        self._engine = None
        logger.info("Hand tracking stopped")

    @staticmethod
    def _close_source(source: FrameSource) -> None:
        try:
            source.close()
        except Exception as exc:
            logger.warning("Error closing frame source: %s", exc)

    # ------------------------------------------------------------------
    def step(self) -> Optional[FrameResult]:
        """Process one frame; None when disabled or the source is exhausted."""
        frame = self.read_frame()
        if frame is None:
            return None
        return self.process(frame)

    def read_frame(self) -> Optional[SourceFrame]:
        if self._source is None or self._engine is None:
            return None
        frame = self._source.read()
        if frame is None:
            logger.info("Frame source exhausted")
            self.disable()
        return frame

    def process(self, frame: SourceFrame) -> Optional[FrameResult]:
        if self._engine is None:
            return None
        return self._engine.update(frame.sample, frame.timestamp)

    def run(self, max_frames: Optional[int] = None, on_frame: Optional[FrameHook] = None) -> int:
        """
        Loop step() until the source is exhausted, tracking is disabled,
        ``max_frames`` frames were processed, or ``on_frame`` returns True.
        Returns the number of frames processed.
        """
        processed = 0
        while self.enabled and (max_frames is None or processed < max_frames):
            frame = self.read_frame()
            if frame is None:
                break
            result = self.process(frame)
            processed += 1
            if on_frame is not None and result is not None and on_frame(frame, result):
                break
        return processed

    # ------------------------------------------------------------------
    @property
    def enabled(self) -> bool:
        return self._engine is not None

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def engine(self) -> Optional[GestureManager]:
        return self._engine

    @property
    def snapshot(self) -> GestureSnapshot:
        return self._engine.snapshot if self._engine is not None else GestureSnapshot()

    def __enter__(self) -> "TrackingSession":
        self.enable()
        return self

    def __exit__(self, *_) -> None:
        self.disable()
