"""
Frame sources — where hand samples come from.

The gesture engine only ever sees SourceFrame values; whether they were
produced live by a camera + MediaPipe or replayed from a recording is
hidden behind FrameSource.
"""
from __future__ import annotations
import json
import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from treegestures.domain.models import SourceFrame

logger = logging.getLogger(__name__)


class FrameSource(ABC):
    """Open → read until None → close."""

    @abstractmethod
    def open(self) -> None:
        """Acquire resources. May raise if the source is unavailable."""

    @abstractmethod
    def read(self) -> Optional[SourceFrame]:
        """Next frame, or None when the source is exhausted."""

    @abstractmethod
    def close(self) -> None:
        """Release resources. Safe to call more than once."""

    def __enter__(self) -> "FrameSource":
        self.open()
        return self

    def __exit__(self, *_) -> None:
        self.close()


class ReplayFrameSource(FrameSource):
    """
    Replays a JSON recording written by LandmarkRecorder:

        [{"timestamp_ms": 0.0, "landmarks": [[x, y, z], ... 21]}, ...]

    ``landmarks`` is null for frames without a hand.

    Parameters
    ----------
    path_or_frames : path or list
        Recording file, or already-loaded frame dicts.
    realtime : bool
        Sleep between frames to reproduce the recorded pacing.
    """

    def __init__(self, path_or_frames: Union[str, Path, List[Dict[str, Any]]], realtime: bool = False) -> None:
        self._source = path_or_frames
        self._realtime = realtime
        self._frames: List[Dict[str, Any]] = []
        self._index = 0
        self._prev_ts: Optional[float] = None

    def open(self) -> None:
        if isinstance(self._source, (str, Path)):
            with open(self._source, "r", encoding="utf-8") as f:
                self._frames = json.load(f)
            logger.info("Loaded %d recorded frames from %s", len(self._frames), self._source)
        else:
            self._frames = list(self._source)
        if not isinstance(self._frames, list):
            raise ValueError(f"Recording must be a list of frames, got {type(self._frames).__name__}")
        self._index = 0
        self._prev_ts = None

    def read(self) -> Optional[SourceFrame]:
        while self._index < len(self._frames):
            entry = self._frames[self._index]
            self._index += 1
            try:
                timestamp = float(entry["timestamp_ms"])
                landmarks = entry.get("landmarks")
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.warning("Skipping malformed recorded frame %d: %r", self._index - 1, exc)
                continue
            return self._emit(timestamp, landmarks)
        return None

    def _emit(self, timestamp: float, landmarks: Any) -> SourceFrame:
        if self._realtime and self._prev_ts is not None and timestamp > self._prev_ts:
            time.sleep((timestamp - self._prev_ts) / 1000.0)
        self._prev_ts = timestamp
        return SourceFrame(sample=landmarks, timestamp=timestamp)

    def close(self) -> None:
        self._frames = []
        self._index = 0

    def __len__(self) -> int:
        return len(self._frames)
