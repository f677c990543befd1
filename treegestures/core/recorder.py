"""
Landmark recorder for saving hand-sample streams that ReplayFrameSource
can play back.
"""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from treegestures.core.validation import validate_sample

logger = logging.getLogger(__name__)


class LandmarkRecorder:
    def __init__(self) -> None:
        self.frames: List[Dict[str, Any]] = []

    def add_frame(self, sample: Any, timestamp: float) -> None:
        """Invalid or missing samples are stored as frames without a hand."""
        validated = validate_sample(sample)
        landmarks = None if validated is None else [[p.x, p.y, p.z] for p in validated]
        self.frames.append({
            "timestamp_ms": round(float(timestamp), 3),
            "landmarks": landmarks,
        })

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.frames, f)
        logger.info("Saved %d landmark frames to %s", len(self.frames), path)
        return path

    def __len__(self) -> int:
        return len(self.frames)
