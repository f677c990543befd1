"""
CameraFrameSource — live frames: OpenCV camera feeding MediaPipe Hands.

Kept apart from frame_source so replay and tests never load cv2/mediapipe.
"""
from __future__ import annotations
import logging
import time
from typing import Optional

from treegestures.core.camera import Camera
from treegestures.core.frame_source import FrameSource
from treegestures.core.hand_tracker import HandTracker
from treegestures.domain.models import SourceFrame

logger = logging.getLogger(__name__)


class CameraFrameSource(FrameSource):
    """Parameters mirror Camera and HandTracker."""

    def __init__(
        self,
        device: int = 0,
        fps_limit: int = 30,
        width: Optional[int] = 320,
        height: Optional[int] = 240,
        model_complexity: int = 0,
        min_detection_confidence: float = 0.6,
        min_tracking_confidence: float = 0.6,
    ) -> None:
        self._camera_args = dict(device=device, fps_limit=fps_limit, width=width, height=height)
        self._tracker_args = dict(
            max_num_hands=1,
            model_complexity=model_complexity,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        self._camera:  Optional[Camera]      = None
        self._tracker: Optional[HandTracker] = None

    def open(self) -> None:
        self._camera = Camera(**self._camera_args)
        try:
            self._tracker = HandTracker(**self._tracker_args)
        except Exception:
            self._camera.release()
            self._camera = None
            raise

    def read(self) -> Optional[SourceFrame]:
        if self._camera is None or self._tracker is None:
            return None
        image = self._camera.read()
        if image is None:
            logger.warning("Camera returned no frame")
            return None
        landmarks = self._tracker.process(image)
        return SourceFrame(sample=landmarks, timestamp=time.monotonic() * 1000.0, image=image)

    def close(self) -> None:
        if self._camera is not None:
            self._camera.release()
            self._camera = None
        if self._tracker is not None:
            self._tracker.release()
            self._tracker = None
