"""
Camera — thin wrapper around OpenCV VideoCapture with FPS limiting.
No ML, no gestures.
"""
from __future__ import annotations
import logging
import time
from typing import Optional

import cv2
import numpy as np

from treegestures.domain.errors import CameraError

logger = logging.getLogger(__name__)


class Camera:
    """
    Parameters
    ----------
    device : int
        Camera index (0 = default webcam).
    fps_limit : int
        Maximum frames per second to process.
    width, height : int, optional
        Requested capture size; lower resolutions keep the hand model fast.
    """

    def __init__(
        self,
        device: int = 0,
        fps_limit: int = 30,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> None:
        self._cap = cv2.VideoCapture(device)
        self._frame_time = 1.0 / fps_limit
        self._prev_time: float = 0.0

        if not self._cap.isOpened():
            raise CameraError(f"Cannot open camera device {device}")

        if width:
            self._cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        if height:
            self._cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
        logger.info(
            "Camera %s opened at %.0fx%.0f, fps cap %d",
            device,
            self._cap.get(cv2.CAP_PROP_FRAME_WIDTH),
            self._cap.get(cv2.CAP_PROP_FRAME_HEIGHT),
            fps_limit,
        )

    # ------------------------------------------------------------------
    def read(self) -> Optional[np.ndarray]:
        """
        Wait until the next frame is due (FPS limiter), then return it.
        Returns None on read failure.
        """
        wait = self._frame_time - (time.monotonic() - self._prev_time)
        if wait > 0:
            time.sleep(wait)
        self._prev_time = time.monotonic()

        ret, frame = self._cap.read()
        return frame if ret else None

    def release(self) -> None:
        self._cap.release()

    def __enter__(self) -> "Camera":
        return self

    def __exit__(self, *_) -> None:
        self.release()
