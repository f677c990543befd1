"""
HandTracker — encapsulates all MediaPipe logic.
The rest of the application never imports mediapipe directly.
"""
from __future__ import annotations
import logging
from typing import Any, Optional

import cv2
import mediapipe as mp

logger = logging.getLogger(__name__)


class HandTracker:
    """
    Processes a BGR frame and returns the landmarks of the first detected
    hand, in MediaPipe's normalised image coordinates.

    Parameters
    ----------
    max_num_hands : int
    model_complexity : int
        0 = lite model (fastest), 1 = full.
    min_detection_confidence : float
    min_tracking_confidence : float
    """

    def __init__(
        self,
        max_num_hands: int = 1,
        model_complexity: int = 0,
        min_detection_confidence: float = 0.6,
        min_tracking_confidence: float = 0.6,
    ) -> None:
        self._mp_hands = mp.solutions.hands
        self._hands    = self._mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            model_complexity=model_complexity,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        logger.debug("MediaPipe Hands ready (complexity=%d)", model_complexity)

    # ------------------------------------------------------------------
    def process(self, frame: Any) -> Optional[Any]:
        """
        Parameters
        ----------
        frame : np.ndarray
            BGR frame from OpenCV.

        Returns
        -------
        The landmark list of the first hand (21 points with .x/.y/.z),
        or None when no hand was found.
        """
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        results = self._hands.process(rgb)

        if not results.multi_hand_landmarks:
            return None
        return results.multi_hand_landmarks[0].landmark

    def release(self) -> None:
        self._hands.close()
