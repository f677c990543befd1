"""
Abstract base class for all gesture classifiers.

Every gesture must:
  - implement detect(frame_data, ...) → list[EmittedEvent]
  - implement reset()
  - expose an ``active`` flag for the arbiter
  - declare its NAME class attribute
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from treegestures.domain.models import EmittedEvent, FrameData


class Gesture(ABC):
    """Base class for all gesture classifiers."""

    # Override in subclasses for logging
    NAME: str = "UNNAMED_GESTURE"

    @abstractmethod
    def detect(self, frame_data: FrameData, *args, **kwargs) -> List[EmittedEvent]:
        """
        Analyse one frame and return any triggered events.

        Parameters
        ----------
        frame_data : FrameData
            Validated hand sample and timestamp.

        Returns
        -------
        list[EmittedEvent]
            Empty list when nothing fired this frame.
        """

    @abstractmethod
    def reset(self) -> None:
        """
        Reset all internal state.
        Called by GestureManager on teardown or hand loss.
        """

    @property
    @abstractmethod
    def active(self) -> bool:
        """Whether the gesture currently holds its mode."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.NAME!r} active={self.active}>"
