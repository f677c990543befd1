"""
StabilityCounter — debounces a per-frame boolean predicate.

A mode only becomes active once its predicate has held for a number of
consecutive frames; a single failing frame drops the count back to zero.
"""
from __future__ import annotations


class StabilityCounter:
    """
    Parameters
    ----------
    required_frames : int
        Consecutive successes needed before the counter reports stable.
    """

    def __init__(self, required_frames: int) -> None:
        self._required = required_frames
        self._count = 0

    # ------------------------------------------------------------------
    def update(self, holds: bool) -> bool:
        """Feed one frame's predicate result; returns True once stable."""
        if holds:
            self._count += 1
        else:
            self._count = 0
        return self.stable

    @property
    def count(self) -> int:
        return self._count

    @property
    def stable(self) -> bool:
        return self._count >= self._required

    def reset(self) -> None:
        self._count = 0
