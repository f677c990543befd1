"""
CooldownManager — centralises cooldown state so gesture classes
don't need to track time themselves.

Timestamps are supplied by the caller (monotonic milliseconds), which keeps
every gesture deterministic under test.
"""
from __future__ import annotations
from typing import Dict, Optional


class CooldownManager:
    """
    Per-event cooldown tracker.

    Usage
    -----
    cm = CooldownManager(default_cooldown=500)
    if cm.ok("SELECT", now):
        ...  # fire the event
    """

    def __init__(self, default_cooldown: float = 500.0) -> None:
        self._default = default_cooldown
        self._last: Dict[str, float] = {}

    def ok(self, name: str, now: float, cooldown: Optional[float] = None) -> bool:
        """
        Return True (and record ``now``) if the cooldown has elapsed since
        the last accepted event of this name, or none was accepted yet.
        """
        if not self.ready(name, now, cooldown):
            return False
        self._last[name] = now
        return True

    def ready(self, name: str, now: float, cooldown: Optional[float] = None) -> bool:
        """Like ok() but without recording anything."""
        threshold = cooldown if cooldown is not None else self._default
        last = self._last.get(name)
        return last is None or now - last >= threshold

    def last(self, name: str) -> Optional[float]:
        return self._last.get(name)

    def reset(self, name: str) -> None:
        """Force-reset a specific cooldown (next call to ok() will succeed)."""
        self._last.pop(name, None)

    def reset_all(self) -> None:
        self._last.clear()
