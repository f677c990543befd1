"""
GestureConfig — every tunable of the gesture engine in one immutable object.
Defaults come from utils.constants; components receive this object instead
of reading module-level constants.
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from treegestures.domain.errors import ConfigError
from treegestures.utils import constants as C


@dataclass(frozen=True)
class GestureConfig:
    # ---- pinch / tap ---------------------------------------------------
    pinch_threshold: float = C.PINCH_THRESHOLD
    pinch_exclusion: float = C.PINCH_EXCLUSION_THRESHOLD
    pinch_stability_frames: int = C.PINCH_STABILITY_FRAMES
    pinch_min_hold_ms: float = C.PINCH_MIN_HOLD_MS
    pinch_max_hold_ms: float = C.PINCH_MAX_HOLD_MS
    select_cooldown_ms: float = C.SELECT_COOLDOWN_MS

    # ---- five-finger ---------------------------------------------------
    five_finger_stability_frames: int = C.FIVE_FINGER_STABILITY_FRAMES
    spread_zoom_sensitivity: float = C.SPREAD_ZOOM_SENSITIVITY
    five_finger_rotation_mult: float = C.FIVE_FINGER_ROTATION_MULT
    zoom_delta_threshold: float = C.ZOOM_DELTA_THRESHOLD
    finger_extension_margin: float = C.FINGER_EXTENSION_MARGIN

    # ---- scroll --------------------------------------------------------
    clump_threshold: float = C.CLUMP_THRESHOLD
    index_extension_threshold: float = C.INDEX_EXTENSION_THRESHOLD

    # ---- pointer / delta -----------------------------------------------
    smoothing_factor: float = C.SMOOTHING_FACTOR
    delta_deadzone: float = C.DELTA_DEADZONE

    # ---- snapshot publishing -------------------------------------------
    publish_interval_ms: float = C.PUBLISH_INTERVAL_MS
    position_tolerance: float = C.POSITION_TOLERANCE
    scroll_tolerance: float = C.SCROLL_TOLERANCE

    # ---- hand loss -----------------------------------------------------
    reset_on_hand_loss: bool = True

    def __post_init__(self) -> None:
        if self.pinch_stability_frames < 1 or self.five_finger_stability_frames < 1:
            raise ConfigError("stability frame counts must be >= 1")
        if not 0.0 < self.smoothing_factor <= 1.0:
            raise ConfigError(f"smoothing_factor must be in (0, 1], got {self.smoothing_factor}")
        if self.pinch_min_hold_ms > self.pinch_max_hold_ms:
            raise ConfigError("pinch_min_hold_ms must not exceed pinch_max_hold_ms")
        if self.publish_interval_ms <= 0:
            raise ConfigError("publish_interval_ms must be positive")
        for name in ("pinch_threshold", "pinch_exclusion", "clump_threshold",
                     "index_extension_threshold", "finger_extension_margin"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        for name in ("delta_deadzone", "select_cooldown_ms", "zoom_delta_threshold",
                     "position_tolerance", "scroll_tolerance"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GestureConfig":
        """Build from a mapping of overrides; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown gesture setting(s): {', '.join(unknown)}")
        return cls(**dict(data))

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
