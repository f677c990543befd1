"""
Input validation for hand samples.

A corrupted frame must never crash the control loop, so anything that is not
exactly 21 finite 3D landmarks is rejected and treated as "no hand".
"""
from __future__ import annotations
import logging
from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional

import numpy as np

from treegestures.domain.models import HandSample, Landmark
from treegestures.utils.constants import NUM_LANDMARKS

logger = logging.getLogger(__name__)


def _coords(point: Any) -> Any:
    if hasattr(point, "x") and hasattr(point, "y") and hasattr(point, "z"):
        return (point.x, point.y, point.z)
    if isinstance(point, Mapping):
        return (point["x"], point["y"], point["z"])
    return point


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, (bool, np.bool_))


def validate_sample(raw: Any) -> Optional[HandSample]:
    """
    Accepts a sequence of (x, y, z) tuples, MediaPipe landmark objects,
    {"x", "y", "z"} mappings, a MediaPipe landmark list (``.landmark``) or a
    (21, 3) array. Returns an immutable tuple of Landmarks, or None.
    """
    if raw is None:
        return None

    if hasattr(raw, "landmark"):
        raw = raw.landmark

    try:
        points = [tuple(_coords(p)) for p in raw]
    except (TypeError, KeyError) as exc:
        logger.debug("Rejected hand sample: %s", exc)
        return None

    # strings and bools would be coerced silently by numpy
    if not all(_is_number(c) for point in points for c in point):
        logger.debug("Rejected hand sample with non-numeric coordinates")
        return None

    try:
        arr = np.asarray(points, dtype=float)
    except ValueError as exc:
        logger.debug("Rejected hand sample: %s", exc)
        return None

    if arr.shape != (NUM_LANDMARKS, 3):
        logger.debug("Rejected hand sample with shape %s", arr.shape)
        return None
    if not np.isfinite(arr).all():
        logger.debug("Rejected hand sample with non-finite coordinates")
        return None

    return tuple(Landmark(float(x), float(y), float(z)) for x, y, z in arr)
