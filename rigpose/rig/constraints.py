"""Rotation limit evaluation."""

from __future__ import annotations

import math
from typing import Optional

from .bone import Bone


def normalize_rotation(deg: float) -> float:
    """Bring deg into (-180, 180] by whole turns."""
    deg = math.fmod(deg, 360.0)
    if deg > 180:
        deg -= 360
    elif deg <= -180:
        deg += 360
    return deg


def clamp_rotation(deg: float, min: Optional[float] = None, max: Optional[float] = None) -> float:
    """Normalize deg, then clamp it to the bounds that are set."""
    deg = normalize_rotation(deg)
    if min is not None and deg < min:
        return min
    if max is not None and deg > max:
        return max
    return deg


def constrained_rotation(bone: Bone, rotation: Optional[float] = None) -> float:
    """
    Effective local rotation of bone.

    With a LIMIT_ROTATION constraint the value is normalized and hard-clamped
    (influence is not blended). Without one the raw value is returned as is.
    `rotation` overrides bone.rotation as the input value.
    """
    value = bone.rotation if rotation is None else rotation
    limit = bone.rotation_limit()
    if limit is None:
        return value
    return clamp_rotation(value, limit.min, limit.max)
