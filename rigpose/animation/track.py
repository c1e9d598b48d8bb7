"""Animation track: keyframes of one bone property, and their interpolation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from rigpose.rig.bone import BoneProperty

from .ease import Easing, evaluate as ease_evaluate
from .keyframe import Keyframe


class TrackProperty(Enum):
    """Property a track animates. VARIANT tracks carry sprite swaps and are not interpolated."""

    ROTATION = "rotation"
    X = "x"
    Y = "y"
    VARIANT = "variant"

    @property
    def bone_property(self) -> Optional[BoneProperty]:
        """Matching BoneProperty, or None for VARIANT."""
        if self is TrackProperty.ROTATION:
            return BoneProperty.ROTATION
        if self is TrackProperty.X:
            return BoneProperty.X
        if self is TrackProperty.Y:
            return BoneProperty.Y
        return None

    @staticmethod
    def of(prop: BoneProperty) -> "TrackProperty":
        return TrackProperty(prop.value)


@dataclass(frozen=True)
class Track:
    """
    Keyframes of one property of one bone.

    Callers keep at most one keyframe per time; with_keyframe() does that for them.
    """

    bone_id: str
    property: TrackProperty
    keyframes: Tuple[Keyframe, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "property", TrackProperty(self.property))
        object.__setattr__(self, "keyframes", tuple(self.keyframes))

    def with_keyframe(self, time: float, value: float, easing: Easing = Easing.LINEAR) -> "Track":
        """New track with a key at time; an existing key at that time is replaced."""
        key = Keyframe(time=time, value=value, easing=easing)
        kept = [k for k in self.keyframes if k.time != key.time]
        kept.append(key)
        kept.sort(key=lambda k: k.time)
        return replace(self, keyframes=tuple(kept))

    def without_keyframe(self, time: float) -> "Track":
        """New track with any key at time removed."""
        return replace(self, keyframes=tuple(k for k in self.keyframes if k.time != float(time)))

    def serialize(self) -> dict:
        return {
            "boneId": self.bone_id,
            "property": self.property.value,
            "keyframes": [k.serialize() for k in self.keyframes],
        }

    @classmethod
    def deserialize(cls, data: dict) -> "Track":
        return cls(
            bone_id=data["boneId"],
            property=TrackProperty(data["property"]),
            keyframes=tuple(Keyframe.deserialize(k) for k in data.get("keyframes") or ()),
        )


def interpolate(track: Track, frame: float) -> Optional[float]:
    """
    Value of track at a (possibly fractional) frame.

    Returns None when the track has no keyframes. Before the first key and after
    the last one the end values hold. Between keys k1 <= frame < k2 the easing
    of k1 shapes the blend.
    """
    if not track.keyframes:
        return None

    keys = sorted(track.keyframes, key=lambda k: k.time)

    first = keys[0]
    last = keys[-1]
    if frame <= first.time:
        return first.value
    if frame >= last.time:
        return last.value

    for k1, k2 in zip(keys, keys[1:]):
        if k1.time <= frame < k2.time:
            t = (frame - k1.time) / (k2.time - k1.time)
            t = ease_evaluate(k1.easing, t)
            return k1.value + (k2.value - k1.value) * t

    return first.value
