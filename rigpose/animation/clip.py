"""AnimationClip: a set of tracks with duration and frame rate."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple

from rigpose.rig.bone import Bone, BoneProperty

from .ease import Easing
from .track import Track, TrackProperty


@dataclass(frozen=True)
class AnimationClip:
    """
    Attributes:
        id: Clip id
        name: Display name
        duration: Length in frames
        fps: Playback frame rate
        tracks: Tracks, at most one per (bone_id, property)
    """

    id: str
    name: str = ""
    duration: float = 0.0
    fps: float = 24.0
    tracks: Tuple[Track, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "tracks", tuple(self.tracks))

    def find_track(self, bone_id: str, prop: BoneProperty | TrackProperty) -> Optional[Track]:
        """First track animating prop of bone_id."""
        if isinstance(prop, BoneProperty):
            prop = TrackProperty.of(prop)
        for track in self.tracks:
            if track.bone_id == bone_id and track.property is prop:
                return track
        return None

    def with_track(self, track: Track) -> "AnimationClip":
        """New clip where track replaces the one for the same bone/property, or is appended."""
        tracks = list(self.tracks)
        for i, existing in enumerate(tracks):
            if existing.bone_id == track.bone_id and existing.property is track.property:
                tracks[i] = track
                break
        else:
            tracks.append(track)
        return replace(self, tracks=tuple(tracks))

    def key_properties(
        self,
        bone: Bone,
        frame: float,
        properties: Iterable[BoneProperty],
        easing: Easing = Easing.LINEAR,
    ) -> "AnimationClip":
        """Key the bone's current value of each property at frame (auto-key)."""
        clip = self
        for prop in properties:
            track = clip.find_track(bone.id, prop) or Track(bone.id, TrackProperty.of(prop))
            clip = clip.with_track(track.with_keyframe(frame, prop.get(bone), easing))
        return clip

    def key_bone(self, bone: Bone, frame: float) -> "AnimationClip":
        """Key rotation, plus x and y for root bones, at frame."""
        props = [BoneProperty.ROTATION]
        if bone.is_root:
            props += [BoneProperty.X, BoneProperty.Y]
        return self.key_properties(bone, frame, props)

    def serialize(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "duration": self.duration,
            "fps": self.fps,
            "tracks": [t.serialize() for t in self.tracks],
        }

    @classmethod
    def deserialize(cls, data: dict) -> "AnimationClip":
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            duration=float(data.get("duration", 0.0)),
            fps=float(data.get("fps", 24.0)),
            tracks=tuple(Track.deserialize(t) for t in data.get("tracks") or ()),
        )

    def __repr__(self) -> str:
        return f"<AnimationClip '{self.name or self.id}' frames={self.duration} fps={self.fps} tracks={len(self.tracks)}>"
