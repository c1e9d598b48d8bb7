
from .ease import Easing
from .keyframe import Keyframe
from .track import Track, TrackProperty, interpolate
from .clip import AnimationClip
from .sampler import motion_path, reconcile, sample_clip, sample_tracks
from .playback import LoopRange, frame_interval, next_frame

__all__ = [
    "Easing",
    "Keyframe",
    "Track",
    "TrackProperty",
    "interpolate",
    "AnimationClip",
    "sample_tracks",
    "reconcile",
    "sample_clip",
    "motion_path",
    "LoopRange",
    "next_frame",
    "frame_interval",
]
