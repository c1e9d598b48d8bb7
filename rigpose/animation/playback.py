"""Frame stepping for clip playback."""

from __future__ import annotations

from dataclasses import dataclass

from .clip import AnimationClip


@dataclass(frozen=True)
class LoopRange:
    """Sub-range of a clip that playback cycles through when enabled."""

    enabled: bool = False
    start: int = 0
    end: int = 0

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError("loop range end must not precede start")


def next_frame(frame: int, clip: AnimationClip, loop_range: LoopRange | None = None) -> int:
    """
    Frame that follows frame during playback.

    With an enabled loop range playback returns to start after end.
    Otherwise it returns to 0 when duration is reached.
    """
    following = frame + 1
    if loop_range is not None and loop_range.enabled:
        return loop_range.start if following > loop_range.end else following
    return 0 if following >= clip.duration else following


def frame_interval(clip: AnimationClip, speed: float = 1.0) -> float:
    """Seconds between frames at the given playback speed."""
    if clip.fps <= 0:
        raise ValueError("clip fps must be positive")
    if speed <= 0:
        raise ValueError("playback speed must be positive")
    return 1.0 / clip.fps / speed
