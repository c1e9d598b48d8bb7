"""Game-engine export of a rig and its clips (JSON)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from rigpose.animation.clip import AnimationClip
from rigpose.rig.bone import Bone

EXPORT_APP = "rigpose"
EXPORT_VERSION = "2.0"


def game_data(bones: Sequence[Bone], clips: Sequence[AnimationClip], fps: float = 24) -> dict:
    """
    Build the export document.

    Bones are listed by name with their parent id and local transform;
    keys are written as {t, v, curve}.
    """
    return {
        "meta": {
            "app": EXPORT_APP,
            "version": EXPORT_VERSION,
            "fps": fps,
        },
        "skeleton": [
            {
                "name": bone.name,
                "parent": bone.parent_id,
                "transform": {"x": bone.x, "y": bone.y, "rot": bone.rotation, "len": bone.length},
            }
            for bone in bones
        ],
        "animations": [
            {
                "name": clip.name,
                "duration": clip.duration,
                "tracks": [
                    {
                        "bone": track.bone_id,
                        "property": track.property.value,
                        "keys": [
                            {"t": k.time, "v": k.value, "curve": k.easing.value}
                            for k in track.keyframes
                        ],
                    }
                    for track in clip.tracks
                ],
            }
            for clip in clips
        ],
    }


def export_game_data(bones: Sequence[Bone], clips: Sequence[AnimationClip], fps: float = 24) -> str:
    """Export document as indented JSON text."""
    return json.dumps(game_data(bones, clips, fps), indent=2, ensure_ascii=False)


def save_game_data(
    bones: Sequence[Bone],
    clips: Sequence[AnimationClip],
    path: str | Path,
    fps: float = 24,
) -> None:
    """
    Write the export document to path.

    Args:
        bones: Rig bones
        clips: Clips to include
        path: Output file
        fps: Frame rate written to meta
    """
    path = Path(path)
    path.write_text(export_game_data(bones, clips, fps), encoding="utf-8")
