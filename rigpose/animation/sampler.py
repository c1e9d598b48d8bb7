"""
Clip sampling: the rig pose at one frame of an animation clip.

Sampling is two pure stages:
1. sample_tracks() overrides bone properties with interpolated track values.
2. reconcile() runs the pose pipeline and copies the constrained (and driven)
   local values back, so a keyed rotation past a limit shows up clamped in the
   bone state too.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

import numpy as np

from rigpose.kinematic.fk import DerivedBone, calculate_pose, find_derived
from rigpose.rig.bone import Bone, BoneProperty
from rigpose.settings import PoseSettings

from .clip import AnimationClip
from .track import interpolate


def sample_tracks(bones: Sequence[Bone], clip: AnimationClip, frame: float) -> List[Bone]:
    """Bones with every animated property replaced by its value at frame."""
    result = []
    for bone in bones:
        sampled = bone
        for prop in BoneProperty:
            track = clip.find_track(bone.id, prop)
            if track is None:
                continue
            value = interpolate(track, frame)
            if value is not None:
                sampled = prop.set(sampled, value)
        result.append(sampled)
    return result


def reconcile(bones: Sequence[Bone], derived: Sequence[DerivedBone]) -> List[Bone]:
    """Copy rotation/x/y from the derived pose onto bones; bones not posed stay as they are."""
    by_id = {d.id: d for d in derived}
    result = []
    for bone in bones:
        d = by_id.get(bone.id)
        if d is None:
            result.append(bone)
        else:
            result.append(replace(bone, rotation=d.rotation, x=d.x, y=d.y))
    return result


def sample_clip(
    bones: Sequence[Bone],
    clip: AnimationClip,
    frame: float,
    settings: PoseSettings | None = None,
) -> List[Bone]:
    """Constrained rig state at frame."""
    sampled = sample_tracks(bones, clip, frame)
    return reconcile(sampled, calculate_pose(sampled, settings))


def motion_path(
    bones: Sequence[Bone],
    clip: AnimationClip,
    bone_id: str,
    settings: PoseSettings | None = None,
) -> List[np.ndarray]:
    """
    World start point of bone_id over the clip.

    Sampled every settings.motion_path_step frames from 0 to clip.duration
    inclusive. Frames where the bone is not posed are skipped.
    """
    settings = settings or PoseSettings()
    points = []
    frame = 0
    while frame <= clip.duration:
        state = sample_clip(bones, clip, frame, settings)
        derived = find_derived(calculate_pose(state, settings), bone_id)
        if derived is not None:
            points.append(derived.world_start)
        frame += settings.motion_path_step
    return points
