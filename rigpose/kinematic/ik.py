"""
Cyclic-coordinate-descent inverse kinematics for 2D bone chains.

Each outer iteration walks the chain from the effector towards the root and
turns every joint so that the pivot→effector direction lines up with the
pivot→target direction, re-evaluating the whole pose after every joint.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import List, Sequence

import numpy as np

from rigpose import log
from rigpose.rig.bone import Bone, index_bones
from rigpose.rig.constraints import constrained_rotation
from rigpose.settings import PoseSettings
from rigpose.util import as_point, rad2deg, wrap_degrees

from .fk import calculate_pose, find_derived


def build_chain(bones: Sequence[Bone], effector_id: str, max_length: int = 4) -> List[str]:
    """
    Bone ids from the effector up through its ancestors, effector first.

    Stops at a root, at a parent id that does not resolve, or after max_length bones.
    """
    by_id = index_bones(bones)
    chain: List[str] = []
    current = by_id.get(effector_id)
    while current is not None and len(chain) < max_length:
        if current.id in chain:
            break
        chain.append(current.id)
        current = by_id.get(current.parent_id) if current.parent_id is not None else None
    return chain


def signed_angle(pivot, current, target) -> float:
    """Degrees to turn pivot→current onto pivot→target, in [-180, 180]."""
    pivot = as_point(pivot)
    to_current = as_point(current) - pivot
    to_target = as_point(target) - pivot
    ang_current = math.atan2(to_current[1], to_current[0])
    ang_target = math.atan2(to_target[1], to_target[0])
    return wrap_degrees(rad2deg(ang_target - ang_current))


def solve_ik(
    bones: Sequence[Bone],
    effector_id: str,
    target,
    settings: PoseSettings | None = None,
) -> List[Bone]:
    """
    Rotate the effector's chain so its end approaches target.

    Runs a fixed number of iterations with no early exit. Locked bones are
    skipped; bones with a rotation limit are clamped right after each step.
    Only local rotations change. An unknown effector returns the bones unchanged.

    Args:
        bones: Current rig state
        effector_id: Bone whose end point should reach target
        target: World point as (x, y), {"x", "y"} or ndarray
        settings: Iteration and chain-length budget (PoseSettings defaults if None)
    """
    settings = settings or PoseSettings()
    target = as_point(target)
    working = list(bones)

    chain = build_chain(working, effector_id, settings.ik_max_chain_length)
    if not chain:
        log.debug(f"[ik] effector '{effector_id}' not found")
        return working

    positions = {bone.id: i for i, bone in enumerate(working)}

    for _ in range(settings.ik_iterations):
        for bone_id in chain:
            pose = calculate_pose(working, settings)
            effector = find_derived(pose, effector_id)
            joint = find_derived(pose, bone_id)
            if effector is None or joint is None:
                continue

            index = positions[bone_id]
            bone = working[index]
            if bone.locked:
                continue

            delta = signed_angle(joint.world_start, effector.world_end, target)
            rotation = constrained_rotation(bone, bone.rotation + delta)
            working[index] = replace(bone, rotation=float(rotation))

    return working


def effector_error(bones: Sequence[Bone], effector_id: str, target, settings: PoseSettings | None = None) -> float:
    """Distance from the effector's end point to target, or inf if the effector is not posed."""
    effector = find_derived(calculate_pose(bones, settings), effector_id)
    if effector is None:
        return math.inf
    return float(np.linalg.norm(effector.world_end - as_point(target)))
