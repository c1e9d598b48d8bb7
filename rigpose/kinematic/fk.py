"""Forward kinematics: local bone transforms to world-space segments."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

import numpy as np

from rigpose import log
from rigpose.geombase import Pose2
from rigpose.rig.bone import Bone, children_of
from rigpose.rig.constraints import constrained_rotation
from rigpose.rig.drivers import evaluate_drivers
from rigpose.settings import PoseSettings


@dataclass(frozen=True, eq=False)
class DerivedBone:
    """
    World-space projection of a bone for one evaluation.

    Attributes:
        bone: Source bone, with rotation replaced by the constrained local rotation
        world_start: (2,) start point in world space
        world_end: (2,) end point in world space
        world_rotation: Absolute rotation in degrees
    """

    bone: Bone
    world_start: np.ndarray
    world_end: np.ndarray
    world_rotation: float

    @property
    def id(self) -> str:
        return self.bone.id

    @property
    def parent_id(self) -> Optional[str]:
        return self.bone.parent_id

    @property
    def rotation(self) -> float:
        return self.bone.rotation

    @property
    def x(self) -> float:
        return self.bone.x

    @property
    def y(self) -> float:
        return self.bone.y

    @property
    def length(self) -> float:
        return self.bone.length

    def world_pose(self) -> Pose2:
        """Frame at the bone start, x axis along the bone."""
        return Pose2.from_degrees(self.world_rotation, self.world_start)

    def __repr__(self) -> str:
        return (
            f"<DerivedBone '{self.id}' start={self.world_start.tolist()} "
            f"end={self.world_end.tolist()} rot={self.world_rotation}>"
        )


def _derive(bone: Bone, parent: Optional[DerivedBone]) -> DerivedBone:
    rotation = constrained_rotation(bone)

    if parent is not None:
        # parent frame moved to its tip
        base = parent.world_pose() * Pose2.translation(parent.length, 0.0)
        world_rotation = parent.world_rotation + rotation
    else:
        base = Pose2.translation(bone.x, bone.y)
        world_rotation = rotation

    pose = Pose2.from_degrees(world_rotation, base.lin)
    end = pose.transform_point((bone.length, 0.0))

    start = base.lin.copy()
    start.flags.writeable = False
    end.flags.writeable = False

    return DerivedBone(
        bone=replace(bone, rotation=rotation),
        world_start=start,
        world_end=end,
        world_rotation=world_rotation,
    )


def solve_fk(bones: Sequence[Bone]) -> List[DerivedBone]:
    """
    Compose local transforms into world space.

    Roots are visited in list order, each subtree pre-order with children in
    list order. Bones not reachable from a root (dangling parent id) are left
    out of the result.
    """
    children = children_of(bones)
    result: List[DerivedBone] = []

    stack = [(root, None) for root in reversed(children.get(None, []))]
    visited = set()
    while stack:
        bone, parent = stack.pop()
        if bone.id in visited:
            continue
        visited.add(bone.id)

        derived = _derive(bone, parent)
        result.append(derived)
        for child in reversed(children.get(bone.id, [])):
            stack.append((child, derived))

    if len(result) != len(bones):
        log.debug(f"[fk] {len(bones) - len(result)} bone(s) unreachable from any root")
    return result


def calculate_pose(bones: Sequence[Bone], settings: PoseSettings | None = None) -> List[DerivedBone]:
    """Drivers, then forward kinematics. The pose that playback and IK work on."""
    settings = settings or PoseSettings()
    return solve_fk(evaluate_drivers(bones, settings.driver_passes))


def find_derived(derived: Sequence[DerivedBone], bone_id: str) -> Optional[DerivedBone]:
    """Derived bone with the given id, or None."""
    for item in derived:
        if item.id == bone_id:
            return item
    return None
