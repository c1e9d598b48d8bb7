"""
Data-quality checks for a rig.

The pose pipeline tolerates these conditions silently; the helpers here let an
authoring layer report them.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .bone import Bone, children_of, index_bones


def find_unreachable(bones: Sequence[Bone]) -> List[str]:
    """Ids of bones that no root reaches (dangling parent ids or parent cycles)."""
    children = children_of(bones)
    reached = set()
    stack = [bone.id for bone in children.get(None, [])]
    while stack:
        bone_id = stack.pop()
        if bone_id in reached:
            continue
        reached.add(bone_id)
        stack.extend(child.id for child in children.get(bone_id, []))
    return [bone.id for bone in bones if bone.id not in reached]


def find_missing_driver_sources(bones: Sequence[Bone]) -> List[Tuple[str, str]]:
    """(bone_id, driver_id) pairs whose source bone does not exist."""
    by_id = index_bones(bones)
    return [
        (bone.id, driver.id)
        for bone in bones
        for driver in bone.drivers
        if driver.source_bone_id not in by_id
    ]
