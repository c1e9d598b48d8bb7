"""Rig module: bones, constraints, drivers."""

from rigpose.rig.bone import (
    Bone,
    BoneProperty,
    Constraint,
    ConstraintType,
    Driver,
    children_of,
    dump_bones,
    index_bones,
    load_bones,
)
from rigpose.rig.constraints import clamp_rotation, constrained_rotation, normalize_rotation
from rigpose.rig.drivers import DRIVER_PASSES, evaluate_drivers
from rigpose.rig.validation import find_missing_driver_sources, find_unreachable

__all__ = [
    # Model
    "Bone",
    "BoneProperty",
    "Constraint",
    "ConstraintType",
    "Driver",
    "children_of",
    "index_bones",
    "load_bones",
    "dump_bones",
    # Constraints
    "normalize_rotation",
    "clamp_rotation",
    "constrained_rotation",
    # Drivers
    "DRIVER_PASSES",
    "evaluate_drivers",
    # Validation
    "find_unreachable",
    "find_missing_driver_sources",
]
