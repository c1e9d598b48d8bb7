"""Built-in humanoid rig and walk cycle."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from rigpose.animation.clip import AnimationClip
from rigpose.animation.keyframe import Keyframe
from rigpose.animation.track import Track, TrackProperty
from rigpose.rig.bone import Bone, Constraint, ConstraintType

CORE_COLOR = "#eab308"
BODY_COLOR = "#a3a3a3"
LEFT_COLOR = "#60a5fa"
RIGHT_COLOR = "#f87171"


def _bone(
    id: str,
    parent_id: Optional[str],
    name: str,
    length: float,
    rotation: float,
    color: str,
    limit: Optional[Tuple[str, float, float]] = None,
) -> Bone:
    constraints = ()
    if limit is not None:
        cid, lo, hi = limit
        constraints = (Constraint(cid, ConstraintType.LIMIT_ROTATION, min=lo, max=hi, influence=1.0),)
    return Bone(
        id=id,
        parent_id=parent_id,
        name=name,
        length=length,
        rotation=rotation,
        color=color,
        constraints=constraints,
    )


def create_human_rig() -> List[Bone]:
    """19-bone humanoid standing at the origin, hips pointing up (-90°)."""
    c, b, l, r = CORE_COLOR, BODY_COLOR, LEFT_COLOR, RIGHT_COLOR
    return [
        _bone("hips", None, "Hips", 0, -90, c),
        _bone("spine", "hips", "Spine", 60, 0, b),
        _bone("chest", "spine", "Chest", 60, 0, b),
        _bone("neck", "chest", "Neck", 20, 0, b),
        _bone("head", "neck", "Head", 50, 0, b),
        _bone("shoulder_l", "chest", "Shoulder L", 30, 80, l),
        _bone("arm_l_up", "shoulder_l", "Upper Arm L", 70, 10, l),
        _bone("arm_l_low", "arm_l_up", "Lower Arm L", 60, 0, l, ("c1", -10, 130)),
        _bone("hand_l", "arm_l_low", "Hand L", 20, 0, l),
        _bone("shoulder_r", "chest", "Shoulder R", 30, -80, r),
        _bone("arm_r_up", "shoulder_r", "Upper Arm R", 70, -10, r),
        _bone("arm_r_low", "arm_r_up", "Lower Arm R", 60, 0, r, ("c2", -130, 10)),
        _bone("hand_r", "arm_r_low", "Hand R", 20, 0, r),
        _bone("thigh_l", "hips", "Thigh L", 80, 170, l),
        _bone("shin_l", "thigh_l", "Shin L", 80, 0, l, ("c3", -10, 150)),
        _bone("foot_l", "shin_l", "Foot L", 30, 90, l),
        _bone("thigh_r", "hips", "Thigh R", 80, -170, r),
        _bone("shin_r", "thigh_r", "Shin R", 80, 0, r, ("c4", -10, 150)),
        _bone("foot_r", "shin_r", "Foot R", 30, 90, r),
    ]


def _track(bone_id: str, prop: str, keys: Sequence[Tuple[float, float]]) -> Track:
    return Track(bone_id, TrackProperty(prop), tuple(Keyframe(t, v) for t, v in keys))


# (bone, property, [(frame, value), ...]); all keys linear
_WALK_KEYS = [
    ("hips", "y", [(0, 0), (12, -5), (24, 0), (36, -5), (48, 0), (60, -5), (72, 0), (84, -5), (96, 0)]),
    ("thigh_l", "rotation", [(0, 170), (24, 210), (48, 170), (72, 130), (96, 170)]),
    ("shin_l", "rotation", [(0, 0), (24, 0), (36, 40), (48, 0), (72, 10), (96, 0)]),
    ("foot_l", "rotation", [(0, 90), (24, 70), (48, 90), (72, 110), (96, 90)]),
    ("thigh_r", "rotation", [(0, -170), (24, -130), (48, -170), (72, -210), (96, -170)]),
    ("shin_r", "rotation", [(0, 0), (12, -10), (24, 0), (48, 0), (72, 0), (84, -40), (96, 0)]),
    ("foot_r", "rotation", [(0, 90), (24, 110), (48, 90), (72, 70), (96, 90)]),
    ("shoulder_l", "rotation", [(0, 80), (24, 60), (48, 80), (72, 100), (96, 80)]),
    ("shoulder_r", "rotation", [(0, -80), (24, -100), (48, -80), (72, -60), (96, -80)]),
]


def create_walk_cycle() -> AnimationClip:
    """96-frame walk at 24 fps for the rig from create_human_rig()."""
    return AnimationClip(
        id="walk",
        name="Walk Cycle",
        duration=96,
        fps=24,
        tracks=tuple(_track(bone_id, prop, keys) for bone_id, prop, keys in _WALK_KEYS),
    )
