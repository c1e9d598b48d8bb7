"""
rigpose - конвейер вычисления позы 2D скелетной анимации.

Основные модули:
- rig - кости, ограничения вращения, драйверы
- kinematic - прямая кинематика и CCD обратная кинематика
- animation - ключевые кадры, треки, клипы и их сэмплирование
"""

from rigpose import log  # noqa: F401

from .settings import PoseSettings, PoseSettingsManager
from .rig import Bone, BoneProperty, Constraint, ConstraintType, Driver, evaluate_drivers
from .kinematic import DerivedBone, calculate_pose, solve_fk, solve_ik
from .animation import AnimationClip, Easing, Keyframe, Track, TrackProperty, interpolate, sample_clip

__version__ = '0.1.0'

__all__ = [
    # Settings
    'PoseSettings',
    'PoseSettingsManager',
    # Rig
    'Bone',
    'BoneProperty',
    'Constraint',
    'ConstraintType',
    'Driver',
    'evaluate_drivers',
    # Kinematics
    'DerivedBone',
    'solve_fk',
    'calculate_pose',
    'solve_ik',
    # Animation
    'AnimationClip',
    'Easing',
    'Keyframe',
    'Track',
    'TrackProperty',
    'interpolate',
    'sample_clip',
]
