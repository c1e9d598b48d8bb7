"""
Модуль кинематики 2D ригов.

Содержит:
- Прямую кинематику (solve_fk, calculate_pose, DerivedBone)
- Обратную кинематику методом CCD (solve_ik, build_chain)
"""

from .fk import DerivedBone, calculate_pose, find_derived, solve_fk
from .ik import build_chain, effector_error, signed_angle, solve_ik

__all__ = [
    'DerivedBone',
    'solve_fk',
    'calculate_pose',
    'find_derived',
    'build_chain',
    'signed_angle',
    'solve_ik',
    'effector_error',
]
