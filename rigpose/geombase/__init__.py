"""
Базовые геометрические классы для 2D риггинга.
"""

from .pose2 import Pose2

__all__ = [
    'Pose2',
]
