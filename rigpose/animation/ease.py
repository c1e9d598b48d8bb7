"""Функции сглаживания (easing) для интерполяции ключевых кадров.

Все функции принимают t в диапазоне [0, 1] и возвращают значение в том же диапазоне.

Терминология:
- IN (вход): медленное начало, ускорение к концу
- OUT (выход): быстрое начало, замедление к концу
- IN_OUT: медленное начало и конец, быстрая середина
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from rigpose import log


class Easing(Enum):
    """
    Типы сглаживания ключевого кадра (значения совпадают с форматом файла).

    BEZIER зарезервирован под ручки графового редактора; здесь он
    вычисляется как LINEAR.
    """

    LINEAR = "linear"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"
    BEZIER = "bezier"

    @staticmethod
    def parse(value) -> "Easing":
        """Easing из строки файла; неизвестные значения дают LINEAR."""
        if isinstance(value, Easing):
            return value
        if value is None:
            return Easing.LINEAR
        try:
            return Easing(value)
        except ValueError:
            log.warn(f"[Easing] Unknown easing {value!r}, using linear")
            return Easing.LINEAR


def linear(t: float) -> float:
    """Линейная: равномерное движение без ускорения."""
    return t


def ease_in(t: float) -> float:
    """Квадратичный вход: медленный старт, t²."""
    return t * t


def ease_out(t: float) -> float:
    """Квадратичный выход: медленный финиш."""
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    """Квадратичный вход-выход; в t=0.5 ровно 0.5."""
    return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t


_EASE_FUNCTIONS: dict[Easing, Callable[[float], float]] = {
    Easing.LINEAR: linear,
    Easing.EASE_IN: ease_in,
    Easing.EASE_OUT: ease_out,
    Easing.EASE_IN_OUT: ease_in_out,
    Easing.BEZIER: linear,
}


def evaluate(easing: Easing, t: float) -> float:
    """Вычислить значение функции сглаживания в момент времени t (0..1)."""
    return _EASE_FUNCTIONS.get(easing, linear)(t)
