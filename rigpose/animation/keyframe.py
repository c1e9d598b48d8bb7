from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .ease import Easing


@dataclass(frozen=True)
class Keyframe:
    """
    Ключевой кадр скалярного трека.

    time:   номер кадра (обычно целый)
    value:  значение свойства
    easing: закон сглаживания участка, который начинается в этом ключе
    handle_left / handle_right: ручки графового редактора (x, y), интерполяцией не используются
    """
    time: float
    value: float
    easing: Easing = Easing.LINEAR
    handle_left: Optional[Tuple[float, float]] = None
    handle_right: Optional[Tuple[float, float]] = None

    def __post_init__(self):
        object.__setattr__(self, "time", float(self.time))
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "easing", Easing.parse(self.easing))
        object.__setattr__(self, "handle_left", _handle(self.handle_left, "handle_left"))
        object.__setattr__(self, "handle_right", _handle(self.handle_right, "handle_right"))

    def serialize(self) -> dict:
        data = {
            "time": self.time,
            "value": self.value,
            "easing": self.easing.value,
        }
        if self.handle_left is not None:
            data["handleLeft"] = {"x": self.handle_left[0], "y": self.handle_left[1]}
        if self.handle_right is not None:
            data["handleRight"] = {"x": self.handle_right[0], "y": self.handle_right[1]}
        return data

    @classmethod
    def deserialize(cls, data: dict) -> "Keyframe":
        return cls(
            time=data["time"],
            value=data["value"],
            easing=data.get("easing"),
            handle_left=data.get("handleLeft"),
            handle_right=data.get("handleRight"),
        )


def _handle(value, name: str) -> Optional[Tuple[float, float]]:
    if value is None:
        return None
    if isinstance(value, dict):
        value = (value["x"], value["y"])
    value = tuple(float(v) for v in value)
    if len(value) != 2:
        raise ValueError(f"{name} must have 2 components")
    return value
