"""Bone, constraint and driver records of a 2D rig."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


class BoneProperty(Enum):
    """Animatable / drivable scalar fields of a bone."""

    ROTATION = "rotation"
    X = "x"
    Y = "y"

    def get(self, bone: "Bone") -> float:
        """Read this property from bone."""
        if self is BoneProperty.ROTATION:
            return bone.rotation
        if self is BoneProperty.X:
            return bone.x
        if self is BoneProperty.Y:
            return bone.y
        raise ValueError(f"Unhandled bone property {self!r}")

    def set(self, bone: "Bone", value: float) -> "Bone":
        """Return a copy of bone with this property replaced."""
        value = float(value)
        if self is BoneProperty.ROTATION:
            return replace(bone, rotation=value)
        if self is BoneProperty.X:
            return replace(bone, x=value)
        if self is BoneProperty.Y:
            return replace(bone, y=value)
        raise ValueError(f"Unhandled bone property {self!r}")


class ConstraintType(Enum):
    """Constraint kinds known to the rig. Only LIMIT_ROTATION is evaluated."""

    LIMIT_ROTATION = "LIMIT_ROTATION"
    IK_POLE = "IK_POLE"
    COPY_TRANSFORM = "COPY_TRANSFORM"


@dataclass(frozen=True)
class Constraint:
    """
    Per-bone constraint.

    Attributes:
        id: Constraint id, unique within its bone
        type: ConstraintType
        min: Lower rotation bound in degrees (None = open)
        max: Upper rotation bound in degrees (None = open)
        influence: Blend weight 0..1. Stored only; the rotation clamp is hard.
        target_bone_id: Target for IK_POLE / COPY_TRANSFORM
    """

    id: str
    type: ConstraintType
    min: Optional[float] = None
    max: Optional[float] = None
    influence: float = 1.0
    target_bone_id: Optional[str] = None

    def serialize(self) -> dict:
        data = {
            "id": self.id,
            "type": self.type.value,
            "influence": self.influence,
        }
        if self.min is not None:
            data["min"] = self.min
        if self.max is not None:
            data["max"] = self.max
        if self.target_bone_id is not None:
            data["targetBoneId"] = self.target_bone_id
        return data

    @classmethod
    def deserialize(cls, data: dict) -> "Constraint":
        return cls(
            id=data["id"],
            type=ConstraintType(data["type"]),
            min=_optional_float(data.get("min")),
            max=_optional_float(data.get("max")),
            influence=float(data.get("influence", 1.0)),
            target_bone_id=data.get("targetBoneId"),
        )


@dataclass(frozen=True)
class Driver:
    """
    Affine link: owner.target_property = source.source_property * factor + offset.
    """

    id: str
    target_property: BoneProperty
    source_bone_id: str
    source_property: BoneProperty
    factor: float = 1.0
    offset: float = 0.0

    def drive(self, value: float) -> float:
        return value * self.factor + self.offset

    def serialize(self) -> dict:
        return {
            "id": self.id,
            "driverProperty": self.target_property.value,
            "sourceBoneId": self.source_bone_id,
            "sourceProperty": self.source_property.value,
            "factor": self.factor,
            "offset": self.offset,
        }

    @classmethod
    def deserialize(cls, data: dict) -> "Driver":
        return cls(
            id=data["id"],
            target_property=BoneProperty(data["driverProperty"]),
            source_bone_id=data["sourceBoneId"],
            source_property=BoneProperty(data["sourceProperty"]),
            factor=float(data.get("factor", 1.0)),
            offset=float(data.get("offset", 0.0)),
        )


@dataclass(frozen=True)
class Bone:
    """
    Single bone in a 2D rig.

    Attributes:
        id: Stable unique key
        parent_id: Id of the parent bone (None for root bones)
        name: Human-readable name
        length: Bone length in scene units
        rotation: Local rotation in degrees, relative to the parent's world rotation
        x, y: Start point, used only by root bones. A child starts at its parent's end.
        color: Display color, cosmetic
        locked: Excluded from IK and driver rotation writes; still part of FK
        visible: Cosmetic
        constraints: Ordered constraints
        drivers: Ordered drivers writing onto this bone
    """

    id: str
    parent_id: Optional[str] = None
    name: str = ""
    length: float = 0.0
    rotation: float = 0.0
    x: float = 0.0
    y: float = 0.0
    color: Optional[str] = None
    locked: bool = False
    visible: bool = True
    constraints: Tuple[Constraint, ...] = field(default_factory=tuple)
    drivers: Tuple[Driver, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Lists are accepted for convenience but stored as tuples.
        object.__setattr__(self, "constraints", tuple(self.constraints))
        object.__setattr__(self, "drivers", tuple(self.drivers))

    @property
    def is_root(self) -> bool:
        """True if this bone has no parent."""
        return self.parent_id is None

    def rotation_limit(self) -> Optional[Constraint]:
        """First LIMIT_ROTATION constraint, if any."""
        for constraint in self.constraints:
            if constraint.type is ConstraintType.LIMIT_ROTATION:
                return constraint
        return None

    def serialize(self) -> dict:
        """Serialize bone to dict for JSON storage."""
        data = {
            "id": self.id,
            "parentId": self.parent_id,
            "name": self.name,
            "length": self.length,
            "rotation": self.rotation,
            "x": self.x,
            "y": self.y,
            "locked": self.locked,
            "visible": self.visible,
            "constraints": [c.serialize() for c in self.constraints],
            "drivers": [d.serialize() for d in self.drivers],
        }
        if self.color is not None:
            data["color"] = self.color
        return data

    @classmethod
    def deserialize(cls, data: dict) -> "Bone":
        """Deserialize bone from dict."""
        return cls(
            id=data["id"],
            parent_id=data.get("parentId"),
            name=data.get("name", data["id"]),
            length=float(data.get("length", 0.0)),
            rotation=float(data.get("rotation", 0.0)),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            color=data.get("color"),
            locked=bool(data.get("locked", False)),
            visible=data.get("visible", True) is not False,
            constraints=tuple(Constraint.deserialize(c) for c in data.get("constraints") or ()),
            drivers=tuple(Driver.deserialize(d) for d in data.get("drivers") or ()),
        )

    def __repr__(self) -> str:
        parent_str = f"parent={self.parent_id}" if self.parent_id is not None else "root"
        return f"<Bone '{self.id}' ({parent_str}) rot={self.rotation}>"


def _optional_float(value) -> Optional[float]:
    return None if value is None else float(value)


def index_bones(bones: Iterable[Bone]) -> Dict[str, Bone]:
    """Ordered {id: bone} mapping. Later duplicates win."""
    return {bone.id: bone for bone in bones}


def children_of(bones: Iterable[Bone]) -> Dict[Optional[str], List[Bone]]:
    """Ordered {parent_id: [child, ...]} mapping; roots are listed under None."""
    children: Dict[Optional[str], List[Bone]] = {}
    for bone in bones:
        children.setdefault(bone.parent_id, []).append(bone)
    return children


def load_bones(data: Iterable[dict]) -> List[Bone]:
    """Deserialize a list of wire bone dicts."""
    return [Bone.deserialize(item) for item in data]


def dump_bones(bones: Iterable[Bone]) -> List[dict]:
    """Serialize bones to a list of wire dicts."""
    return [bone.serialize() for bone in bones]
