"""Axis and direction vocabulary for axis-aligned blocks."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple, TypeVar

from .vector import Vector3

T = TypeVar("T")


class Axis(Enum):
    """One of the three orthogonal axes of the play volume."""

    X = "X"
    Y = "Y"
    Z = "Z"

    @property
    def index(self) -> int:
        return _AXIS_INDEX[self]

    # //1.- Successor under the right-handed cycle X -> Y -> Z -> X.
    def next_rh(self) -> "Axis":
        return _NEXT_RH[self]

    # //2.- Signed cross product of two axes: +1 along the cycle, -1 against it.
    def cross(self, other: "Axis") -> int:
        if self is other:
            return 0
        return 1 if self.next_rh() is other else -1

    def remaining(self, other: "Axis") -> Optional["Axis"]:
        if self is other:
            return None
        for axis in ALL_AXES:
            if axis is not self and axis is not other:
                return axis
        return None

    def remaining_two(self) -> Tuple["Axis", "Axis"]:
        following = self.next_rh()
        return (following, following.next_rh())

    def unit_vector(self) -> Vector3:
        components = [0.0, 0.0, 0.0]
        components[self.index] = 1.0
        return (components[0], components[1], components[2])

    def component(self, vector: Sequence[T]) -> T:
        return vector[self.index]

    # //3.- Replace one component of a triple, keeping the other two untouched.
    def with_component(self, vector: Sequence[T], value: T) -> Tuple[T, T, T]:
        components = list(vector)
        components[self.index] = value
        return (components[0], components[1], components[2])


ALL_AXES: Tuple[Axis, Axis, Axis] = (Axis.X, Axis.Y, Axis.Z)
_AXIS_INDEX = {Axis.X: 0, Axis.Y: 1, Axis.Z: 2}
_NEXT_RH = {Axis.X: Axis.Y, Axis.Y: Axis.Z, Axis.Z: Axis.X}


@dataclass(frozen=True)
class Direction:
    """Signed axis a block slides along."""

    axis: Axis
    positive: bool

    @property
    def sign(self) -> int:
        return 1 if self.positive else -1

    def unit_vector(self) -> Vector3:
        ux, uy, uz = self.axis.unit_vector()
        sign = float(self.sign)
        return (ux * sign, uy * sign, uz * sign)

    def to_dict(self) -> Dict[str, Any]:
        return {"axis": self.axis.value, "positive": self.positive}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Direction":
        try:
            axis = Axis(str(payload["axis"]).upper())
            positive = payload["positive"]
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid direction payload: {payload!r}") from exc
        if not isinstance(positive, bool):
            raise ValueError(f"Direction polarity must be a boolean, got {positive!r}")
        return cls(axis=axis, positive=positive)


XP = Direction(Axis.X, True)
XN = Direction(Axis.X, False)
YP = Direction(Axis.Y, True)
YN = Direction(Axis.Y, False)
ZP = Direction(Axis.Z, True)
ZN = Direction(Axis.Z, False)

ALL_DIRECTIONS: Tuple[Direction, ...] = (XP, XN, YP, YN, ZP, ZN)


def rotation_between(from_axis: Axis, to_axis: Axis) -> Tuple[Optional[Axis], float]:
    """Return the (axis, angle) quarter turn carrying ``from_axis`` onto ``to_axis``.

    The rotation happens around the remaining third axis and its sign follows
    :meth:`Axis.cross`. Equal axes yield ``(None, 0.0)``, the identity.
    """

    pivot = from_axis.remaining(to_axis)
    if pivot is None:
        return None, 0.0
    return pivot, (math.pi / 2.0) * from_axis.cross(to_axis)
