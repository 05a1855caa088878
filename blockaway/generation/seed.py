"""Sub-volumes of the generation cube and their width classification."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from ..axis import ALL_AXES, Axis
from ..vector import IVec3

Range = Tuple[int, int]


class GenerationError(RuntimeError):
    """Raised when the generator reaches a state its branching cannot handle."""


class InvalidSeedWidthError(GenerationError):
    """Raised for a seed whose width along some axis is not positive."""

    def __init__(self, width: int) -> None:
        super().__init__(f"Seed width must be positive, got {width}")
        self.width = width


class Width(Enum):
    ONE = "one"
    TWO = "two"
    MORE = "more"


def classify_width(width: int) -> Width:
    if width == 1:
        return Width.ONE
    if width == 2:
        return Width.TWO
    if width > 2:
        return Width.MORE
    raise InvalidSeedWidthError(width)


@dataclass(frozen=True)
class Seed:
    """Box of the generation volume still to be subdivided (closed-open ranges)."""

    x: Range
    y: Range
    z: Range

    @classmethod
    def cube(cls, side_length: int) -> "Seed":
        span = (0, int(side_length))
        return cls(x=span, y=span, z=span)

    def get_field(self, axis: Axis) -> Range:
        return (self.x, self.y, self.z)[axis.index]

    def with_field(self, axis: Axis, span: Range) -> "Seed":
        return replace(self, **{axis.value.lower(): span})

    # //1.- Cut the box at ``mid`` into the low half and the high half.
    def split(self, axis: Axis, mid: int) -> Tuple["Seed", "Seed"]:
        low, high = self.get_field(axis)
        return self.with_field(axis, (low, mid)), self.with_field(axis, (mid, high))

    def to_min_max(self) -> Tuple[IVec3, IVec3]:
        return (self.x[0], self.y[0], self.z[0]), (self.x[1], self.y[1], self.z[1])

    def widths(self) -> Tuple[int, int, int]:
        spans = [self.get_field(axis) for axis in ALL_AXES]
        return (spans[0][1] - spans[0][0], spans[1][1] - spans[1][0], spans[2][1] - spans[2][0])
