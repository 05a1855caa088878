"""Axis-aligned sliding blocks: geometry, collision and movement resolution.

A block is a box with integer corners that is either a unit cube or a domino
(exactly one axis doubled). Every block carries the direction it slides in.
Movement is resolved against a single obstacle and never mutates the block;
callers swap in the returned value.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from . import vector
from .axis import Axis, ALL_AXES, Direction
from .vector import IVec3, Vector3

Rectangle = Tuple[int, int, int, int]


# //1.- Rectangles overlap only when their intersection has positive area.
def _rectangles_overlap(first: Rectangle, second: Rectangle) -> bool:
    min_u = max(first[0], second[0])
    min_v = max(first[1], second[1])
    max_u = min(first[2], second[2])
    max_v = min(first[3], second[3])
    return max_u > min_u and max_v > min_v


def _lane_rectangle(block: "Block", axis: Axis) -> Rectangle:
    u, v = axis.remaining_two()
    return (u.component(block.min), v.component(block.min), u.component(block.max), v.component(block.max))


def overlap_in_direction(first: "Block", second: "Block", axis: Axis) -> bool:
    """Return True when both blocks share a lane orthogonal to ``axis``."""

    return _rectangles_overlap(_lane_rectangle(first, axis), _lane_rectangle(second, axis))


@dataclass(frozen=True)
class Block:
    direction: Direction
    min: IVec3
    max: IVec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", vector.to_ivec3(self.min))
        object.__setattr__(self, "max", vector.to_ivec3(self.max))
        size = self.isize
        if any(component <= 0 for component in size):
            raise ValueError(f"Block corners must satisfy min < max, got {self.min} and {self.max}")
        if sorted(size) not in ([1, 1, 1], [1, 1, 2]):
            raise ValueError(f"Block extent must be 1x1x1 or 1x1x2, got {size}")

    @property
    def isize(self) -> IVec3:
        return vector.isubtract(self.max, self.min)

    @property
    def size(self) -> Vector3:
        return vector.to_vector(self.isize)

    @property
    def center(self) -> Vector3:
        return vector.midpoint(self.max, self.min)

    @property
    def elongation(self) -> Optional[Axis]:
        for axis in ALL_AXES:
            if axis.component(self.isize) == 2:
                return axis
        return None

    def corners(self) -> Tuple[IVec3, IVec3]:
        return self.min, self.max

    @classmethod
    def from_corners(cls, direction: Direction, corners: Tuple[IVec3, IVec3]) -> "Block":
        minimum, maximum = corners
        return cls(direction=direction, min=minimum, max=maximum)

    @classmethod
    def from_center_size(cls, direction: Direction, center: Vector3, size: Vector3) -> "Block":
        half = vector.scale(size, 0.5)
        minimum = vector.subtract(center, half)
        maximum = vector.add(center, half)
        return cls(direction=direction, min=vector.to_ivec3(minimum), max=vector.to_ivec3(maximum))

    # //2.- Rebuild the block with a new extent along a single axis.
    def with_extent(self, axis: Axis, low: int, high: int) -> "Block":
        return replace(
            self,
            min=axis.with_component(self.min, low),
            max=axis.with_component(self.max, high),
        )

    def possible_collision(self, other: "Block") -> bool:
        """True when ``other`` sits at least one unit ahead, inside this block's lane."""

        if other == self:
            return False
        diff = vector.subtract(other.center, self.center)
        ahead = vector.dot(self.direction.unit_vector(), diff) >= 1.0
        in_the_way = all(abs(axis.component(diff)) < 1.0 for axis in self.direction.axis.remaining_two())
        return ahead and in_the_way

    def blocks_in_front(self, all_blocks: Iterable["Block"]) -> List["Block"]:
        return [block for block in all_blocks if self.possible_collision(block)]

    def forward_distance(self, other: "Block") -> int:
        # int() truncates toward zero.
        return int(vector.dot(self.direction.unit_vector(), vector.subtract(other.center, self.center)))

    def nearest_block_in_front(self, all_blocks: Iterable["Block"]) -> Optional["Block"]:
        """Closest block ahead; the first one in input order wins on ties."""

        return min(self.blocks_in_front(all_blocks), key=self.forward_distance, default=None)

    def move_block(self, obstacle: "Block") -> Optional["Block"]:
        """Slide along ``direction`` until touching ``obstacle``.

        Returns ``None`` when the obstacle is not in this block's lane or is
        not actually ahead along the travel axis.
        """

        axis = self.direction.axis
        if not overlap_in_direction(self, obstacle, axis):
            return None
        length = 2 if self.elongation is axis else 1
        if self.direction.positive:
            face = axis.component(obstacle.min)
            if axis.component(self.max) > face:
                return None
            return self.with_extent(axis, face - length, face)
        face = axis.component(obstacle.max)
        if axis.component(self.min) < face:
            return None
        return self.with_extent(axis, face, face + length)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "direction": self.direction.to_dict(),
            "min": list(self.min),
            "max": list(self.max),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Block":
        try:
            direction = Direction.from_dict(payload["direction"])
            minimum = payload["min"]
            maximum = payload["max"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Invalid block payload: {payload!r}") from exc
        return cls(direction=direction, min=minimum, max=maximum)
