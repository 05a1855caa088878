"""Frame step for blocks travelling to their destination."""
from __future__ import annotations

from dataclasses import dataclass

from .. import vector
from ..axis import Direction
from ..vector import Vector3

SLIDE_SPEED = 16.0


@dataclass(frozen=True)
class AnimationStep:
    position: Vector3
    arrived: bool


@dataclass(frozen=True)
class MoveAnimation:
    """Straight-line travel along ``direction`` towards ``destination``."""

    destination: Vector3
    direction: Direction
    should_remove: bool = False
    speed: float = SLIDE_SPEED

    # //1.- Advance by speed * elapsed; overshooting the destination snaps onto it.
    def advance(self, position: Vector3, elapsed: float) -> AnimationStep:
        heading = self.direction.unit_vector()
        moved = vector.add(position, vector.scale(heading, self.speed * elapsed))
        remaining = vector.dot(heading, vector.subtract(self.destination, moved))
        if remaining < 0.0:
            return AnimationStep(position=vector.to_vector(self.destination), arrived=True)
        return AnimationStep(position=moved, arrived=False)
