"""Caller-level move protocol built on :meth:`Block.move_block`."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .. import vector
from ..block import Block
from ..vector import Vector3

LOGGER = logging.getLogger(__name__)

FLYAWAY_EDGE = 20


def flyaway_block(block: Block, edge: int = FLYAWAY_EDGE) -> Block:
    """Park ``block`` far outside the volume along its direction, keeping its size.

    The target lies at least ``edge`` units past the block's leading face, and
    never closer to the origin than ``edge`` itself.
    """

    axis = block.direction.axis
    length = axis.component(block.isize)
    if block.direction.positive:
        high = max(edge, axis.component(block.max) + edge)
        return block.with_extent(axis, high - length, high)
    low = min(-edge, axis.component(block.min) - edge)
    return block.with_extent(axis, low, low + length)


# //1.- Result of a move request: new geometry and what the presentation should do.
@dataclass(frozen=True)
class MoveOutcome:
    original: Block
    block: Block
    should_remove: bool

    @property
    def changed(self) -> bool:
        return self.block != self.original

    @property
    def destination(self) -> Vector3:
        return self.block.center

    @property
    def distance(self) -> float:
        return abs(vector.dot(self.original.direction.unit_vector(), vector.subtract(self.block.center, self.original.center)))


def resolve_move(block: Block, all_blocks: Iterable[Block]) -> MoveOutcome:
    """Slide ``block`` up to the nearest block ahead, or send it flying away.

    When nothing is ahead, or the nearest block cannot be slid against, the
    block heads for :func:`flyaway_block` and must be removed on arrival.
    """

    nearest = block.nearest_block_in_front(all_blocks)
    moved = block.move_block(nearest) if nearest is not None else None
    if moved is None:
        LOGGER.debug("No obstacle stops %s, sending it away", block)
        return MoveOutcome(original=block, block=flyaway_block(block), should_remove=True)
    return MoveOutcome(original=block, block=moved, should_remove=False)
