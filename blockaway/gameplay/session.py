"""Live puzzle state: the block set, moves in flight and level progression."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .. import vector
from ..block import Block
from ..generation import RandomSource
from ..vector import Vector3
from .animation import MoveAnimation
from .level import Level
from .movement import MoveOutcome, resolve_move

LOGGER = logging.getLogger(__name__)


class LevelSession:
    """Owns the blocks of one level while it is being played.

    Positions are reported relative to the level center, the frame the
    presentation layer draws in. Blocks that are still travelling can neither
    be moved again nor act as obstacles.
    """

    def __init__(self, blocks: Iterable[Block]) -> None:
        initial = list(blocks)
        self._blocks: Dict[int, Block] = dict(enumerate(initial))
        center = Level(initial).center()
        self.center: Vector3 = center if center is not None else (0.0, 0.0, 0.0)
        self._positions: Dict[int, Vector3] = {
            block_id: vector.subtract(block.center, self.center) for block_id, block in self._blocks.items()
        }
        self._animations: Dict[int, MoveAnimation] = {}

    @classmethod
    def from_level(cls, level: Level) -> "LevelSession":
        return cls(level.blocks)

    @property
    def blocks(self) -> Dict[int, Block]:
        return dict(self._blocks)

    def position(self, block_id: int) -> Vector3:
        return self._positions[block_id]

    def is_moving(self, block_id: int) -> bool:
        return block_id in self._animations

    def is_complete(self) -> bool:
        return not self._blocks

    def attempt_move(self, block_id: int) -> Optional[MoveOutcome]:
        """Resolve a move request for ``block_id``; ``None`` while it is still travelling."""

        block = self._blocks[block_id]
        if self.is_moving(block_id):
            return None
        resting = [other for other_id, other in self._blocks.items() if other_id not in self._animations]
        outcome = resolve_move(block, resting)
        if not outcome.changed:
            return outcome
        self._blocks[block_id] = outcome.block
        self._animations[block_id] = MoveAnimation(
            destination=vector.subtract(outcome.destination, self.center),
            direction=block.direction,
            should_remove=outcome.should_remove,
        )
        LOGGER.debug("Block %d travels %.1f units (remove=%s)", block_id, outcome.distance, outcome.should_remove)
        return outcome

    # //1.- Advance every travelling block by one frame and drop finished fly-aways.
    def tick(self, elapsed: float) -> List[int]:
        removed: List[int] = []
        for block_id, animation in list(self._animations.items()):
            step = animation.advance(self._positions[block_id], elapsed)
            self._positions[block_id] = step.position
            if not step.arrived:
                continue
            del self._animations[block_id]
            if animation.should_remove:
                del self._blocks[block_id]
                del self._positions[block_id]
                removed.append(block_id)
        if removed:
            LOGGER.debug("Removed blocks %s, %d left", removed, len(self._blocks))
        return removed


@dataclass
class LevelProgress:
    """Level counter; level ``n`` is played on a cube of side ``n + 2``."""

    level: int = 1

    @property
    def side_length(self) -> int:
        return self.level + 2

    def start(self, rng: RandomSource) -> LevelSession:
        LOGGER.info("Starting level %d (side %d)", self.level, self.side_length)
        return LevelSession.from_level(Level.generate(self.side_length, rng))

    def advance(self) -> int:
        self.level += 1
        return self.level
