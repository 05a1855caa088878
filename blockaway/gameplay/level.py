"""Level container shared by generated and hand-authored puzzles."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union

from .. import vector
from ..block import Block
from ..generation import RandomSource, bounding_box, generate_level
from ..vector import Vector3

LOGGER = logging.getLogger(__name__)


@dataclass
class Level:
    """Ordered collection of blocks making up one puzzle."""

    blocks: List[Block] = field(default_factory=list)

    @classmethod
    def generate(cls, side_length: int, rng: RandomSource) -> "Level":
        return cls(blocks=generate_level(side_length, rng))

    # //1.- Componentwise minimum of all min corners and maximum of all max corners.
    def bounds(self) -> Optional[Tuple[Vector3, Vector3]]:
        """Level extent, or ``None`` once every block has been cleared."""

        if not self.blocks:
            return None
        lower, upper = bounding_box(self.blocks)
        return vector.to_vector(lower), vector.to_vector(upper)

    def center(self) -> Optional[Vector3]:
        extent = self.bounds()
        if extent is None:
            return None
        return vector.midpoint(*extent)

    def to_payload(self) -> List[dict]:
        return [block.to_dict() for block in self.blocks]

    @classmethod
    def from_payload(cls, payload: Sequence[Any]) -> "Level":
        if not isinstance(payload, (list, tuple)):
            raise ValueError("Level payload must be a list of blocks")
        return cls(blocks=[Block.from_dict(entry) for entry in payload])

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_payload(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> "Level":
        return cls.from_payload(json.loads(text))

    def save(self, path: Union[str, Path]) -> None:
        Path(path).write_text(self.to_json(), encoding="utf-8")
        LOGGER.info("Saved level with %d blocks to %s", len(self.blocks), path)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Level":
        with open(path, "r", encoding="utf-8") as handle:
            level = cls.from_payload(json.load(handle))
        LOGGER.info("Loaded level with %d blocks from %s", len(level.blocks), path)
        return level
