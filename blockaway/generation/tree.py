"""Binary subdivision tree and the block candidates stored in its leaves."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .. import vector
from ..axis import Direction
from ..block import Block
from ..vector import IVec3


# //1.- Candidate cell produced by the generator; no direction means empty space.
@dataclass(frozen=True)
class GBlock:
    direction: Optional[Direction]
    min: IVec3
    max: IVec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", vector.to_ivec3(self.min))
        object.__setattr__(self, "max", vector.to_ivec3(self.max))

    def to_block(self) -> Optional[Block]:
        if self.direction is None:
            return None
        return Block(direction=self.direction, min=self.min, max=self.max)


@dataclass(frozen=True)
class Leaf:
    block: GBlock


@dataclass(frozen=True)
class Node:
    low: "Tree"
    high: "Tree"


Tree = Union[Leaf, Node]


# //2.- Collect leaves in order, low half before high half at every split.
def flatten_tree(tree: Tree) -> List[GBlock]:
    leaves: List[GBlock] = []
    pending: List[Tree] = [tree]
    while pending:
        current = pending.pop()
        if isinstance(current, Leaf):
            leaves.append(current.block)
        else:
            pending.append(current.high)
            pending.append(current.low)
    return leaves


def gblocks_to_blocks(gblocks: Iterable[GBlock]) -> List[Block]:
    blocks: List[Block] = []
    for candidate in gblocks:
        block = candidate.to_block()
        if block is not None:
            blocks.append(block)
    return blocks
