"""Recursive subdivision of a cube into unit and domino block candidates."""
from __future__ import annotations

import logging
from typing import List

from ..axis import ALL_AXES, Axis, Direction
from ..block import Block
from .pruning import remove_locked
from .random_source import RandomSource
from .seed import GenerationError, Seed, Width, classify_width
from .tree import GBlock, Leaf, Node, Tree, flatten_tree, gblocks_to_blocks

LOGGER = logging.getLogger(__name__)

FILL_PROBABILITY = 0.5
SPLIT_PROBABILITY = 0.5


def random_direction(rng: RandomSource) -> Direction:
    axis = ALL_AXES[rng.integer(0, 2)]
    positive = rng.chance(0.5)
    return Direction(axis=axis, positive=positive)


# //1.- Terminal cell: empty half of the time, otherwise a randomly directed block.
def _leaf(rng: RandomSource, seed: Seed) -> Tree:
    minimum, maximum = seed.to_min_max()
    if rng.chance(FILL_PROBABILITY):
        return Leaf(GBlock(random_direction(rng), minimum, maximum))
    return Leaf(GBlock(None, minimum, maximum))


def _split_at(rng: RandomSource, seed: Seed, axis: Axis, mid: int) -> Tree:
    low_seed, high_seed = seed.split(axis, mid)
    return Node(gen_tree(rng, low_seed), gen_tree(rng, high_seed))


# //2.- Split at a uniformly chosen interior point of a range wider than two.
def _split_interior(rng: RandomSource, seed: Seed, axis: Axis) -> Tree:
    low, high = seed.get_field(axis)
    return _split_at(rng, seed, axis, rng.integer(low + 1, high - 1))


def gen_tree(rng: RandomSource, seed: Seed) -> Tree:
    """Partition ``seed`` into a tree of leaves sized 1x1x1 or 1x1x2.

    Volumes wider than two along some axis are always split; the smallest
    volumes stop or split with probability one half. The random source is
    threaded through every call so a fixed seed reproduces the same tree.
    """

    widths = [classify_width(width) for width in seed.widths()]
    ones = widths.count(Width.ONE)
    twos = widths.count(Width.TWO)
    if (ones, twos) == (3, 0):
        return _leaf(rng, seed)
    if (ones, twos) == (2, 1):
        axis = ALL_AXES[widths.index(Width.TWO)]
        if rng.chance(SPLIT_PROBABILITY):
            low, _ = seed.get_field(axis)
            return _split_at(rng, seed, axis, low + 1)
        return _leaf(rng, seed)
    if ones == 2:
        axis = next(axis for axis, width in zip(ALL_AXES, widths) if width is not Width.ONE)
        return _split_interior(rng, seed, axis)
    if ones == 1:
        candidates = [axis for axis, width in zip(ALL_AXES, widths) if width is not Width.ONE]
        return _split_interior(rng, seed, rng.choice(candidates))
    if ones == 0:
        return _split_interior(rng, seed, rng.choice(ALL_AXES))
    raise GenerationError(f"Unexpected width combination: ones={ones}, twos={twos}")


def generate_candidates(side_length: int, rng: RandomSource) -> List[GBlock]:
    """Flattened leaves, empty cells included, tiling the whole cube."""

    return flatten_tree(gen_tree(rng, Seed.cube(side_length)))


def generate_blocks(side_length: int, rng: RandomSource) -> List[Block]:
    candidates = generate_candidates(side_length, rng)
    blocks = gblocks_to_blocks(candidates)
    LOGGER.debug("Subdivided cube of side %d into %d cells, %d filled", side_length, len(candidates), len(blocks))
    return blocks


def generate_level(side_length: int, rng: RandomSource) -> List[Block]:
    """Generate a level of side ``side_length`` with locked blocks pruned."""

    blocks = generate_blocks(side_length, rng)
    level = remove_locked(blocks)
    LOGGER.info(
        "Generated level of side %d: %d blocks (%d pruned as locked)",
        side_length,
        len(level),
        len(blocks) - len(level),
    )
    return level
