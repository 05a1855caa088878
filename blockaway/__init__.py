"""Blockaway package.

Procedural generator and movement rules for a puzzle in which every block
slides along its own direction until it hits another block or leaves the
volume. The goal is to clear the whole cube.
"""

from .axis import ALL_AXES, ALL_DIRECTIONS, Axis, Direction, XN, XP, YN, YP, ZN, ZP, rotation_between
from .block import Block, overlap_in_direction
from .generation import (
    GenerationConfig,
    GenerationError,
    InvalidSeedWidthError,
    NumpyRandomSource,
    RandomSource,
    generate_level,
    locked_blocks_to_remove,
    remove_locked,
)
from .gameplay import Level, LevelProgress, LevelSession, MoveOutcome, resolve_move

__all__ = [
    "ALL_AXES",
    "ALL_DIRECTIONS",
    "Axis",
    "Direction",
    "XN",
    "XP",
    "YN",
    "YP",
    "ZN",
    "ZP",
    "rotation_between",
    "Block",
    "overlap_in_direction",
    "GenerationConfig",
    "GenerationError",
    "InvalidSeedWidthError",
    "NumpyRandomSource",
    "RandomSource",
    "generate_level",
    "locked_blocks_to_remove",
    "remove_locked",
    "Level",
    "LevelProgress",
    "LevelSession",
    "MoveOutcome",
    "resolve_move",
]
