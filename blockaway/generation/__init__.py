"""Procedural generation of block levels."""
from .config import GenerationConfig, load_generation_config
from .random_source import NumpyRandomSource, RandomSource, make_rng
from .seed import GenerationError, InvalidSeedWidthError, Seed, Width, classify_width
from .tree import GBlock, Leaf, Node, Tree, flatten_tree, gblocks_to_blocks
from .subdivision import generate_blocks, generate_candidates, generate_level, gen_tree, random_direction
from .pruning import bounding_box, locked_blocks_to_remove, remove_locked

__all__ = [
    "GenerationConfig",
    "load_generation_config",
    "NumpyRandomSource",
    "RandomSource",
    "make_rng",
    "GenerationError",
    "InvalidSeedWidthError",
    "Seed",
    "Width",
    "classify_width",
    "GBlock",
    "Leaf",
    "Node",
    "Tree",
    "flatten_tree",
    "gblocks_to_blocks",
    "gen_tree",
    "generate_blocks",
    "generate_candidates",
    "generate_level",
    "random_direction",
    "bounding_box",
    "locked_blocks_to_remove",
    "remove_locked",
]
