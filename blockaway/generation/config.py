"""Configuration helpers for deterministic level generation."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional

from .random_source import NumpyRandomSource

DEFAULT_SIDE_LENGTH = 3


# //1.- Cube side length and optional seed; a fixed seed replays the same level.
@dataclass(frozen=True)
class GenerationConfig:
    """Parameters driving a single level generation run."""

    side_length: int = DEFAULT_SIDE_LENGTH
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if int(self.side_length) <= 0:
            raise ValueError("side_length must be a positive integer")

    # //2.- Missing keys fall back to the defaults.
    @classmethod
    def from_mapping(cls, payload: Optional[Dict[str, Optional[int]]] = None) -> "GenerationConfig":
        if not payload:
            return cls()
        seed = payload.get("seed")
        return cls(
            side_length=int(payload.get("side_length", DEFAULT_SIDE_LENGTH)),
            seed=int(seed) if seed is not None else None,
        )

    # //3.- Read BLOCKAWAY_SIDE_LENGTH and BLOCKAWAY_SEED when they are set.
    @classmethod
    def from_environment(cls, prefix: str = "BLOCKAWAY") -> "GenerationConfig":
        side_length = os.getenv(f"{prefix}_SIDE_LENGTH")
        seed = os.getenv(f"{prefix}_SEED")
        mapping: Dict[str, Optional[int]] = {}
        if side_length is not None:
            mapping["side_length"] = int(side_length)
        if seed is not None:
            mapping["seed"] = int(seed)
        return cls.from_mapping(mapping)

    # //4.- Random source to hand to generate_level.
    def create_random_source(self) -> NumpyRandomSource:
        return NumpyRandomSource.from_seed(self.seed)


# //5.- An explicit mapping wins; otherwise the environment decides.
def load_generation_config(
    mapping: Optional[Dict[str, Optional[int]]] = None,
    *,
    env_prefix: str = "BLOCKAWAY",
) -> GenerationConfig:
    if mapping is not None:
        return GenerationConfig.from_mapping(mapping)
    return GenerationConfig.from_environment(prefix=env_prefix)
