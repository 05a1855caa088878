"""Injectable randomness for level generation."""
from __future__ import annotations

from typing import Optional, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource(Protocol):
    """The only random capabilities the generator relies on."""

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in the closed range ``[low, high]``."""

    def chance(self, probability: float) -> bool:
        """True with the given probability."""

    def choice(self, options: Sequence[T]) -> T:
        """Uniformly selected element of a non-empty sequence."""


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Dedicated numpy generator for one level; ``None`` draws fresh entropy."""

    if seed is None:
        return np.random.default_rng()
    # Negative or oversized seeds wrap into the unsigned 64-bit range numpy expects.
    return np.random.default_rng(np.uint64(seed & ((1 << 64) - 1)))


class NumpyRandomSource:
    """:class:`RandomSource` backed by a numpy ``Generator``."""

    def __init__(self, generator: np.random.Generator) -> None:
        self._generator = generator

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> "NumpyRandomSource":
        return cls(make_rng(seed))

    def integer(self, low: int, high: int) -> int:
        if high < low:
            raise ValueError(f"Empty integer range [{low}, {high}]")
        return int(self._generator.integers(low, high + 1))

    def chance(self, probability: float) -> bool:
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must be within [0, 1]")
        return bool(self._generator.random() < probability)

    def choice(self, options: Sequence[T]) -> T:
        if not options:
            raise ValueError("Cannot choose from an empty sequence")
        return options[self.integer(0, len(options) - 1)]
