"""Pytest configuration for the blockaway test suite."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Sequence, TypeVar

import pytest

# //1.- Make the blockaway package importable without an editable install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

T = TypeVar("T")


class ScriptedRandom:
    """Random source replaying fixed answers so tests can steer every branch."""

    def __init__(self, integers: Sequence[int] = (), chances: Sequence[bool] = ()) -> None:
        self.integers: List[int] = list(integers)
        self.chances: List[bool] = list(chances)

    def integer(self, low: int, high: int) -> int:
        value = self.integers.pop(0)
        assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
        return value

    def chance(self, probability: float) -> bool:
        return self.chances.pop(0)

    def choice(self, options: Sequence[T]) -> T:
        return options[self.integer(0, len(options) - 1)]

    def exhausted(self) -> bool:
        return not self.integers and not self.chances


@pytest.fixture
def scripted():
    return ScriptedRandom
