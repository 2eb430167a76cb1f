from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Uniform integer source shared by every question generator."""

    def next_int(self, low: int, high: int) -> int:
        """Return an int in ``[low, high)``."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        ...


class Randomizer:
    """Seeded RNG wrapper to keep deterministic streams explicit.

    ``seed=None`` draws from OS entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(None if seed is None else int(seed))

    def next_int(self, low: int, high: int) -> int:
        if low >= high:
            raise ValueError("high must be greater than low")
        return self._rng.randrange(low, high)

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)
