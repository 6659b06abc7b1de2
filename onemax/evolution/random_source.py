"""Injectable source of randomness for the genetic algorithm."""

from __future__ import annotations

from typing import MutableSequence, TypeVar

import numpy as np
from numpy.random import Generator

T = TypeVar("T")


class RandomSource:
    """Uniform bits, bounded integers and shuffles drawn from one generator.

    Every component that needs randomness receives the same instance, built
    once by whoever starts the run. Seeding it explicitly makes a whole run
    reproducible.
    """

    def __init__(self, rng: Generator | None = None) -> None:
        self.rng = rng or np.random.default_rng()

    @classmethod
    def from_seed(cls, seed: int) -> "RandomSource":
        """Deterministic source for reproducible runs."""

        return cls(np.random.default_rng(seed))

    @classmethod
    def from_entropy(cls) -> "RandomSource":
        """Source seeded from operating system entropy."""

        return cls(np.random.default_rng())

    def next_bit(self) -> int:
        """Return 0 or 1 with equal probability."""

        return int(self.rng.integers(0, 2))

    def next_int(self, n: int) -> int:
        """Return an integer drawn uniformly from [0, n)."""

        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        return int(self.rng.integers(0, n))

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Permute items in place (modern Fisher-Yates)."""

        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(i + 1)
            items[i], items[j] = items[j], items[i]
