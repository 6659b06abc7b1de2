"""Genome definition for the OneMax genetic algorithm."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from onemax.evolution.random_source import RandomSource


class Genome:
    """Fixed-length binary string stored as a read-only int8 vector."""

    def __init__(
        self,
        genes: np.ndarray | Sequence[int] | None = None,
        length: int | None = None,
        source: RandomSource | None = None,
    ) -> None:
        if genes is None:
            if length is None:
                raise ValueError("length is required for a random genome")
            self.genes = self._random_init(length, source or RandomSource())
        else:
            arr = np.asarray(genes)
            if arr.ndim != 1:
                raise ValueError(f"genes must be one-dimensional, got {arr.shape}")
            if length is not None and arr.shape != (length,):
                raise ValueError(f"genes shape must be ({length},), got {arr.shape}")
            if not np.isin(arr, (0, 1)).all():
                raise ValueError("genes must contain only 0 and 1")
            self.genes = arr.astype(np.int8)

        if self.genes.size == 0:
            raise ValueError("genome must have at least one gene")
        self.genes.flags.writeable = False

    @classmethod
    def random(cls, length: int, source: RandomSource) -> "Genome":
        """Genome of independently drawn bits."""

        return cls(length=length, source=source)

    @staticmethod
    def _random_init(length: int, source: RandomSource) -> np.ndarray:
        if length < 1:
            raise ValueError(f"length must be >= 1, got {length}")
        genes = np.zeros(length, dtype=np.int8)
        for j in range(length):
            genes[j] = source.next_bit()
        return genes

    @property
    def ones(self) -> int:
        """Number of set bits (Hamming weight)."""

        return int(np.count_nonzero(self.genes))

    def hamming_distance(self, other: "Genome") -> int:
        """Count positions where the two genomes differ."""

        if len(other) != len(self):
            raise ValueError(
                f"genome lengths differ: {len(self)} and {len(other)}"
            )
        return int(np.count_nonzero(self.genes != other.genes))

    def to_string(self) -> str:
        """Render as a string of 0/1 characters."""

        return "".join(str(int(bit)) for bit in self.genes)

    @classmethod
    def from_string(cls, bits: str) -> "Genome":
        """Parse a string of 0/1 characters."""

        if not bits or set(bits) - {"0", "1"}:
            raise ValueError(f"expected a non-empty string of 0/1, got {bits!r}")
        return cls(genes=[int(ch) for ch in bits])

    def __len__(self) -> int:
        return int(self.genes.size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        return np.array_equal(self.genes, other.genes)

    def __hash__(self) -> int:
        return hash(self.genes.tobytes())

    def __repr__(self) -> str:
        return f"Genome({self.to_string()!r})"
