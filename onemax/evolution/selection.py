"""Truncation selection and random mating order."""

from __future__ import annotations

from typing import Sequence

from onemax.evolution.genome import Genome
from onemax.evolution.random_source import RandomSource


class Selection:
    """Elite preservation and parent pairing."""

    @staticmethod
    def get_elites(
        population: Sequence[Genome],
        elite_count: int,
    ) -> list[Genome]:
        """Return the first elite_count genomes of a fitness-sorted population."""

        if elite_count <= 0 or elite_count > len(population):
            raise ValueError(
                f"elite_count must be in [1, {len(population)}], got {elite_count}"
            )
        return list(population[:elite_count])

    @staticmethod
    def pairing_order(
        elite_count: int,
        source: RandomSource,
    ) -> list[tuple[int, int]]:
        """Pair elite indices at random, each index used exactly once.

        Parents are not chosen by fitness: indices 0..elite_count-1 are
        shuffled and consumed two at a time.
        """

        if elite_count <= 0 or elite_count % 2:
            raise ValueError(f"elite_count must be even and > 0, got {elite_count}")

        candidates = list(range(elite_count))
        source.shuffle(candidates)
        return [
            (candidates[2 * i], candidates[2 * i + 1])
            for i in range(elite_count // 2)
        ]
