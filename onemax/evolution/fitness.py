"""Fitness computation for OneMax runs."""

from __future__ import annotations

from onemax.evolution.genome import Genome


def compute_fitness(genome: Genome) -> float:
    """Fraction of bits set, in [0, 1]; exactly 1.0 only when all bits are set."""

    return genome.ones / len(genome)
