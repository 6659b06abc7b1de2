"""Genetic operators: single-point crossover."""

from __future__ import annotations

import numpy as np

from onemax.evolution.genome import Genome
from onemax.evolution.random_source import RandomSource


class GeneticOperators:
    """Genetic operators for genomes."""

    @staticmethod
    def random_cut_point(source: RandomSource, genome_length: int) -> int:
        """Cut point drawn uniformly from [0, genome_length)."""

        return source.next_int(genome_length)

    @staticmethod
    def crossover(
        parent1: Genome,
        parent2: Genome,
        cut_point: int,
    ) -> tuple[Genome, Genome]:
        """Swap the tails of two parents at cut_point."""

        length = len(parent1)
        if len(parent2) != length:
            raise ValueError(
                f"parent lengths differ: {length} and {len(parent2)}"
            )
        if not 0 <= cut_point <= length:
            raise ValueError(f"cut_point must be in [0, {length}], got {cut_point}")

        child1_genes = np.concatenate(
            [parent1.genes[:cut_point], parent2.genes[cut_point:]]
        )
        child2_genes = np.concatenate(
            [parent2.genes[:cut_point], parent1.genes[cut_point:]]
        )
        return Genome(child1_genes, length=length), Genome(child2_genes, length=length)
