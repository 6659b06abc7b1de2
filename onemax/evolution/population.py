"""Population management for OneMax runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

import numpy as np

from onemax.config import Config
from onemax.evolution.fitness import compute_fitness
from onemax.evolution.genome import Genome
from onemax.evolution.random_source import RandomSource


@dataclass
class PopulationHistory:
    """Summary history for a population, one entry per evaluation."""

    generation: list[int] = field(default_factory=list)
    best_fitness: list[float] = field(default_factory=list)
    avg_fitness: list[float] = field(default_factory=list)
    worst_fitness: list[float] = field(default_factory=list)
    genome_diversity: list[float] = field(default_factory=list)
    best_genome: list[str] = field(default_factory=list)


class Population:
    """Ordered collection of equal-length genomes with a fixed size."""

    def __init__(
        self,
        size: int | None = None,
        genome_length: int | None = None,
        config: type[Config] | None = None,
    ) -> None:
        self.config = config or Config
        self.size = size or self.config.POPULATION_SIZE
        self.genome_length = genome_length or self.config.GENOME_LENGTH

        self.genomes: list[Genome] = []
        self.history = PopulationHistory()

    def initialize_random(self, source: RandomSource) -> None:
        """Fill the population with random genomes, bit by bit."""
        self.genomes = [
            Genome.random(self.genome_length, source) for _ in range(self.size)
        ]

    def set_genomes(self, genomes: Sequence[Genome]) -> None:
        """Replace every member at once (used to seed known populations)."""
        if len(genomes) != self.size:
            raise ValueError(f"expected {self.size} genomes, got {len(genomes)}")
        for genome in genomes:
            self._check_length(genome)
        self.genomes = list(genomes)

    def fitness_scores(self) -> list[float]:
        return [compute_fitness(genome) for genome in self.genomes]

    def sort_descending(self) -> None:
        """Order by fitness, best first.

        The sort is stable: genomes of equal fitness keep their relative
        order, so a fixed seed always yields the same ordering.
        """
        self.genomes.sort(key=compute_fitness, reverse=True)

    def best(self) -> Genome:
        """Genome at index 0 (the fittest right after a sort)."""
        if not self.genomes:
            raise ValueError("population is empty")
        return self.genomes[0]

    def best_fitness(self) -> float:
        return compute_fitness(self.best())

    def replace(self, index: int, genome: Genome) -> None:
        """Overwrite one slot with a new genome."""
        if not 0 <= index < len(self.genomes):
            raise IndexError(f"index {index} out of range for {len(self.genomes)}")
        self._check_length(genome)
        self.genomes[index] = genome

    def compute_diversity(self) -> float:
        """Average pairwise Hamming distance, normalised by genome length."""
        if len(self.genomes) < 2:
            return 0.0
        bits = np.stack([genome.genes for genome in self.genomes]).astype(np.int32)
        # Pairwise differing bits via ones-count algebra
        ones = bits.sum(axis=1)
        shared = bits @ bits.T
        distances = ones[:, None] + ones[None, :] - 2 * shared
        upper = distances[np.triu_indices(len(self.genomes), k=1)]
        return float(upper.mean()) / self.genome_length

    def record_generation(self, generation: int) -> None:
        """Record statistics of the current (sorted) population."""
        fitness_scores = self.fitness_scores()
        if not fitness_scores:
            raise ValueError("population is empty")

        self.history.generation.append(generation)
        self.history.best_fitness.append(float(np.max(fitness_scores)))
        self.history.avg_fitness.append(float(np.mean(fitness_scores)))
        self.history.worst_fitness.append(float(np.min(fitness_scores)))
        self.history.genome_diversity.append(self.compute_diversity())

        best_idx = int(np.argmax(fitness_scores))
        self.history.best_genome.append(self.genomes[best_idx].to_string())

    def _check_length(self, genome: Genome) -> None:
        if len(genome) != self.genome_length:
            raise ValueError(
                f"genome length must be {self.genome_length}, got {len(genome)}"
            )

    def __len__(self) -> int:
        return len(self.genomes)

    def __iter__(self) -> Iterator[Genome]:
        return iter(self.genomes)

    def __getitem__(self, index: int) -> Genome:
        return self.genomes[index]
