"""Reporting sinks for generational runs."""

from __future__ import annotations

from onemax.evolution.fitness import compute_fitness
from onemax.evolution.population import Population


class Reporter:
    """Sink receiving run progress. The base class ignores everything."""

    def on_generation(self, generation: int, best_fitness: float) -> None:
        """Called after every evaluation with the best fitness."""

    def on_finish(self, population: Population, generation: int) -> None:
        """Called once with the final population and generation count."""


class ConsoleReporter(Reporter):
    """Print progress and the final population to stdout."""

    def __init__(self, show_population: bool = True) -> None:
        self.show_population = show_population

    def on_generation(self, generation: int, best_fitness: float) -> None:
        print(f"Generation {generation:>4d}  Best fitness: {best_fitness:.4f}")

    def on_finish(self, population: Population, generation: int) -> None:
        if self.show_population:
            print("\n" + "=" * 60)
            print("Final population")
            print("=" * 60)
            for genome in population:
                print(f"{genome.to_string()} f={compute_fitness(genome):.4f}")
        print(f"Generations: {generation}")
