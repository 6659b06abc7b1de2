"""Generational OneMax simulation with truncation selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from onemax.config import Config, validate_config
from onemax.evolution.genome import Genome
from onemax.evolution.operators import GeneticOperators
from onemax.evolution.population import Population, PopulationHistory
from onemax.evolution.random_source import RandomSource
from onemax.evolution.selection import Selection
from onemax.monitoring.reporter import Reporter


class SimulationState(Enum):
    """Lifecycle of a run."""

    INIT = "init"
    EVALUATED = "evaluated"
    REPRODUCING = "reproducing"
    TERMINAL = "terminal"


@dataclass
class RunResult:
    """Outcome of a finished run."""

    population: Population
    generations: int
    best_fitness: float
    history: PopulationHistory


class EvolutionSimulation:
    """Evolution simulation controller.

    Each cycle sorts the population, stops if the best genome is all ones or
    the generation cap has been passed, and otherwise breeds the top
    BOTTLENECK genomes in random pairs, writing their offspring over the
    bottom BOTTLENECK slots.
    """

    def __init__(
        self,
        config: type[Config] | None = None,
        source: RandomSource | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config or Config
        validate_config(self.config)

        if source is None:
            if self.config.SEED is None:
                source = RandomSource.from_entropy()
            else:
                source = RandomSource.from_seed(self.config.SEED)
        self.source = source
        self.reporter = reporter or Reporter()

        self.population = Population(
            self.config.POPULATION_SIZE, self.config.GENOME_LENGTH, self.config
        )
        self.generation = 1
        self.state = SimulationState.INIT

    def initialize(self) -> None:
        """Draw the initial population and evaluate it."""
        self._expect(SimulationState.INIT)
        self.population.initialize_random(self.source)
        self.evaluate()

    def evaluate(self) -> float:
        """Sort the population and report its best fitness."""
        if self.state not in (SimulationState.INIT, SimulationState.REPRODUCING):
            raise RuntimeError(f"cannot evaluate from state {self.state.value}")
        self.population.sort_descending()
        self.population.record_generation(self.generation)
        self.state = SimulationState.EVALUATED

        best_fitness = self.population.best_fitness()
        self.reporter.on_generation(self.generation, best_fitness)
        return best_fitness

    def should_terminate(self) -> bool:
        """Stop on a perfect genome or once the generation cap is passed."""
        self._expect(SimulationState.EVALUATED)
        # Exact comparison: fitness is ones/N, so 1.0 only when all bits set
        return (
            self.population.best_fitness() == 1.0
            or self.generation > self.config.MAX_GENERATIONS
        )

    def reproduce(self) -> None:
        """Replace the bottom BOTTLENECK genomes with offspring of the elite."""
        self._expect(SimulationState.EVALUATED)
        self.state = SimulationState.REPRODUCING

        size = self.config.POPULATION_SIZE
        genome_length = self.config.GENOME_LENGTH

        # Snapshot first: when BOTTLENECK > size / 2 some elites sit in slots
        # that get overwritten before every pair has been bred.
        elites = Selection.get_elites(self.population.genomes, self.config.BOTTLENECK)
        pairs = Selection.pairing_order(self.config.BOTTLENECK, self.source)

        offspring: list[tuple[Genome, Genome]] = []
        for first, second in pairs:
            cut_point = GeneticOperators.random_cut_point(self.source, genome_length)
            offspring.append(
                GeneticOperators.crossover(elites[first], elites[second], cut_point)
            )

        for i, (child1, child2) in enumerate(offspring):
            self.population.replace(size - 2 * i - 2, child1)
            self.population.replace(size - 2 * i - 1, child2)

        self.generation += 1

    def run_one_generation(self) -> bool:
        """Reproduce and re-evaluate once. Returns True when the run is over."""
        if self.state is SimulationState.INIT:
            self.initialize()
        if self.should_terminate():
            return True
        self.reproduce()
        self.evaluate()
        return self.should_terminate()

    def run(self) -> RunResult:
        """Run until a perfect genome appears or the generation cap is passed."""
        if self.state is SimulationState.INIT:
            self.initialize()
        while not self.should_terminate():
            self.reproduce()
            self.evaluate()

        self.state = SimulationState.TERMINAL
        self.reporter.on_finish(self.population, self.generation)
        return RunResult(
            population=self.population,
            generations=self.generation,
            best_fitness=self.population.best_fitness(),
            history=self.population.history,
        )

    def _expect(self, state: SimulationState) -> None:
        if self.state is not state:
            raise RuntimeError(
                f"expected state {state.value}, simulation is {self.state.value}"
            )
