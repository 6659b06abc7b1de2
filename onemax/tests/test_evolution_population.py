"""Tests for the population container."""

from __future__ import annotations

import pytest

from onemax.config import Config
from onemax.evolution.fitness import compute_fitness
from onemax.evolution.genome import Genome
from onemax.evolution.population import Population
from onemax.evolution.random_source import RandomSource


def _population(*bits: str) -> Population:
    pop = Population(size=len(bits), genome_length=len(bits[0]))
    pop.set_genomes([Genome.from_string(b) for b in bits])
    return pop


def test_initialize_random_sizes():
    pop = Population(size=40, genome_length=16)
    pop.initialize_random(RandomSource.from_seed(1))
    assert len(pop) == 40
    assert all(len(genome) == 16 for genome in pop)


def test_defaults_come_from_config():
    pop = Population()
    assert pop.size == Config.POPULATION_SIZE
    assert pop.genome_length == Config.GENOME_LENGTH


def test_sort_descending_orders_by_fitness():
    pop = Population(size=30, genome_length=9)
    pop.initialize_random(RandomSource.from_seed(3))
    pop.sort_descending()
    scores = pop.fitness_scores()
    assert all(a >= b for a, b in zip(scores, scores[1:]))
    assert pop.best_fitness() == max(scores)


def test_sort_is_stable_for_ties():
    pop = _population("1000", "1111", "0100", "0010", "1100")
    pop.sort_descending()
    assert [g.to_string() for g in pop] == ["1111", "1100", "1000", "0100", "0010"]


def test_set_genomes_checks_size_and_length():
    pop = Population(size=2, genome_length=3)
    with pytest.raises(ValueError):
        pop.set_genomes([Genome.from_string("101")])
    with pytest.raises(ValueError):
        pop.set_genomes([Genome.from_string("101"), Genome.from_string("10")])


def test_replace_keeps_size_and_checks_length():
    pop = _population("00", "01")
    pop.replace(1, Genome.from_string("11"))
    assert len(pop) == 2
    assert pop[1].to_string() == "11"
    with pytest.raises(ValueError):
        pop.replace(0, Genome.from_string("111"))
    with pytest.raises(IndexError):
        pop.replace(2, Genome.from_string("11"))


def test_diversity_identical_population_is_zero():
    pop = _population("1010", "1010", "1010")
    assert pop.compute_diversity() == 0.0


def test_diversity_matches_pairwise_hamming():
    pop = _population("0000", "1111", "1100")
    # Distances: 4, 2, 2 -> mean 8/3, normalised by 4
    assert pop.compute_diversity() == pytest.approx((8 / 3) / 4)


def test_record_generation_appends_history():
    pop = _population("1111", "1100", "0000", "1000")
    pop.sort_descending()
    pop.record_generation(1)
    assert pop.history.generation == [1]
    assert pop.history.best_fitness == [1.0]
    assert pop.history.worst_fitness == [0.0]
    assert pop.history.avg_fitness[0] == pytest.approx(
        sum(compute_fitness(g) for g in pop) / 4
    )
    assert pop.history.best_genome == ["1111"]


def test_best_on_empty_population_raises():
    pop = Population(size=2, genome_length=2)
    with pytest.raises(ValueError):
        pop.best()
