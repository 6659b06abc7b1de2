"""Run the generational OneMax genetic algorithm."""

from __future__ import annotations

import argparse
from pathlib import Path

from onemax.analysis.evolution_analysis import EvolutionAnalyzer
from onemax.config import Config, ConfigurationError
from onemax.core.evolution_simulation import EvolutionSimulation
from onemax.evolution.random_source import RandomSource
from onemax.monitoring.reporter import ConsoleReporter


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run truncation-selection OneMax GA")
    parser.add_argument("--genome-length", type=int, default=None)
    parser.add_argument("--population", type=int, default=None)
    parser.add_argument("--bottleneck", type=int, default=None)
    parser.add_argument("--generations", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--quiet", action="store_true", help="Hide final population")
    parser.add_argument("--plot", action="store_true", help="Write report and plots")
    parser.add_argument("--output-dir", type=str, default=None)
    args = parser.parse_args(argv)

    def pick(value: int | None, default: int) -> int:
        return default if value is None else value

    class RunConfig(Config):
        GENOME_LENGTH = pick(args.genome_length, Config.GENOME_LENGTH)
        POPULATION_SIZE = pick(args.population, Config.POPULATION_SIZE)
        BOTTLENECK = pick(args.bottleneck, Config.BOTTLENECK)
        MAX_GENERATIONS = pick(args.generations, Config.MAX_GENERATIONS)
        SEED = args.seed

    source = (
        RandomSource.from_entropy()
        if args.seed is None
        else RandomSource.from_seed(args.seed)
    )
    reporter = ConsoleReporter(show_population=not args.quiet)

    try:
        sim = EvolutionSimulation(config=RunConfig, source=source, reporter=reporter)
    except ConfigurationError as exc:
        parser.error(str(exc))

    result = sim.run()

    if args.plot:
        output_dir = Path(args.output_dir or RunConfig.ANALYSIS_DIR)
        analyzer = EvolutionAnalyzer(result)
        report_path = analyzer.save_report(output_dir)
        analyzer.plot_fitness_curves(output_dir)
        analyzer.plot_diversity(output_dir)
        print(f"Report written to {report_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
