"""Analysis utilities for generational runs."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from onemax.core.evolution_simulation import RunResult  # noqa: E402
from onemax.evolution.fitness import compute_fitness  # noqa: E402


class EvolutionAnalyzer:
    """Write the report and plots of one finished run."""

    def __init__(self, result: RunResult) -> None:
        self.result = result
        self.history = asdict(result.history)

    def save_report(self, output_dir: str | Path) -> Path:
        """Save history and final population to JSON."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / "run_report.json"

        payload = {
            "generations": self.result.generations,
            "best_fitness": self.result.best_fitness,
            "history": self.history,
            "final_population": [
                {"genome": genome.to_string(), "fitness": compute_fitness(genome)}
                for genome in self.result.population
            ],
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        return path

    def plot_fitness_curves(self, output_dir: str | Path) -> Path | None:
        """Plot best/average/worst fitness per generation."""
        generations = self.history.get("generation", [])
        if not generations:
            return None
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        fig, ax = plt.subplots(figsize=(10, 5))
        ax.plot(generations, self.history["avg_fitness"], label="Avg")
        ax.plot(generations, self.history["best_fitness"], label="Best")
        ax.plot(generations, self.history["worst_fitness"], label="Worst")
        ax.set_xlabel("Generation")
        ax.set_ylabel("Fitness")
        ax.set_ylim(0.0, 1.05)
        ax.set_title("Fitness Curves")
        ax.legend()
        path = output_dir / "fitness_curves.png"
        plt.tight_layout()
        plt.savefig(path, dpi=150)
        plt.close(fig)
        return path

    def plot_diversity(self, output_dir: str | Path) -> Path | None:
        """Plot genome diversity trend."""
        diversity = self.history.get("genome_diversity", [])
        if not diversity:
            return None
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        fig, ax = plt.subplots(figsize=(10, 5))
        ax.plot(self.history["generation"], diversity)
        ax.set_xlabel("Generation")
        ax.set_ylabel("Mean Hamming distance / N")
        ax.set_title("Genome Diversity")
        path = output_dir / "genome_diversity.png"
        plt.tight_layout()
        plt.savefig(path, dpi=150)
        plt.close(fig)
        return path
