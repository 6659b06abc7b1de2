"""Analysis module for OneMax runs."""

from __future__ import annotations

from onemax.analysis.evolution_analysis import EvolutionAnalyzer

__all__ = [
    "EvolutionAnalyzer",
]
