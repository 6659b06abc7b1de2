"""Evolution module for the OneMax genetic algorithm."""

from __future__ import annotations

__all__ = [
    "random_source",
    "genome",
    "fitness",
    "population",
    "selection",
    "operators",
]
