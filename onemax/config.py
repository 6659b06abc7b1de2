"""Project-wide configuration constants."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar


class ConfigurationError(ValueError):
    """Raised when the GA parameters cannot describe a valid run."""


@dataclass(frozen=True)
class Config:
    """Central configuration constants for OneMax runs."""

    # Algorithm parameters
    GENOME_LENGTH: ClassVar[int] = 16  # Bits per genome (N)
    POPULATION_SIZE: ClassVar[int] = 40  # Genomes per population (M), even
    BOTTLENECK: ClassVar[int] = 20  # Elite/replacement count (B), even
    MAX_GENERATIONS: ClassVar[int] = 10  # Hard iteration cap

    # Run parameters
    SEED: ClassVar[int | None] = None  # None = seed from system entropy

    # Path parameters
    DATA_DIR: ClassVar[str] = "data"  # Base data directory
    ANALYSIS_DIR: ClassVar[str] = "data/analysis"  # Reports and plots

    @classmethod
    def create_dirs(cls) -> None:
        """Create required data directories."""
        for path in (cls.DATA_DIR, cls.ANALYSIS_DIR):
            Path(path).mkdir(parents=True, exist_ok=True)


def validate_config(config: type[Config]) -> None:
    """Check the four GA parameters before anything is allocated."""

    values = {
        "GENOME_LENGTH": config.GENOME_LENGTH,
        "POPULATION_SIZE": config.POPULATION_SIZE,
        "BOTTLENECK": config.BOTTLENECK,
        "MAX_GENERATIONS": config.MAX_GENERATIONS,
    }
    for name, value in values.items():
        # bool is an int subclass but never a sensible size
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")

    if config.GENOME_LENGTH < 1:
        raise ConfigurationError(
            f"GENOME_LENGTH must be >= 1, got {config.GENOME_LENGTH}"
        )
    if config.POPULATION_SIZE < 2 or config.POPULATION_SIZE % 2:
        raise ConfigurationError(
            f"POPULATION_SIZE must be even and >= 2, got {config.POPULATION_SIZE}"
        )
    if config.BOTTLENECK <= 0 or config.BOTTLENECK % 2:
        raise ConfigurationError(
            f"BOTTLENECK must be even and > 0, got {config.BOTTLENECK}"
        )
    if config.BOTTLENECK > config.POPULATION_SIZE:
        raise ConfigurationError(
            f"BOTTLENECK ({config.BOTTLENECK}) must not exceed "
            f"POPULATION_SIZE ({config.POPULATION_SIZE})"
        )
    if config.MAX_GENERATIONS < 0:
        raise ConfigurationError(
            f"MAX_GENERATIONS must be >= 0, got {config.MAX_GENERATIONS}"
        )
