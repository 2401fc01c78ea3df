"""Shared utilities: logging setup, seeded randomness and noise."""

from .logging import configure_logging
from .noise import PerlinNoise
from .random import Seed, create_prng, normalize_seed

__all__ = ["configure_logging", "PerlinNoise", "Seed", "create_prng", "normalize_seed"]
