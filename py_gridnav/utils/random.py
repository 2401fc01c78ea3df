"""
Random number generation utilities.

Generators never share a PRNG: each call builds a fresh Alea instance from
its seed, so there is no module-level random state between calls. Python's
random and NumPy's random are not used, which keeps edit sequences identical
across platforms for a given seed.
"""

from typing import Optional, Union

from ..config import settings
from ..core.alea_prng import AleaPRNG

Seed = Union[int, str]


def normalize_seed(seed: Optional[Seed]) -> str:
    """
    Turn a user supplied seed into the canonical seed string.

    Args:
        seed: Integer or string seed, or None for the configured default

    Returns:
        Seed string fed to the Alea PRNG
    """
    if seed is None:
        return settings.default_seed
    return str(seed)


def create_prng(seed: Optional[Seed], salt: str = "") -> AleaPRNG:
    """
    Create a new Alea PRNG instance.

    Args:
        seed: Seed value; None uses ``settings.default_seed``
        salt: Optional stream name so two consumers of one seed diverge

    Returns:
        Fresh AleaPRNG instance
    """
    base = normalize_seed(seed)
    if salt:
        return AleaPRNG([base, salt])
    return AleaPRNG(base)
