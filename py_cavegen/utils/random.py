"""
Random number generation utilities.

Cave generation draws every random value from a run-owned Alea PRNG.
Python's random and NumPy's random are not used in generation code so that a
seed reproduces the same cave on every platform.
"""

import time
from typing import Optional, Union

from ..core.alea_prng import AleaPRNG


def resolve_seed(seed: Optional[Union[str, int]], use_random_seed: bool = False) -> str:
    """
    Decide which seed a generation run uses.

    Args:
        seed: Configured seed, or None
        use_random_seed: Ignore the configured seed and derive one from the clock

    Returns:
        Seed string for this run
    """
    if use_random_seed or seed is None:
        return str(time.time())
    return str(seed)


def create_prng(seed: str) -> AleaPRNG:
    """
    Create a fresh Alea PRNG for a single generation run.

    Args:
        seed: Seed string to use

    Returns:
        AleaPRNG instance owned by the caller
    """
    return AleaPRNG(seed)
