"""
Random number generation utilities.

Fault sampling always draws from an explicit NumPy ``Generator`` handed in by
the caller. Nothing here keeps module level state, so two generators built
from the same seed produce the same faults in any thread.
"""

import hashlib
from typing import Optional, Union

import numpy as np

SeedLike = Union[None, int, str, np.random.Generator]


def seed_from_name(seed_name: str) -> int:
    """
    Turn a free-text seed name into a 64-bit integer seed.

    Args:
        seed_name: Any string, e.g. a map name typed by a user

    Returns:
        Non-negative integer derived from the SHA-256 digest of the name
    """
    digest = hashlib.sha256(seed_name.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "little")


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Build a NumPy random generator from any accepted seed form.

    Args:
        seed: Existing generator (returned as is), integer seed, seed name,
            or None for fresh OS entropy

    Returns:
        numpy.random.Generator
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if isinstance(seed, str):
        seed = seed_from_name(seed)
    return np.random.default_rng(seed)


def random_seed() -> int:
    """Draw a new 32-bit seed from OS entropy, for recording alongside a map."""
    return int(np.random.default_rng().integers(0, 2**32))
