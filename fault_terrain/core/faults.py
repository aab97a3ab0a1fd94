"""
Fault planes for fault-line terrain synthesis.

Each fault is a randomly oriented plane through the centre of a sphere. Its
intersection with the sphere, unrolled onto the map, is a sinusoidal crest
line; cells on one side of the crest are raised and the rest lowered.
"""

import math
from dataclasses import dataclass, field
from typing import List

import structlog

from .errors import InvalidConfigError
from ..utils.random import SeedLike, make_rng

logger = structlog.get_logger()


@dataclass(frozen=True)
class Fault:
    """
    One sampled fault plane.

    alpha and beta orient the plane; tan_b and xsi are derived from them once
    at construction and drive the crest computation.
    """

    flag: bool
    alpha: float
    beta: float
    shift: float
    tan_b: float = field(init=False)
    xsi: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self, "tan_b", math.tan(math.acos(math.cos(self.alpha) * math.cos(self.beta)))
        )
        object.__setattr__(self, "xsi", 0.5 - self.beta / math.pi)

    @classmethod
    def random(cls, rng) -> "Fault":
        """Sample a fault from a numpy Generator."""
        alpha = (rng.random() - 0.5) * math.pi
        beta = (rng.random() - 0.5) * math.pi
        flag = bool(rng.random() < 0.5)
        shift = rng.random() - 0.5
        return cls(flag=flag, alpha=alpha, beta=beta, shift=shift)


def generate_faults(count: int, rng: SeedLike = None) -> List[Fault]:
    """
    Generate a batch of independent faults.

    Args:
        count: Number of faults, zero gives a flat map
        rng: Generator, integer seed, seed name, or None for OS entropy

    Returns:
        List of Fault instances
    """
    if count < 0:
        raise InvalidConfigError(f"Fault count must be non-negative, got {count}")

    rng = make_rng(rng)
    faults = [Fault.random(rng) for _ in range(count)]

    logger.debug("Generated faults", count=count)
    return faults
