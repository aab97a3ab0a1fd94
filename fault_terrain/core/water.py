"""
Water level selection.

The water line is the smallest height t (no lower than the field minimum)
such that at least floor(percent_water * cells) cells lie strictly below t.
"""

import math

import numpy as np
import structlog

from .errors import InvalidConfigError

logger = structlog.get_logger()


def validate_percent_water(percent_water: float) -> float:
    """Reject water shares outside [0, 1]."""
    if not (0.0 <= percent_water <= 1.0):
        raise InvalidConfigError(f"percent_water must lie in [0, 1], got {percent_water}")
    return float(percent_water)


def water_target(total: int, percent_water: float) -> int:
    """Number of cells that must end up below the water line (rounded down)."""
    # Round away representation error first so 0.29 * 100 floors to 29, not 28
    return int(math.floor(round(validate_percent_water(percent_water) * total, 9)))


def find_threshold(heights: np.ndarray, percent_water: float) -> int:
    """
    Find the water threshold for a height field.

    Args:
        heights: Integer height field
        percent_water: Target share of water cells in [0, 1]

    Returns:
        Threshold t; cells with height < t are water
    """
    heights = np.asarray(heights)
    if heights.size == 0:
        raise InvalidConfigError("Cannot find a water level for an empty height field")

    target = water_target(heights.size, percent_water)
    min_height = int(heights.min())
    if target == 0:
        return min_height

    # below[k] = number of cells with height < min_height + k
    counts = np.bincount((heights.ravel().astype(np.int64) - min_height))
    below = np.concatenate(([0], np.cumsum(counts)))

    # below is non-decreasing, so the first k reaching target is a binary search
    threshold = min_height + int(np.searchsorted(below, target, side="left"))

    logger.debug(
        "Water threshold found",
        percent_water=percent_water,
        target=target,
        threshold=threshold,
    )
    return threshold


def water_fraction(heights: np.ndarray, threshold: int) -> float:
    """Share of cells strictly below the threshold."""
    heights = np.asarray(heights)
    return float(np.count_nonzero(heights < threshold)) / heights.size
