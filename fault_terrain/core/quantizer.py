"""
Height to palette-bucket quantization.

Water and land get separate linear ramps so the coastline always falls on
the boundary between the last water bucket and the first land bucket.
"""

import numpy as np
import structlog

from .errors import InvalidConfigError

logger = structlog.get_logger()


def bucket_dtype(bucket_count: int) -> np.dtype:
    """Smallest unsigned dtype that can index bucket_count buckets."""
    return np.min_scalar_type(max(bucket_count - 1, 0))


def _ramp(offsets: np.ndarray, buckets: int, span: int) -> np.ndarray:
    """floor(offsets * buckets / span) clamped to [0, buckets), or zeros if span <= 0."""
    if span <= 0:
        return np.zeros(offsets.shape, dtype=np.int64)
    return np.clip((offsets * buckets) // span, 0, buckets - 1)


def quantize(
    heights: np.ndarray, threshold: int, water_buckets: int, land_buckets: int
) -> np.ndarray:
    """
    Map heights to palette buckets around a water threshold.

    Args:
        heights: Integer height field
        threshold: Water line from find_threshold
        water_buckets: Buckets for cells below the threshold
        land_buckets: Buckets for cells at or above the threshold

    Returns:
        Bucket indices in [0, water_buckets + land_buckets), same shape as heights
    """
    if water_buckets <= 0 or land_buckets <= 0:
        raise InvalidConfigError(
            f"Bucket counts must be positive, got water={water_buckets} land={land_buckets}"
        )

    values = np.asarray(heights).astype(np.int64)
    min_height = int(values.min())
    max_height = int(values.max())
    threshold = int(threshold)

    water = values < threshold
    water_index = _ramp(values - min_height, water_buckets, threshold - min_height)
    land_index = _ramp(values - threshold, land_buckets, max_height - threshold) + water_buckets

    colors = np.where(water, water_index, land_index)
    return colors.astype(bucket_dtype(water_buckets + land_buckets))


def quantize_relief(heights: np.ndarray, buckets: int) -> np.ndarray:
    """
    Map heights onto a single linear ramp from the lowest to the highest cell.

    The highest cell lands in bucket buckets - 1. The unclamped ramp
    floor((h - min) / (max - min) * buckets) would put it at index buckets,
    one past the range, so it is folded into the last bucket.

    Args:
        heights: Integer height field
        buckets: Number of buckets

    Returns:
        Bucket indices in [0, buckets)
    """
    if buckets <= 0:
        raise InvalidConfigError(f"Bucket count must be positive, got {buckets}")

    values = np.asarray(heights).astype(np.int64)
    min_height = int(values.min())
    colors = _ramp(values - min_height, buckets, int(values.max()) - min_height)
    return colors.astype(bucket_dtype(buckets))
