"""
Height-field accumulation over a set of faults.

Every fault splits each column of the map at its crest row: cells at or above
the crest (row index <= crest) get the fault's sign, the rest get the opposite
sign. The height of a cell is the sum of these +1/-1 contributions, so for N
faults it always lies in [-N, N].

Rather than testing every (fault, column, row) triple, each column is built
from a difference array: a fault with sign s contributes s to every row up to
its crest and -s after it, i.e. a single step of -2s at the first row past the
crest. Counting steps per row with bincount and taking a cumulative sum gives
the exact integer heights.
"""

import math
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence, Tuple

import numpy as np
import structlog

from .errors import InvalidConfigError
from .faults import Fault
from ..config.settings import settings

logger = structlog.get_logger()


def validate_size(size: Tuple[int, int]) -> Tuple[int, int]:
    """Check a (width, height) pair and return it as ints."""
    try:
        width, height = (int(v) for v in size)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigError(f"Size must be a (width, height) pair, got {size!r}") from exc

    if width <= 0 or height <= 0:
        raise InvalidConfigError(f"Map size must have positive area, got {width}x{height}")
    return width, height


def height_dtype(fault_count: int) -> np.dtype:
    """Smallest signed integer dtype holding [-fault_count, fault_count]."""
    for dtype in (np.int16, np.int32):
        if fault_count <= np.iinfo(dtype).max:
            return np.dtype(dtype)
    return np.dtype(np.int64)


def crest_rows(size: Tuple[int, int], faults: Sequence[Fault]) -> np.ndarray:
    """
    Compute the crest row of every fault in every column.

    Args:
        size: (width, height) of the map
        faults: Faults to evaluate

    Returns:
        float64 array of shape (len(faults), width)
    """
    width, height = validate_size(size)
    if not faults:
        return np.empty((0, width), dtype=np.float64)

    xsi = np.fromiter((f.xsi for f in faults), dtype=np.float64, count=len(faults))
    shift = np.fromiter((f.shift for f in faults), dtype=np.float64, count=len(faults))
    tan_b = np.fromiter((f.tan_b for f in faults), dtype=np.float64, count=len(faults))

    x = np.arange(width, dtype=np.float64)
    sin_arg = width * (xsi + shift)[:, np.newaxis] - x[np.newaxis, :]
    phase = np.sin(sin_arg * 2.0 * math.pi / width)

    return (height / math.pi) * np.arctan(phase * tan_b[:, np.newaxis]) + height / 2.0


def _accumulate_columns(
    crests: np.ndarray, raising: np.ndarray, height: int
) -> np.ndarray:
    """
    Sum fault contributions for a block of columns.

    Args:
        crests: Crest rows, shape (n_faults, n_cols)
        raising: Boolean flag per fault
        height: Number of rows

    Returns:
        int64 array of shape (height, n_cols)
    """
    n_faults, n_cols = crests.shape

    # First row strictly below the crest, clipped to [0, height]
    first_below = np.clip(np.floor(crests) + 1, 0, height).astype(np.intp)
    flat = first_below * n_cols + np.arange(n_cols)[np.newaxis, :]

    size = (height + 1) * n_cols
    up_steps = np.bincount(flat[raising].ravel(), minlength=size)
    down_steps = np.bincount(flat[~raising].ravel(), minlength=size)
    steps = (up_steps - down_steps).reshape(height + 1, n_cols)[:height]

    top = int(raising.sum()) - int((~raising).sum())
    return top - 2 * np.cumsum(steps, axis=0)


def compute_heights(
    size: Tuple[int, int],
    faults: Sequence[Fault],
    max_workers: Optional[int] = None,
    chunk_columns: Optional[int] = None,
) -> np.ndarray:
    """
    Build the height field for a list of faults.

    Args:
        size: (width, height) of the map
        faults: Faults to accumulate
        max_workers: Worker threads, defaults to settings.workers
        chunk_columns: Columns per task, defaults to settings.chunk_columns

    Returns:
        Integer array of shape (height, width) indexed [y, x]
    """
    width, height = validate_size(size)
    dtype = height_dtype(len(faults))
    if max_workers is None:
        max_workers = settings.workers
    if chunk_columns is None:
        chunk_columns = settings.chunk_columns

    if max_workers < 1 or chunk_columns < 1:
        raise InvalidConfigError("max_workers and chunk_columns must be positive")

    heights = np.empty((height, width), dtype=dtype)
    if not faults:
        heights.fill(0)
        return heights

    logger.info(
        "Computing height field",
        width=width,
        height=height,
        faults=len(faults),
        workers=max_workers,
    )
    started = time.perf_counter()

    crests = crest_rows((width, height), faults)
    raising = np.fromiter((f.flag for f in faults), dtype=bool, count=len(faults))
    bounds = [(x0, min(x0 + chunk_columns, width)) for x0 in range(0, width, chunk_columns)]

    def block(span):
        x0, x1 = span
        return _accumulate_columns(crests[:, x0:x1], raising, height)

    if max_workers == 1 or len(bounds) == 1:
        blocks = map(block, bounds)
        for (x0, x1), values in zip(bounds, blocks):
            heights[:, x0:x1] = values
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            for (x0, x1), values in zip(bounds, executor.map(block, bounds)):
                heights[:, x0:x1] = values

    logger.info(
        "Height field complete",
        min_height=int(heights.min()),
        max_height=int(heights.max()),
        elapsed=round(time.perf_counter() - started, 3),
    )
    return heights


def height_range(heights: np.ndarray) -> Tuple[int, int]:
    """Return (min, max) of a height field as Python ints."""
    return int(heights.min()), int(heights.max())
