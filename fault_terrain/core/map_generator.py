"""
End-to-end map generation.

Faults -> height field -> water threshold -> palette buckets. The pipeline is
a blocking, side-effect free call; callers that need responsiveness run it on
their own worker thread and discard the result if they lose interest.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np
import structlog
from pydantic import BaseModel, ConfigDict, Field, InstanceOf, PositiveInt, ValidationError

from .errors import InvalidConfigError
from .faults import Fault, generate_faults
from .height_field import compute_heights, height_range
from .quantizer import quantize
from .water import find_threshold, water_fraction
from ..config.settings import Settings, settings as default_settings
from ..utils.random import random_seed, seed_from_name

logger = structlog.get_logger()


class MapConfig(BaseModel):
    """Everything needed to reproduce one generated map."""

    model_config = ConfigDict(frozen=True)

    size: Tuple[PositiveInt, PositiveInt] = Field(..., description="(width, height) in cells")
    percent_water: float = Field(..., ge=0.0, le=1.0, description="Share of cells below the water line")
    faults: Tuple[InstanceOf[Fault], ...] = Field(default=(), description="Faults to accumulate")
    seed: Optional[int] = Field(default=None, description="Integer seed the faults were drawn from")
    seed_name: str = Field(default="", description="Seed name the faults were drawn from")

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]


def _validated(**values: Any) -> MapConfig:
    try:
        return MapConfig(**values)
    except ValidationError as exc:
        raise InvalidConfigError(str(exc)) from exc


def create_map_config(
    width: Optional[int] = None,
    height: Optional[int] = None,
    percent_water: Optional[float] = None,
    fault_count: Optional[int] = None,
    seed: Optional[int] = None,
    seed_name: str = "",
    settings: Optional[Settings] = None,
) -> MapConfig:
    """
    Build a validated map configuration with freshly sampled faults.

    Omitted values come from settings. When seed_name is given it determines
    the integer seed; when neither is given a new seed is drawn and recorded.

    Raises:
        InvalidConfigError: If any value is out of range
    """
    settings = settings or default_settings

    width = settings.default_width if width is None else width
    height = settings.default_height if height is None else height
    percent_water = settings.default_percent_water if percent_water is None else percent_water
    fault_count = settings.default_fault_count if fault_count is None else fault_count

    if seed_name:
        seed = seed_from_name(seed_name)
    elif seed is None:
        seed = random_seed()

    # Validate the cheap fields before sampling thousands of faults
    _validated(size=(width, height), percent_water=percent_water, seed=seed, seed_name=seed_name)
    faults = generate_faults(fault_count, seed)

    return _validated(
        size=(width, height),
        percent_water=percent_water,
        faults=tuple(faults),
        seed=seed,
        seed_name=seed_name,
    )


@dataclass
class MapResult:
    """Output of one generation run."""

    config: MapConfig
    heights: np.ndarray
    threshold: int
    colors: np.ndarray

    def stats(self) -> Dict[str, Any]:
        """Summary numbers for logging and display."""
        min_height, max_height = height_range(self.heights)
        return {
            "width": self.config.width,
            "height": self.config.height,
            "faults": len(self.config.faults),
            "min_height": min_height,
            "max_height": max_height,
            "threshold": self.threshold,
            "percent_water": self.config.percent_water,
            "water_fraction": water_fraction(self.heights, self.threshold),
        }


def generate_map(
    config: MapConfig,
    water_buckets: Optional[int] = None,
    land_buckets: Optional[int] = None,
    max_workers: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> MapResult:
    """
    Run the full pipeline for one map.

    Args:
        config: Validated map configuration
        water_buckets: Palette buckets for water, defaults to settings
        land_buckets: Palette buckets for land, defaults to settings
        max_workers: Height-field worker threads, defaults to settings
        settings: Settings supplying the defaults, the module singleton if omitted

    Returns:
        MapResult with heights, threshold and bucket indices
    """
    settings = settings or default_settings

    water_buckets = settings.water_buckets if water_buckets is None else water_buckets
    land_buckets = settings.land_buckets if land_buckets is None else land_buckets
    max_workers = settings.workers if max_workers is None else max_workers
    if water_buckets <= 0 or land_buckets <= 0:
        raise InvalidConfigError(
            f"Bucket counts must be positive, got water={water_buckets} land={land_buckets}"
        )

    logger.info(
        "Generating map",
        width=config.width,
        height=config.height,
        faults=len(config.faults),
        percent_water=config.percent_water,
        seed=config.seed,
    )

    heights = compute_heights(
        config.size,
        config.faults,
        max_workers=max_workers,
        chunk_columns=settings.chunk_columns,
    )

    logger.info("Finding water threshold")
    threshold = find_threshold(heights, config.percent_water)

    logger.info("Quantizing heights", threshold=threshold)
    colors = quantize(heights, threshold, water_buckets, land_buckets)

    result = MapResult(config=config, heights=heights, threshold=threshold, colors=colors)
    logger.info("Map generation completed", **result.stats())
    return result
