"""
Fault-line terrain synthesis.

Sums many randomly oriented fault planes into an integer height field, picks
a water line for a target water share, and quantizes heights into palette
buckets.
"""

from .core import (
    Fault,
    InvalidConfigError,
    MapConfig,
    MapResult,
    compute_heights,
    create_map_config,
    find_threshold,
    generate_faults,
    generate_map,
    quantize,
)

__version__ = "0.1.0"

__all__ = ['Fault', 'InvalidConfigError', 'MapConfig', 'MapResult', 'compute_heights',
           'create_map_config', 'find_threshold', 'generate_faults', 'generate_map', 'quantize']
