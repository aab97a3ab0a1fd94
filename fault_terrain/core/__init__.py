"""
Core terrain generation: faults, height field, water level, quantization.
"""

from .errors import FaultTerrainError, InvalidConfigError
from .faults import Fault, generate_faults
from .height_field import compute_heights, crest_rows, height_range
from .water import find_threshold, water_fraction, water_target
from .quantizer import quantize, quantize_relief
from .map_generator import MapConfig, MapResult, create_map_config, generate_map

__all__ = ['FaultTerrainError', 'InvalidConfigError', 'Fault', 'generate_faults',
           'compute_heights', 'crest_rows', 'height_range',
           'find_threshold', 'water_fraction', 'water_target',
           'quantize', 'quantize_relief',
           'MapConfig', 'MapResult', 'create_map_config', 'generate_map']
