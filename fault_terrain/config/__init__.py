"""
Configuration: environment driven settings and the palette table.
"""

from .settings import Settings, get_settings, settings
from .palette import PALETTE, PALETTE_SIZE, WATER_BUCKETS, LAND_BUCKETS, RELIEF_BUCKETS, apply_palette

__all__ = ['Settings', 'get_settings', 'settings', 'PALETTE', 'PALETTE_SIZE',
           'WATER_BUCKETS', 'LAND_BUCKETS', 'RELIEF_BUCKETS', 'apply_palette']
