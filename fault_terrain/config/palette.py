"""
Palette table shared by every consumer of bucket indices.

Layout of the 49 entries:
    0..15   water, dark to light
    16..31  land, lowland green through brown
    32..48  grey ramp reserved for secondary effects (snow, haze)
"""

import numpy as np

WATER_BUCKETS = 16
LAND_BUCKETS = 15
RELIEF_BUCKETS = 47

_RED = [
    0, 0, 0, 0, 0, 0, 0, 0, 34, 68, 102, 119, 136, 153, 170, 187,
    0, 34, 34, 119, 187, 255, 238, 221, 204, 187, 170, 153, 136, 119, 85, 68,
    255, 250, 245, 240, 235, 230, 225, 220, 215, 210, 205, 200, 195, 190, 185, 180, 175,
]
_GREEN = [
    0, 0, 17, 51, 85, 119, 153, 204, 221, 238, 255, 255, 255, 255, 255, 255,
    68, 102, 136, 170, 221, 187, 170, 136, 136, 102, 85, 85, 68, 51, 51, 34,
    255, 250, 245, 240, 235, 230, 225, 220, 215, 210, 205, 200, 195, 190, 185, 180, 175,
]
_BLUE = [
    0, 68, 102, 136, 170, 187, 221, 255, 255, 255, 255, 255, 255, 255, 255, 255,
    0, 0, 0, 0, 0, 34, 34, 34, 34, 34, 34, 34, 34, 34, 17, 0,
    255, 250, 245, 240, 235, 230, 225, 220, 215, 210, 205, 200, 195, 190, 185, 180, 175,
]

PALETTE = np.array([_RED, _GREEN, _BLUE], dtype=np.uint8).T
PALETTE.setflags(write=False)

PALETTE_SIZE = len(PALETTE)


def apply_palette(colors: np.ndarray, palette: np.ndarray = PALETTE) -> np.ndarray:
    """
    Look up RGB triples for a grid of bucket indices.

    Args:
        colors: Integer bucket indices, shape (H, W)
        palette: Table of shape (N, 3)

    Returns:
        uint8 array of shape (H, W, 3)
    """
    colors = np.asarray(colors)
    if colors.size and (colors.min() < 0 or colors.max() >= len(palette)):
        raise ValueError(
            f"Bucket indices must lie in [0, {len(palette)}), "
            f"got [{colors.min()}, {colors.max()}]"
        )
    return palette[colors]
