#!/usr/bin/env python3
"""
Simple demo script showing fault-line map generation.
"""

import numpy as np
from fault_terrain.core import create_map_config, generate_map, quantize_relief
from fault_terrain.config import PALETTE, RELIEF_BUCKETS, apply_palette
from fault_terrain.utils import configure_logging


def main():
    """Demonstrate map generation."""
    configure_logging(level="WARNING", fmt="plain")

    print("Fault Terrain Demo")
    print("=" * 40)

    width, height = 300, 150
    for percent_water in (0.3, 0.6, 0.9):
        config = create_map_config(
            width=width,
            height=height,
            percent_water=percent_water,
            fault_count=200,
            seed_name="demo",
        )
        result = generate_map(config)
        stats = result.stats()

        print(f"\n{int(percent_water * 100)}% water:")
        print("-" * 30)
        print(f"  Height range: {stats['min_height']} to {stats['max_height']}")
        print(f"  Threshold: {stats['threshold']}")
        print(f"  Realised water: {stats['water_fraction'] * 100:.1f}%")

        buckets, counts = np.unique(result.colors, return_counts=True)
        print("  Bucket distribution:")
        for bucket, count in zip(buckets, counts):
            bar = '#' * int(count / counts.max() * 20)
            print(f"    {bucket:3d}: {bar} ({count})")

    relief = quantize_relief(result.heights, RELIEF_BUCKETS)
    rgb = apply_palette(relief, PALETTE)
    print(f"\nRelief image: {rgb.shape[1]}x{rgb.shape[0]} pixels, {len(np.unique(relief))} shades")


if __name__ == "__main__":
    main()
