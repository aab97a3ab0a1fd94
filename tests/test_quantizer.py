"""Tests for height to bucket quantization."""

import numpy as np
import pytest

from fault_terrain.core.errors import InvalidConfigError
from fault_terrain.core.faults import generate_faults
from fault_terrain.core.height_field import compute_heights
from fault_terrain.core.quantizer import bucket_dtype, quantize, quantize_relief
from fault_terrain.core.water import find_threshold


class TestQuantize:
    """Test the water/land split quantizer."""

    @pytest.fixture
    def heights(self):
        return compute_heights((48, 32), generate_faults(120, rng="quantize"))

    def test_known_values(self):
        heights = np.array([[-2, -1, 0, 1, 2]])

        colors = quantize(heights, threshold=0, water_buckets=4, land_buckets=4)

        np.testing.assert_array_equal(colors, [[0, 2, 4, 6, 7]])

    @pytest.mark.parametrize("percent_water", [0.0, 0.3, 0.6, 1.0])
    def test_buckets_in_range(self, heights, percent_water):
        threshold = find_threshold(heights, percent_water)

        colors = quantize(heights, threshold, 16, 15)

        assert colors.min() >= 0
        assert colors.max() < 31

    def test_water_and_land_sides_separate(self, heights):
        threshold = find_threshold(heights, 0.6)

        colors = quantize(heights, threshold, 16, 15)

        assert np.all(colors[heights < threshold] < 16)
        assert np.all(colors[heights >= threshold] >= 16)

    def test_extremes_hit_end_buckets(self, heights):
        threshold = find_threshold(heights, 0.5)

        colors = quantize(heights, threshold, 16, 15)

        assert np.all(colors[heights == heights.min()] == 0)
        assert np.all(colors[heights == heights.max()] == 30)

    def test_monotonic_in_height(self, heights):
        threshold = find_threshold(heights, 0.4)
        colors = quantize(heights, threshold, 16, 15)

        order = np.argsort(heights, axis=None, kind="stable")
        assert np.all(np.diff(colors.ravel()[order].astype(int)) >= 0)

    def test_flat_field_single_bucket(self):
        heights = np.zeros((4, 4), dtype=np.int16)

        colors = quantize(heights, threshold=1, water_buckets=16, land_buckets=15)

        assert np.all(colors == 0)

    def test_flat_field_all_land(self):
        heights = np.zeros((4, 4), dtype=np.int16)

        colors = quantize(heights, threshold=0, water_buckets=16, land_buckets=15)

        assert np.all(colors == 16)

    def test_no_land(self, heights):
        threshold = int(heights.max()) + 1

        colors = quantize(heights, threshold, 16, 15)

        assert colors.max() < 16

    def test_dtype(self, heights):
        assert quantize(heights, 0, 16, 15).dtype == np.uint8
        assert quantize(heights, 0, 200, 200).dtype == np.uint16

    @pytest.mark.parametrize("water,land", [(0, 15), (16, 0), (-1, 4)])
    def test_invalid_bucket_counts(self, heights, water, land):
        with pytest.raises(InvalidConfigError):
            quantize(heights, 0, water, land)


class TestQuantizeRelief:
    """Test the single-ramp quantizer."""

    def test_known_values(self):
        heights = np.array([[0, 5, 10]])
        np.testing.assert_array_equal(quantize_relief(heights, 47), [[0, 23, 46]])

    def test_negative_range(self):
        heights = np.array([[-4, 0, 4]])
        np.testing.assert_array_equal(quantize_relief(heights, 4), [[0, 2, 3]])

    def test_highest_cell_takes_last_bucket(self):
        heights = np.arange(48).reshape(6, 8)

        colors = quantize_relief(heights, 47)

        assert colors.max() == 46
        assert colors[heights == heights.max()].tolist() == [46]
        assert colors[heights == 46].tolist() == [46]
        assert colors[heights == 1].tolist() == [1]

    def test_flat_field(self):
        assert np.all(quantize_relief(np.full((3, 3), 5), 47) == 0)

    def test_invalid_buckets(self):
        with pytest.raises(InvalidConfigError):
            quantize_relief(np.zeros((2, 2)), 0)


def test_bucket_dtype():
    assert bucket_dtype(1) == np.uint8
    assert bucket_dtype(256) == np.uint8
    assert bucket_dtype(257) == np.uint16
