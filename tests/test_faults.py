"""Tests for fault sampling."""

import dataclasses
import math

import numpy as np
import pytest

from fault_terrain.core.errors import InvalidConfigError
from fault_terrain.core.faults import Fault, generate_faults
from fault_terrain.utils.random import make_rng, seed_from_name


class TestFault:
    """Test the fault value object."""

    def test_derived_terms(self):
        """tan_b and xsi follow from alpha and beta."""
        fault = Fault(flag=True, alpha=0.3, beta=-0.2, shift=0.1)

        expected_tan_b = math.tan(math.acos(math.cos(0.3) * math.cos(-0.2)))
        assert fault.tan_b == pytest.approx(expected_tan_b)
        assert fault.xsi == pytest.approx(0.5 + 0.2 / math.pi)

    def test_flat_fault(self):
        """A fault with zero angles has a flat crest."""
        fault = Fault(flag=False, alpha=0.0, beta=0.0, shift=0.0)

        assert fault.tan_b == 0.0
        assert fault.xsi == 0.5

    def test_fault_is_immutable(self):
        fault = Fault(flag=True, alpha=0.1, beta=0.1, shift=0.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            fault.alpha = 0.5

    def test_derived_terms_not_settable(self):
        with pytest.raises(TypeError):
            Fault(flag=True, alpha=0.1, beta=0.1, shift=0.0, tan_b=1.0)

    def test_equality(self):
        assert Fault(True, 0.1, 0.2, 0.3) == Fault(True, 0.1, 0.2, 0.3)
        assert Fault(True, 0.1, 0.2, 0.3) != Fault(False, 0.1, 0.2, 0.3)


class TestGenerateFaults:
    """Test batch fault generation."""

    def test_count(self):
        assert len(generate_faults(25, rng=1)) == 25

    def test_zero_faults(self):
        assert generate_faults(0, rng=1) == []

    def test_negative_count_rejected(self):
        with pytest.raises(InvalidConfigError):
            generate_faults(-1, rng=1)

    def test_sample_ranges(self):
        """Angles lie in (-pi/2, pi/2) and shifts in [-0.5, 0.5)."""
        faults = generate_faults(500, rng=7)

        for fault in faults:
            assert -math.pi / 2 <= fault.alpha < math.pi / 2
            assert -math.pi / 2 <= fault.beta < math.pi / 2
            assert -0.5 <= fault.shift < 0.5
            assert fault.tan_b >= 0.0
            assert 0.0 <= fault.xsi <= 1.0

    def test_both_orientations_sampled(self):
        flags = {fault.flag for fault in generate_faults(200, rng=3)}
        assert flags == {True, False}

    def test_same_seed_same_faults(self):
        assert generate_faults(50, rng=42) == generate_faults(50, rng=42)

    def test_different_seed_different_faults(self):
        assert generate_faults(50, rng=42) != generate_faults(50, rng=43)

    def test_seed_name(self):
        """Seed names are equivalent to their hashed integer seed."""
        by_name = generate_faults(20, rng="Pangaea")
        by_int = generate_faults(20, rng=seed_from_name("Pangaea"))

        assert by_name == by_int
        assert by_name != generate_faults(20, rng="Laurasia")

    def test_generator_is_consumed(self):
        """Consecutive batches from one generator are independent."""
        rng = np.random.default_rng(9)

        first = generate_faults(10, rng)
        second = generate_faults(10, rng)

        assert first != second


class TestMakeRng:
    """Test random source construction."""

    def test_generator_passthrough(self):
        rng = np.random.default_rng(0)
        assert make_rng(rng) is rng

    def test_int_seed_reproducible(self):
        assert make_rng(5).random() == make_rng(5).random()

    def test_string_seed_reproducible(self):
        assert make_rng("seed").random() == make_rng("seed").random()

    def test_seed_from_name_is_stable(self):
        assert seed_from_name("abc") == seed_from_name("abc")
        assert seed_from_name("abc") != seed_from_name("abd")
        assert 0 <= seed_from_name("abc") < 2**64
