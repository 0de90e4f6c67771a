"""
Unit Tests for the Package Classifier

Tests the sorting rule, threshold boundaries, float edge cases and the
input guard.

Run with: pytest sorter/tests/test_classify.py -v
"""

import itertools
import math

import pytest

from sorter import (
    Category,
    Centimeters,
    InvalidInput,
    Kilograms,
    Package,
    classify,
    classify_checked,
    classify_package,
    decide,
)
from sorter.flags import BULKY, HEAVY


NAN = float("nan")
INF = float("inf")


# =============================================================================
# SCENARIOS
# =============================================================================

class TestScenarios:
    """Tests for the reference packages."""

    @pytest.mark.parametrize("width, height, length, mass, expected", [
        (50, 50, 50, 10, Category.STANDARD),
        (100, 100, 100, 10, Category.SPECIAL),     # bulky by volume
        (160, 50, 50, 10, Category.SPECIAL),       # bulky by dimension
        (50, 50, 50, 25, Category.SPECIAL),        # heavy
        (160, 50, 50, 25, Category.REJECTED),      # bulky and heavy
        (149, 149, 1, 19.9, Category.STANDARD),    # just under every threshold
        (100, 100, 100, 5, Category.SPECIAL),      # volume exactly at threshold
    ])
    def test_reference_packages(self, width, height, length, mass, expected):
        assert classify(width, height, length, mass) == expected

    def test_display_strings(self):
        """Categories serialize to their upper-case names."""
        assert classify(50, 50, 50, 10).value == "STANDARD"
        assert str(classify(50, 50, 50, 25)) == "SPECIAL"
        assert f"{classify(160, 50, 50, 25)}" == "REJECTED"

    def test_deterministic(self):
        """Same inputs, same category."""
        results = {classify(120.5, 90.0, 92.3, 19.99) for _ in range(100)}
        assert len(results) == 1


# =============================================================================
# DECISION TABLE
# =============================================================================

class TestDecisionTable:
    """Tests for mapping (bulky, heavy) to a category."""

    def test_both(self):
        assert decide(True, True) == Category.REJECTED

    def test_bulky_only(self):
        assert decide(True, False) == Category.SPECIAL

    def test_heavy_only(self):
        assert decide(False, True) == Category.SPECIAL

    def test_neither(self):
        assert decide(False, False) == Category.STANDARD

    def test_only_three_categories(self):
        produced = {decide(b, h) for b, h in itertools.product([True, False], repeat=2)}
        assert produced == set(Category)


# =============================================================================
# BOUNDARY TESTS
# =============================================================================

class TestBoundaries:
    """Thresholds are inclusive."""

    @pytest.mark.parametrize("width, height, length", [
        (150.0, 1.0, 1.0),
        (1.0, 150.0, 1.0),
        (1.0, 1.0, 150.0),
    ])
    def test_side_at_150_is_bulky(self, width, height, length):
        assert classify(width, height, length, 0) == Category.SPECIAL

    def test_side_just_under_150(self):
        assert classify(149.999, 1.0, 1.0, 0) == Category.STANDARD

    def test_volume_just_under_threshold(self):
        # 99.99 * 100 * 100 = 999,900
        assert classify(99.99, 100, 100, 0) == Category.STANDARD

    def test_mass_at_20_is_heavy(self):
        assert classify(1, 1, 1, 20.0) == Category.SPECIAL

    def test_mass_just_under_20(self):
        assert classify(1, 1, 1, 19.999999) == Category.STANDARD

    def test_everything_at_threshold_rejected(self):
        assert classify(150, 150, 150, 20) == Category.REJECTED


# =============================================================================
# FLOAT EDGE CASES
# =============================================================================

class TestFloatEdgeCases:
    """Negative, zero, NaN and infinite inputs follow plain float comparisons."""

    def test_zero_package(self):
        assert classify(0, 0, 0, 0) == Category.STANDARD

    def test_negative_dimensions_accepted(self):
        # (-200) * (-200) * 50 = 2,000,000 -> bulky by volume
        assert classify(-200, -200, 50, 0) == Category.SPECIAL

    def test_negative_mass_not_heavy(self):
        assert classify(10, 10, 10, -25) == Category.STANDARD

    def test_nan_mass_not_heavy(self):
        assert classify(10, 10, 10, NAN) == Category.STANDARD

    def test_nan_dimension_not_bulky(self):
        assert classify(NAN, 10, 10, 0) == Category.STANDARD

    def test_nan_dimension_other_side_bulky(self):
        """Another side can still trigger bulky when one side is NaN."""
        assert classify(NAN, 160, 10, 0) == Category.SPECIAL

    def test_infinite_side_bulky(self):
        assert classify(INF, 10, 10, 0) == Category.SPECIAL

    def test_infinite_mass_heavy(self):
        assert classify(10, 10, 10, INF) == Category.SPECIAL

    def test_infinity_times_zero_volume_is_nan(self):
        """A volume of inf * 0 is NaN and never meets the volume threshold."""
        package = Package(Centimeters(-INF), Centimeters(0.0), Centimeters(1.0), Kilograms(0.0))
        assert math.isnan(package.volume)
        assert classify_package(package) == Category.STANDARD

    def test_ints_accepted(self):
        assert classify(100, 100, 100, 20) == Category.REJECTED


# =============================================================================
# MONOTONICITY
# =============================================================================

VALUES = [0.0, 1.0, 19.9, 20.0, 99.0, 100.0, 149.0, 150.0, 500.0]


class TestMonotonicity:
    """Growing any one input never makes a package less restrictive."""

    @pytest.mark.parametrize("position", [0, 1, 2, 3])
    def test_growing_one_input(self, position):
        for base in itertools.product([1.0, 100.0, 149.0], repeat=3):
            for mass in [5.0, 20.0]:
                inputs = list(base) + [mass]
                ranks = []
                for value in VALUES:
                    inputs[position] = value
                    ranks.append(classify(*inputs).rank)
                assert ranks == sorted(ranks), inputs


# =============================================================================
# MODELS
# =============================================================================

class TestModels:
    """Tests for Package and Category."""

    def test_package_is_immutable(self):
        package = Package(Centimeters(1.0), Centimeters(2.0), Centimeters(3.0), Kilograms(4.0))
        with pytest.raises(AttributeError):
            package.mass = Kilograms(30.0)

    def test_package_volume(self):
        package = Package(Centimeters(10.0), Centimeters(20.0), Centimeters(30.0), Kilograms(1.0))
        assert package.volume == pytest.approx(6000.0)

    def test_classify_package_matches_classify(self):
        package = Package(Centimeters(160.0), Centimeters(50.0), Centimeters(50.0), Kilograms(25.0))
        assert classify_package(package) == classify(160, 50, 50, 25)

    def test_rank_order(self):
        assert Category.STANDARD.rank < Category.SPECIAL.rank < Category.REJECTED.rank

    def test_flags_on_package(self):
        package = Package(Centimeters(100.0), Centimeters(100.0), Centimeters(100.0), Kilograms(5.0))
        assert BULKY.applies(package) is True
        assert HEAVY.applies(package) is False


# =============================================================================
# INPUT GUARD
# =============================================================================

class TestInputGuard:
    """Tests for classify_checked."""

    def test_valid_input_same_as_core(self):
        assert classify_checked(160, 50, 50, 25) == Category.REJECTED

    def test_zero_allowed(self):
        assert classify_checked(0, 0, 0, 0) == Category.STANDARD

    def test_negative_rejected(self):
        with pytest.raises(InvalidInput, match="width must not be negative") as exc_info:
            classify_checked(-1, 10, 10, 10)
        assert exc_info.value.field == "width"
        assert exc_info.value.value == -1

    def test_nan_rejected(self):
        with pytest.raises(InvalidInput, match="mass must be a number"):
            classify_checked(10, 10, 10, NAN)

    def test_infinite_rejected(self):
        with pytest.raises(InvalidInput, match="length must be finite"):
            classify_checked(10, 10, INF, 10)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            classify_checked(10, -10, 10, 10)
