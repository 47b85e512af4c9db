"""
Tests for digit extraction and the theoretical distribution.
"""

import math

import numpy as np
import pytest

from benford_analysis.analysis.digits import (
    extract_digits, extract_mantissa, shift_decimal,
    generate_benford_digits, generate_benford_distribution,
)


class TestExtractDigits:
    """Tests for leading digit extraction."""

    def test_first_digit(self):
        digits = extract_digits([123.45, 5678, 0.0042, 987654], 1)
        assert digits.tolist() == [1, 5, 4, 9]

    def test_first_two_digits(self):
        digits = extract_digits([123.45, 5678, 0.0042, 987654], 2)
        assert digits.tolist() == [12, 56, 42, 98]

    def test_first_three_digits(self):
        digits = extract_digits([1000, 12.345, 0.9999], 3)
        assert digits.tolist() == [100, 123, 999]

    def test_powers_of_ten(self):
        digits = extract_digits([1, 10, 100, 1e6, 0.1, 0.001], 1)
        assert digits.tolist() == [1, 1, 1, 1, 1, 1]

    def test_float_noise_does_not_drop_a_digit(self):
        """0.29 * 100 is 28.999999999999996 in floating point."""
        assert extract_digits([0.29], 2).tolist() == [29]
        assert extract_digits([0.3, 0.7], 1).tolist() == [3, 7]

    def test_value_just_below_power_of_ten(self):
        assert extract_digits([999.9999999999999], 1).tolist() == [9]

    def test_trailing_nines_are_not_rounded_up(self):
        assert extract_digits([1.99999999999], 1).tolist() == [1]
        assert extract_digits([19.9999999999], 2).tolist() == [19]
        assert extract_digits([0.0299999999999], 1).tolist() == [2]

    def test_subnormal_values(self):
        assert extract_digits([3.5e-310, 2.5e-318], 1).tolist() == [3, 2]
        assert extract_digits([3.5e-310], 2).tolist() == [35]

    def test_near_overflow_values(self):
        assert extract_digits([1.5e308, 4.2e300], 2).tolist() == [15, 42]

    def test_empty(self):
        digits = extract_digits([], 2)
        assert len(digits) == 0
        assert digits.dtype == np.int64

    @pytest.mark.parametrize("bad", [0, -5, float("nan"), float("inf")])
    def test_rejects_non_positive_and_non_finite(self, bad):
        with pytest.raises(ValueError):
            extract_digits([10, bad], 1)


class TestShiftDecimal:
    """Tests for moving the decimal point."""

    def test_small_powers(self):
        assert shift_decimal([1.5, 250.0], [2, -1]).tolist() == [150.0, 25.0]

    def test_large_powers_stay_finite(self):
        shifted = shift_decimal([1e-310, 1e308], [310, -307])
        assert np.all(np.isfinite(shifted))
        assert shifted == pytest.approx([1.0, 10.0])


class TestExtractMantissa:
    """Tests for the log10 mantissa."""

    def test_powers_of_ten_have_zero_mantissa(self):
        assert extract_mantissa([1, 10, 100, 1000]).tolist() == [0.0, 0.0, 0.0, 0.0]

    def test_mantissa_value(self):
        mantissa = extract_mantissa([2, 20, 0.2])
        assert mantissa == pytest.approx([math.log10(2)] * 3)

    def test_range(self):
        rng = np.random.default_rng(0)
        mantissa = extract_mantissa(rng.lognormal(5, 3, 1000))
        assert np.all(mantissa >= 0)
        assert np.all(mantissa < 1)


class TestBenfordDistribution:
    """Tests for the digit domain and theoretical probabilities."""

    def test_first_digit_domain(self):
        assert generate_benford_digits(1).tolist() == list(range(1, 10))

    def test_two_digit_domain(self):
        digits = generate_benford_digits(2)
        assert digits[0] == 10
        assert digits[-1] == 99
        assert len(digits) == 90

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            generate_benford_digits(0)

    @pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
    def test_sums_to_one(self, k):
        dist = generate_benford_distribution(generate_benford_digits(k))
        assert abs(dist.sum() - 1.0) < 1e-9

    def test_first_digit_probabilities(self):
        dist = generate_benford_distribution(generate_benford_digits(1))
        assert dist[0] == pytest.approx(math.log10(2))
        assert dist[8] == pytest.approx(math.log10(10 / 9))
        assert np.all(np.diff(dist) < 0)  # 1 more common than 9
