"""
Leading digits, mantissas and the theoretical Benford distribution.

Mathematical Basis:
- The first k significant digits of v > 0 are
  floor(v / 10^(floor(log10 v) - k + 1))
- The mantissa of v is log10 v - floor(log10 v), uniform on [0, 1) under
  Benford's Law
- A k-digit group d occurs with probability P(d) = log10(1 + 1/d); for k = 1
  this is the classical first-digit law (1 = 30.1%, 2 = 17.6%, ...)
"""

import numpy as np

from ..config import DIGIT_RELATIVE_TOLERANCE


def _as_positive_array(values) -> np.ndarray:
    values = np.asarray(values, dtype=float)
    if values.size and not (np.all(np.isfinite(values)) and np.all(values > 0)):
        raise ValueError("Digits and mantissas are defined only for finite values > 0")
    return values


def extract_digits(values, number_of_digits: int = 1) -> np.ndarray:
    """
    Extract the first ``number_of_digits`` significant digits of each value.

    Args:
        values: Array of finite values > 0 (take magnitudes upstream)
        number_of_digits: Width k of the digit group

    Returns:
        Integer array of digit groups, each in [10^(k-1), 10^k - 1]

    Examples:
        >>> extract_digits([123.45, 0.0042, 987654], 1)
        array([1, 4, 9])
        >>> extract_digits([123.45, 0.0042, 987654], 2)
        array([12, 42, 98])
    """
    values = _as_positive_array(values)
    if values.size == 0:
        return np.array([], dtype=np.int64)

    k = number_of_digits
    exponent = np.floor(np.log10(values))
    scaled = shift_decimal(values, k - 1 - exponent)

    # log10 can land on the wrong side of a power of ten
    low = 10.0 ** (k - 1)
    high = 10.0 ** k
    too_low = scaled < low
    too_high = scaled >= high
    if too_low.any():
        scaled[too_low] = shift_decimal(values[too_low], k - exponent[too_low])
    if too_high.any():
        scaled[too_high] = shift_decimal(values[too_high], k - 2 - exponent[too_high])

    digits = np.floor(scaled * (1 + DIGIT_RELATIVE_TOLERANCE))
    # the tolerance may push 99.99999999999999 up to the next group's 100
    digits = np.where(digits >= high, high - 1, digits)
    return digits.astype(np.int64)


def shift_decimal(values: np.ndarray, powers) -> np.ndarray:
    """
    Compute values * 10^powers for integer powers.

    Powers up to 300 in magnitude use a single power of ten. Beyond that
    (subnormal or near-overflow values) the shift is done in two steps so
    that no factor overflows to inf.
    """
    values = np.asarray(values, dtype=float)
    powers = np.asarray(powers, dtype=float)
    first = np.clip(powers, -300, 300)
    for part in (first, powers - first):
        factor = 10.0 ** np.abs(part)
        values = np.where(part >= 0, values * factor, values / factor)
    return values


def extract_mantissa(values) -> np.ndarray:
    """
    Fractional part of log10 of each value.

    Examples:
        >>> extract_mantissa([10, 100, 1000])
        array([0., 0., 0.])
    """
    values = _as_positive_array(values)
    logs = np.log10(values)
    return logs - np.floor(logs)


def generate_benford_digits(number_of_digits: int = 1) -> np.ndarray:
    """
    Ordered digit-group domain for a digit width.

    Returns:
        [1..9] for k = 1, [10^(k-1) .. 10^k - 1] otherwise
    """
    if number_of_digits < 1:
        raise ValueError(f"number_of_digits must be >= 1, got {number_of_digits}")
    start = 1 if number_of_digits == 1 else 10 ** (number_of_digits - 1)
    return np.arange(start, 10 ** number_of_digits, dtype=np.int64)


def generate_benford_distribution(benford_digits) -> np.ndarray:
    """Theoretical Benford probability of each digit group: log10(1 + 1/d)."""
    digits = np.asarray(benford_digits, dtype=float)
    return np.log10(1 + 1 / digits)
