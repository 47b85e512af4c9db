"""
Summation by digit group.

Under Benford's Law the sums of the values in each digit group are
roughly equal. A few groups holding a disproportionate share of the total,
regardless of how often they occur, point at large repeated amounts.
"""

import numpy as np


def generate_summation(
    benford_digits: np.ndarray,
    values: np.ndarray,
    data_digits: np.ndarray,
) -> np.ndarray:
    """
    Sum the values that fall in each digit group.

    Args:
        benford_digits: Ordered digit domain
        values: Filtered magnitudes
        data_digits: Digit group of each value

    Returns:
        Array aligned with ``benford_digits`` (0.0 for empty groups)
    """
    start = int(benford_digits[0])
    summation = np.bincount(
        np.asarray(data_digits, dtype=np.int64) - start,
        weights=np.asarray(values, dtype=float),
        minlength=len(benford_digits),
    )
    return summation[:len(benford_digits)]


def abs_excess_summation(summation: np.ndarray) -> np.ndarray:
    """Absolute distance of each group's sum from the mean group sum."""
    summation = np.asarray(summation, dtype=float)
    return np.abs(summation - summation.mean())
