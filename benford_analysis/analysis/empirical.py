"""
Empirical digit distributions of a sample (first and second order).

Second-order analysis applies Benford's Law to the gaps between the sorted
values instead of the values themselves. For most data, including data that
does not follow Benford's Law in first order, the digits of those gaps do.
Rounding the gaps (discrete=True) keeps floating point noise between
near-equal neighbours from producing spurious leading digits.
"""

from dataclasses import dataclass

import numpy as np

from .digits import extract_digits


@dataclass(frozen=True, eq=False)
class EmpiricalDistribution:
    """Digits assigned to a sample and their distribution over the digit domain."""
    data: np.ndarray        # values the digits were taken from
    data_digits: np.ndarray # digit group of each value
    dist: np.ndarray        # proportion per digit group (NaN if data is empty)
    dist_freq: np.ndarray   # count per digit group

    @property
    def n(self) -> int:
        return len(self.data)


def second_order_sample(
    values: np.ndarray,
    discrete: bool = True,
    round: int = 3,
) -> np.ndarray:
    """
    Differences of the ascending-sorted values, zero gaps removed.

    Args:
        values: Filtered magnitudes
        discrete: Round the gaps before dropping zeros
        round: Decimals used when discrete is True

    Returns:
        Array of strictly positive differences (possibly empty)
    """
    values = np.asarray(values, dtype=float)
    if len(values) < 2:
        return np.array([], dtype=float)

    gaps = np.diff(np.sort(values))
    if discrete:
        gaps = np.round(gaps, round)
    return gaps[gaps > 0]


def generate_empirical_distribution(
    values: np.ndarray,
    number_of_digits: int,
    benford_digits: np.ndarray,
    second_order: bool = False,
    discrete: bool = True,
    round: int = 3,
) -> EmpiricalDistribution:
    """
    Build the empirical digit distribution of a filtered sample.

    Args:
        values: Filtered magnitudes (all > 0)
        number_of_digits: Width of the digit groups
        benford_digits: Ordered digit domain to count over
        second_order: Analyze the sorted differences instead of the values
        discrete: Round the second-order differences (ignored in first order)
        round: Decimals used for that rounding

    Returns:
        EmpiricalDistribution aligned with ``benford_digits``
    """
    data = np.asarray(values, dtype=float)
    if second_order:
        data = second_order_sample(data, discrete=discrete, round=round)

    data_digits = extract_digits(data, number_of_digits)

    # digit groups are contiguous, so counts index straight off the first group
    start = int(benford_digits[0])
    dist_freq = np.bincount(data_digits - start, minlength=len(benford_digits))
    dist_freq = dist_freq[:len(benford_digits)].astype(float)

    n = len(data)
    if n == 0:
        dist = np.full(len(benford_digits), np.nan)
    else:
        dist = dist_freq / n

    return EmpiricalDistribution(
        data=data,
        data_digits=data_digits,
        dist=dist,
        dist_freq=dist_freq,
    )
