"""
Conformity tests against Benford's Law.

Tests implemented (Nigrini, 2012):
1. Z-statistic per digit group - is one group individually out of line?
2. Chi-squared - joint goodness of fit over all digit groups
3. Mantissa Arc Test - uniformity of the mantissas on the unit circle
4. Kolmogorov-Smirnov - largest gap between empirical and Benford CDFs
5. MAD (Mean Absolute Deviation) - sample-size free conformity score
6. Distortion Factor - are values inflated or deflated overall?

Chi-squared and KS reject almost everything on large samples; real data
never conforms perfectly. MAD is the better guide there.
"""

from dataclasses import dataclass, asdict
from typing import Optional

import numpy as np
from scipy import stats

from ..config import Thresholds, ConformityLevel
from ..exceptions import DegenerateDistributionError
from .digits import shift_decimal


@dataclass(frozen=True)
class HypothesisTest:
    """Outcome of a hypothesis test."""
    name: str
    method: str
    data_name: str
    statistic: float
    parameter: Optional[float]   # degrees of freedom, where the test has them
    p_value: float
    l2: Optional[float] = None   # squared resultant length (Mantissa Arc Test only)

    def to_dict(self) -> dict:
        return asdict(self)


def _check_probabilities(benford_dist: np.ndarray) -> None:
    if np.any(np.asarray(benford_dist) <= 0):
        raise DegenerateDistributionError(
            "Theoretical distribution has a zero probability; cannot divide by it"
        )


# =============================================================================
# Per-digit statistics
# =============================================================================

def z_statistic(benford_dist: np.ndarray, empirical_dist: np.ndarray, n: int) -> np.ndarray:
    """
    Z-statistic of each digit group, with continuity correction 1/(2n).

    z = (|p_emp - p| - 1/(2n)) / sqrt(p (1 - p) / n)
    """
    _check_probabilities(benford_dist)
    p = np.asarray(benford_dist, dtype=float)
    deviation = np.abs(np.asarray(empirical_dist, dtype=float) - p)
    return (deviation - 1 / (2 * n)) / np.sqrt(p * (1 - p) / n)


# =============================================================================
# Hypothesis tests
# =============================================================================

def chisq_test(
    empirical_freq: np.ndarray,
    benford_freq: np.ndarray,
    data_name: str = "data",
) -> HypothesisTest:
    """
    Pearson's chi-squared goodness of fit on digit-group counts.

    Degrees of freedom = number of digit groups - 1.
    """
    _check_probabilities(benford_freq)
    observed = np.asarray(empirical_freq, dtype=float)
    expected = np.asarray(benford_freq, dtype=float)

    statistic = float(np.sum((observed - expected) ** 2 / expected))
    df = len(expected) - 1

    return HypothesisTest(
        name="chisq",
        method="Pearson's Chi-squared test",
        data_name=data_name,
        statistic=statistic,
        parameter=df,
        p_value=float(stats.chi2.sf(statistic, df)),
    )


def mantissa_arc_test(mantissa: np.ndarray, data_name: str = "data") -> HypothesisTest:
    """
    Mantissa Arc Test.

    Each mantissa m is mapped to the point (cos 2*pi*m, sin 2*pi*m). For
    uniform mantissas the centre of mass L of those points sits at the
    origin, and 2 n L^2 is asymptotically chi-squared with 2 degrees of
    freedom.
    """
    mantissa = np.asarray(mantissa, dtype=float)
    n = len(mantissa)
    angles = 2 * np.pi * mantissa
    l2 = float(np.mean(np.cos(angles)) ** 2 + np.mean(np.sin(angles)) ** 2)
    statistic = 2 * n * l2

    return HypothesisTest(
        name="mantissa.arc.test",
        method="Mantissa Arc Test",
        data_name=data_name,
        statistic=statistic,
        parameter=2,
        p_value=float(stats.chi2.sf(statistic, 2)),
        l2=l2,
    )


def ks_test(
    benford_dist: np.ndarray,
    empirical_dist: np.ndarray,
    n: int,
    data_name: str = "data",
) -> HypothesisTest:
    """
    Kolmogorov-Smirnov test of the empirical digit CDF against Benford's.

    D is the largest absolute gap between the two cumulative distributions
    over the ordered digit domain. The p-value is the asymptotic one,
    P(K > sqrt(n) D) for the Kolmogorov distribution K.
    """
    gaps = np.cumsum(np.asarray(empirical_dist, dtype=float)) - np.cumsum(benford_dist)
    statistic = float(np.max(np.abs(gaps)))

    return HypothesisTest(
        name="ks.test",
        method="Kolmogorov-Smirnov test",
        data_name=data_name,
        statistic=statistic,
        parameter=None,
        p_value=float(stats.kstwobign.sf(np.sqrt(n) * statistic)),
    )


# =============================================================================
# Scalar scores
# =============================================================================

def mean_absolute_deviation(benford_dist: np.ndarray, empirical_dist: np.ndarray) -> float:
    """Mean of |p_emp - p| over all digit groups."""
    return float(np.mean(np.abs(np.asarray(empirical_dist) - np.asarray(benford_dist))))


def mad_conformity(mad: float, number_of_digits: int) -> Optional[str]:
    """
    Classify a MAD value using Nigrini's (2012) cut-offs.

    Returns:
        One of the ConformityLevel labels, or None when no table exists
        for this digit width (more than 3 digits).
    """
    bounds = Thresholds.MAD.get(number_of_digits)
    if bounds is None:
        return None

    close, acceptable, marginal = bounds
    if mad <= close:
        return ConformityLevel.CLOSE
    if mad <= acceptable:
        return ConformityLevel.ACCEPTABLE
    if mad <= marginal:
        return ConformityLevel.MARGINAL
    return ConformityLevel.NONCONFORMITY


def distortion_factor(values: np.ndarray) -> float:
    """
    Nigrini's Distortion Factor, in percent.

    Every value is collapsed to [10, 100) by moving its decimal point.
    The mean of the collapsed values is compared with the mean expected
    from Benford-conforming data of the same size,
    EM = 90 / (n (10^(1/n) - 1)).

    Positive values mean the data sits high in its digit ranges (inflated),
    negative values mean it sits low (deflated).
    """
    values = np.asarray(values, dtype=float)
    n = len(values)
    collapsed = shift_decimal(values, 1 - np.floor(np.log10(values)))
    actual_mean = float(np.mean(collapsed))
    expected_mean = 90 / (n * (10 ** (1 / n) - 1))
    return (actual_mean - expected_mean) / expected_mean * 100
