"""
Analysis components of the Benford engine.

1. digits: leading digits, mantissas, theoretical distribution
2. empirical: first and second order empirical distributions
3. summation: value totals per digit group
4. mantissa: mantissa moments
5. conformity: Z, chi-squared, Mantissa Arc, KS, MAD, Distortion Factor
"""

from .digits import (
    extract_digits,
    extract_mantissa,
    shift_decimal,
    generate_benford_digits,
    generate_benford_distribution,
)
from .empirical import EmpiricalDistribution, generate_empirical_distribution, second_order_sample
from .summation import generate_summation, abs_excess_summation
from .mantissa import MantissaMoments, mantissa_moments
from .conformity import (
    HypothesisTest,
    z_statistic,
    chisq_test,
    mantissa_arc_test,
    ks_test,
    mean_absolute_deviation,
    mad_conformity,
    distortion_factor,
)

__all__ = [
    # Digits
    "extract_digits",
    "extract_mantissa",
    "shift_decimal",
    "generate_benford_digits",
    "generate_benford_distribution",
    # Empirical
    "EmpiricalDistribution",
    "generate_empirical_distribution",
    "second_order_sample",
    # Aggregates
    "generate_summation",
    "abs_excess_summation",
    "MantissaMoments",
    "mantissa_moments",
    # Conformity
    "HypothesisTest",
    "z_statistic",
    "chisq_test",
    "mantissa_arc_test",
    "ks_test",
    "mean_absolute_deviation",
    "mad_conformity",
    "distortion_factor",
]
