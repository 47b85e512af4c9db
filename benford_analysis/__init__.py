"""
Benford's Law analysis for data validation and forensic analytics.

The main entry point is benford() (or BenfordAnalyzer for repeated runs
with one configuration). It returns an immutable BenfordResult with
first and second order digit distributions, summation, mantissa
statistics, MAD with Nigrini's conformity level, the Distortion Factor and
the chi-squared, Mantissa Arc and Kolmogorov-Smirnov tests.

After the analysis, suspects_table() ranks the digit groups that deviate
most and duplicates_table() lists the most repeated values.
"""

from .benford import BenfordAnalyzer, benford
from .config import BenfordConfig, SignFilter, ConformityLevel
from .exceptions import (
    BenfordError,
    ConfigurationError,
    InsufficientDataError,
    DegenerateDistributionError,
)
from .result import BenfordResult, BenfordInfo, BenfordStats, DigitRow

__all__ = [
    # Analysis
    "benford",
    "BenfordAnalyzer",
    "BenfordConfig",
    "SignFilter",
    "ConformityLevel",
    # Result
    "BenfordResult",
    "BenfordInfo",
    "BenfordStats",
    "DigitRow",
    # Errors
    "BenfordError",
    "ConfigurationError",
    "InsufficientDataError",
    "DegenerateDistributionError",
]
