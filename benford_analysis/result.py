"""
The immutable result of a Benford analysis.

BenfordResult is built once by BenfordAnalyzer and never changes. The digit
table is a tuple of DigitRow records, one per digit group, so all columns
stay aligned by construction. Reporting and plotting code reads it through
the pandas views (bfd_frame, data_frame, ...) and the ranking helpers
(suspects_table, duplicates_table).
"""

from dataclasses import dataclass, fields, asdict
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from .analysis.conformity import HypothesisTest
from .analysis.mantissa import MantissaMoments
from .data_loader import count_duplicates


@dataclass(frozen=True)
class BenfordInfo:
    """General information about the analyzed sample."""
    data_name: str
    n: int
    n_second_order: int
    number_of_digits: int


@dataclass(frozen=True)
class DigitRow:
    """All per-digit-group figures of one digit group."""
    digits: int
    data_dist: float
    data_second_order_dist: float
    benford_dist: float
    data_second_order_dist_freq: float
    data_dist_freq: float
    benford_dist_freq: float
    benford_so_dist_freq: float
    data_summation: float
    abs_excess_summation: float
    difference: float
    squared_diff: float
    absolute_diff: float
    z_statistic: float


@dataclass(frozen=True)
class SampleData:
    """Per-observation columns of the first-order sample."""
    lines_used: Tuple[int, ...]
    data_used: Tuple[float, ...]
    data_mantissa: Tuple[float, ...]
    data_digits: Tuple[int, ...]


@dataclass(frozen=True)
class SecondOrderData:
    """Second-order differences and their digit groups."""
    second_order: Tuple[float, ...]
    data_second_order_digits: Tuple[int, ...]


@dataclass(frozen=True)
class BenfordStats:
    """Hypothesis test outcomes."""
    chisq: HypothesisTest
    mantissa_arc_test: HypothesisTest
    ks_test: HypothesisTest

    def __iter__(self):
        return iter((self.chisq, self.mantissa_arc_test, self.ks_test))


DIGIT_ROW_COLUMNS = tuple(f.name for f in fields(DigitRow))


@dataclass(frozen=True)
class BenfordResult:
    """
    Complete Benford analysis of one sample.

    Usage:
        result = benford(amounts, number_of_digits=2)
        result.mad, result.mad_conformity
        result.suspects_table(how_many=10)
        result.summary()
    """
    info: BenfordInfo
    data: SampleData
    s_o_data: SecondOrderData
    bfd: Tuple[DigitRow, ...]
    mantissa: MantissaMoments
    mad: float
    mad_conformity: Optional[str]
    distortion_factor: float
    stats: BenfordStats

    # =========================================================================
    # Tables
    # =========================================================================

    def bfd_frame(self) -> pd.DataFrame:
        """Digit table as a DataFrame, one row per digit group."""
        return pd.DataFrame([asdict(row) for row in self.bfd], columns=DIGIT_ROW_COLUMNS)

    def data_frame(self) -> pd.DataFrame:
        """First-order sample: line, value, mantissa and digits of each observation."""
        return pd.DataFrame(asdict(self.data))

    def second_order_frame(self) -> pd.DataFrame:
        """Second-order differences and their digits."""
        return pd.DataFrame(asdict(self.s_o_data))

    def mantissa_frame(self) -> pd.DataFrame:
        """Mantissa moments in a statistic/value layout."""
        return pd.DataFrame({
            "statistic": [
                "Mean Mantissa",
                "Var Mantissa",
                "Ex. Kurtosis Mantissa",
                "Skewness Mantissa",
            ],
            "values": [self.mantissa.mean, self.mantissa.var, self.mantissa.ek, self.mantissa.sk],
        })

    def summary(self) -> pd.DataFrame:
        """One row per hypothesis test."""
        return pd.DataFrame([
            {
                "test": test.method,
                "statistic": test.statistic,
                "df": test.parameter,
                "p_value": test.p_value,
            }
            for test in self.stats
        ])

    # =========================================================================
    # Rankings
    # =========================================================================

    def suspects_table(self, by: str = "absolute_diff", how_many: Optional[int] = None) -> pd.DataFrame:
        """
        Digit groups ranked by a digit-table column, largest first.

        Args:
            by: Numeric DigitRow column, e.g. 'absolute_diff', 'squared_diff',
                'abs_excess_summation' or 'z_statistic'
            how_many: Keep only the top rows. None = all digit groups.

        Returns:
            DataFrame with columns: digits, <by>
        """
        if by not in DIGIT_ROW_COLUMNS or by == "digits":
            raise ValueError(f"Unknown column: {by}. Choose from: {list(DIGIT_ROW_COLUMNS[1:])}")
        _check_how_many(how_many)

        table = self.bfd_frame()[["digits", by]]
        table = table.sort_values(by, ascending=False, kind="mergesort").reset_index(drop=True)
        if how_many is not None:
            table = table.head(how_many)
        return table

    def duplicates_table(self, how_many: Optional[int] = None) -> pd.DataFrame:
        """
        Values of the analyzed sample with their repetition counts, most duplicated first.

        Returns:
            DataFrame with columns: number, duplicates
        """
        _check_how_many(how_many)
        table = count_duplicates(np.asarray(self.data.data_used, dtype=float))
        if how_many is not None:
            table = table.head(how_many)
        return table

    # =========================================================================
    # Shortcuts
    # =========================================================================

    def mad_value(self) -> float:
        return self.mad

    def chisq(self) -> HypothesisTest:
        return self.stats.chisq

    def marc(self) -> HypothesisTest:
        return self.stats.mantissa_arc_test

    def ks(self) -> HypothesisTest:
        return self.stats.ks_test

    def dfactor(self) -> float:
        return self.distortion_factor


def _check_how_many(how_many: Optional[int]) -> None:
    if how_many is None:
        return
    if not isinstance(how_many, int) or isinstance(how_many, bool) or how_many < 0:
        raise ValueError(f"how_many must be a non-negative integer, got {how_many!r}")
