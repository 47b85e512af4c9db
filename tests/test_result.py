"""
Tests for BenfordResult tables and rankings.
"""

import pandas as pd
import pytest

from benford_analysis import benford
from benford_analysis.result import DIGIT_ROW_COLUMNS


@pytest.fixture
def result(invoice_amounts):
    return benford(invoice_amounts, number_of_digits=1)


class TestSuspectsTable:
    """Tests for ranking digit groups by deviation."""

    def test_ranked_by_absolute_diff(self, result):
        table = result.suspects_table()
        assert list(table.columns) == ["digits", "absolute_diff"]
        assert len(table) == 9
        assert table["absolute_diff"].is_monotonic_decreasing
        assert table["digits"].tolist()[:3] == [1, 3, 4]

    def test_how_many(self, result):
        table = result.suspects_table(how_many=2)
        assert table["digits"].tolist() == [1, 3]

    def test_other_column(self, result):
        table = result.suspects_table(by="abs_excess_summation", how_many=1)
        # 999 alone outweighs the seven values starting with 1 (906)
        assert table["digits"].tolist() == [9]

    @pytest.mark.parametrize("by", ["digits", "nope"])
    def test_unknown_column(self, result, by):
        with pytest.raises(ValueError):
            result.suspects_table(by=by)

    @pytest.mark.parametrize("how_many", [-1, 1.5, True])
    def test_bad_how_many(self, result, how_many):
        with pytest.raises(ValueError):
            result.suspects_table(how_many=how_many)


class TestDuplicatesTable:
    """Tests for value repetition counts."""

    def test_counts(self):
        result = benford([5, 5, 5, 3, 3, 1, -5], number_of_digits=1)
        table = result.duplicates_table()
        assert list(table.columns) == ["number", "duplicates"]
        assert table["number"].tolist() == [5.0, 3.0, 1.0]
        assert table["duplicates"].tolist() == [3, 2, 1]

    def test_how_many(self):
        result = benford([5, 5, 5, 3, 3, 1], number_of_digits=1)
        assert len(result.duplicates_table(how_many=1)) == 1


class TestFrames:
    """Tests for the pandas views used by reporting and plotting."""

    def test_bfd_frame(self, result):
        frame = result.bfd_frame()
        assert isinstance(frame, pd.DataFrame)
        assert frame.shape == (9, len(DIGIT_ROW_COLUMNS))
        assert frame["digits"].tolist() == list(range(1, 10))

    def test_data_frame(self, result):
        frame = result.data_frame()
        assert list(frame.columns) == ["lines_used", "data_used", "data_mantissa", "data_digits"]
        assert len(frame) == 10

    def test_second_order_frame(self, result):
        frame = result.second_order_frame()
        assert len(frame) == result.info.n_second_order

    def test_mantissa_frame(self, result):
        frame = result.mantissa_frame()
        assert frame["statistic"].tolist()[0] == "Mean Mantissa"
        assert frame["values"].tolist()[0] == result.mantissa.mean

    def test_summary(self, result):
        summary = result.summary()
        assert summary["test"].tolist() == [
            "Pearson's Chi-squared test",
            "Mantissa Arc Test",
            "Kolmogorov-Smirnov test",
        ]
        assert summary["df"].tolist()[:2] == [8, 2]


class TestShortcuts:
    """Tests for accessor shortcuts."""

    def test_shortcuts(self, result):
        assert result.mad_value() == result.mad
        assert result.chisq() is result.stats.chisq
        assert result.marc() is result.stats.mantissa_arc_test
        assert result.ks() is result.stats.ks_test
        assert result.dfactor() == result.distortion_factor

    def test_frozen(self, result):
        with pytest.raises(AttributeError):
            result.mad = 0.0
        with pytest.raises(AttributeError):
            result.stats.mantissa_arc_test.l2 = 123.0

    def test_hashable(self, result):
        assert hash(result) == hash(benford([100, 200, 150, 120, 999, 111, 105, 130, 190, 250], 1))
