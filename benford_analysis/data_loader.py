"""
Sample loading utilities for Benford analysis.

Turns whatever the caller holds (list, numpy array, pandas or Polars Series)
into a clean float sample and applies the sign filter.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd
import polars as pl

from .config import SignFilter, DEFAULT_DATA_NAME
from .exceptions import ConfigurationError, InsufficientDataError


@dataclass(frozen=True, eq=False)
class FilteredSample:
    """Magnitudes kept by the sign filter and their positions in the input."""
    values: np.ndarray
    lines: np.ndarray

    def __len__(self) -> int:
        return len(self.values)


def to_numeric_array(data) -> np.ndarray:
    """
    Coerce a numeric sample to a float array.

    Non-numeric entries and infinities become NaN, so they are dropped by
    every sign filter downstream.

    Examples:
        >>> to_numeric_array([1, "2", None, "x"])
        array([ 1.,  2., nan, nan])
    """
    if isinstance(data, pl.Series):
        data = data.to_pandas()
    elif isinstance(data, (pl.DataFrame, pd.DataFrame)):
        raise ConfigurationError(
            "Expected a single column of numbers, got a DataFrame. Select a column first.",
            stage="load",
        )
    elif np.isscalar(data):
        data = [data]

    series = pd.to_numeric(pd.Series(data, dtype=object), errors="coerce")
    values = series.to_numpy(dtype=float, na_value=np.nan)
    # to_numpy may hand back a read-only view of the Series
    return np.where(np.isfinite(values), values, np.nan)


def sign_mask(values: np.ndarray, sign: str) -> np.ndarray:
    """Boolean mask of the entries selected by a sign filter (NaN never is)."""
    with np.errstate(invalid="ignore"):
        if sign == SignFilter.POSITIVE:
            mask = values > 0
        elif sign == SignFilter.NEGATIVE:
            mask = values < 0
        elif sign == SignFilter.BOTH:
            mask = values != 0
        else:
            raise ConfigurationError(
                f"Unknown sign: {sign!r}. Choose from: {list(SignFilter.ALL)}",
                stage="load",
            )
    return mask & ~np.isnan(values)


def load_sample(data, sign: str = SignFilter.POSITIVE) -> FilteredSample:
    """
    Load a numeric sample and keep the entries selected by ``sign``.

    Args:
        data: Sequence of numbers (list, ndarray, pandas or Polars Series)
        sign: 'positive', 'negative' or 'both'

    Returns:
        FilteredSample with absolute values and zero-based input positions.

    Raises:
        InsufficientDataError: if nothing survives the filter.
    """
    values = to_numeric_array(data)
    mask = sign_mask(values, sign)
    lines = np.flatnonzero(mask)

    if len(lines) == 0:
        raise InsufficientDataError(
            f"No {sign} values left to analyze (input had {len(values):,} entries)",
            stage="load",
        )

    return FilteredSample(values=np.abs(values[mask]), lines=lines)


def sample_name(data, data_name: Optional[str] = None) -> str:
    """Pick a label for the sample: explicit name, Series name, or the default."""
    if data_name is not None:
        return str(data_name)
    name = getattr(data, "name", None)
    if isinstance(name, str) and name:
        return name
    return DEFAULT_DATA_NAME


def count_duplicates(values: np.ndarray) -> pd.DataFrame:
    """
    Count how often each value repeats, most repeated first.

    Ties are broken by the value itself so the ordering is stable.

    Returns:
        DataFrame with columns: number, duplicates
    """
    result = (
        pl.DataFrame({"number": np.asarray(values, dtype=float)})
        .group_by("number")
        .agg(pl.len().alias("duplicates"))
        .sort(["duplicates", "number"], descending=[True, False])
    )
    return result.to_pandas()
