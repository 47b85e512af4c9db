"""
Moments of the mantissa sample.

If the data follows Benford's Law, the mantissas are uniform on [0, 1):
mean 0.5, variance 1/12, skewness 0 and excess kurtosis -1.2 (see
config.MANTISSA_EXPECTED). These are descriptive only; the formal
uniformity test is the Mantissa Arc Test in conformity.py.
"""

import warnings
from dataclasses import dataclass, asdict

import numpy as np
from scipy import stats


@dataclass(frozen=True)
class MantissaMoments:
    """Descriptive statistics of the mantissa."""
    mean: float
    var: float
    ek: float   # excess kurtosis (Fisher, normal = 0)
    sk: float   # skewness

    def to_dict(self) -> dict:
        return asdict(self)


def mantissa_moments(mantissa: np.ndarray) -> MantissaMoments:
    """
    Compute mean, sample variance, skewness and excess kurtosis.

    Skewness and kurtosis use the population moment estimators. Undefined
    moments (a single value, or all mantissas equal) come back as NaN.
    """
    mantissa = np.asarray(mantissa, dtype=float)
    n = len(mantissa)
    if n == 0:
        return MantissaMoments(mean=np.nan, var=np.nan, ek=np.nan, sk=np.nan)

    mean = float(np.mean(mantissa))
    var = float(np.var(mantissa, ddof=1)) if n > 1 else np.nan

    # Identical mantissas (e.g. 7, 70, 700) have zero spread
    if np.ptp(mantissa) == 0:
        return MantissaMoments(mean=mean, var=var, ek=np.nan, sk=np.nan)

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", RuntimeWarning)
        sk = float(stats.skew(mantissa, bias=True))
        ek = float(stats.kurtosis(mantissa, fisher=True, bias=True))

    return MantissaMoments(mean=mean, var=var, ek=ek, sk=sk)
