"""
Benford Analysis of a numeric sample.

BenfordAnalyzer runs the full pipeline in one synchronous call:
1. Validate configuration and load the sample (sign filter)
2. Theoretical Benford distribution for the digit width
3. First-order empirical distribution
4. Second-order empirical distribution (sorted differences)
5. Frequency differences and Z-statistics
6. MAD, summation, mantissa, Distortion Factor and hypothesis tests
7. Assemble the immutable BenfordResult

Any failure aborts the analysis; no partial result is returned.
"""

from contextlib import contextmanager
from typing import Optional

import numpy as np

from .config import (
    BenfordConfig, ANALYSIS_STEPS,
    DEFAULT_NUMBER_OF_DIGITS, DEFAULT_SIGN, DEFAULT_DISCRETE, DEFAULT_ROUND,
)
from .exceptions import BenfordError
from .data_loader import load_sample, sample_name
from .analysis.digits import (
    extract_mantissa, generate_benford_digits, generate_benford_distribution,
)
from .analysis.empirical import generate_empirical_distribution
from .analysis.summation import generate_summation, abs_excess_summation
from .analysis.mantissa import mantissa_moments
from .analysis.conformity import (
    z_statistic, chisq_test, mantissa_arc_test, ks_test,
    mean_absolute_deviation, mad_conformity, distortion_factor,
)
from .result import (
    BenfordResult, BenfordInfo, BenfordStats, DigitRow, SampleData, SecondOrderData,
)


@contextmanager
def _stage(name: str):
    """Tag errors raised inside an analysis stage with the stage name."""
    try:
        yield
    except BenfordError as exc:
        if exc.stage is None:
            exc.stage = name
        raise
    except (ArithmeticError, ValueError) as exc:
        raise BenfordError(f"{type(exc).__name__}: {exc}", stage=name) from exc


class BenfordAnalyzer:
    """
    Validates a numeric sample against Benford's Law.

    Usage:
        analyzer = BenfordAnalyzer(number_of_digits=2, sign="both")
        result = analyzer.analyze(payments["Amount"])
        print(result.suspects_table(how_many=10))
    """

    def __init__(
        self,
        number_of_digits: int = DEFAULT_NUMBER_OF_DIGITS,
        sign: str = DEFAULT_SIGN,
        discrete: bool = DEFAULT_DISCRETE,
        round: int = DEFAULT_ROUND,
        verbose: bool = False,
    ):
        """
        Initialize analyzer with its configuration.

        Args:
            number_of_digits: How many leading digits form a digit group (default 2)
            sign: 'positive' (> 0), 'negative' (< 0) or 'both' (!= 0).
                Samples mixing signs are usually better analyzed per sign,
                the incentives to manipulate them differ.
            discrete: Round second-order differences to avoid floating point
                noise between near-equal values. Use False for continuous
                data (e.g. a simulated lognormal).
            round: Decimals used by that rounding
            verbose: Print progress for each step

        Raises:
            ConfigurationError: on an invalid setting
        """
        self.config = BenfordConfig(
            number_of_digits=number_of_digits,
            sign=sign,
            discrete=discrete,
            round=round,
        ).validate()
        self.verbose = verbose

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)

    def analyze(self, data, data_name: Optional[str] = None) -> BenfordResult:
        """
        Run the complete analysis.

        Args:
            data: Numeric sample (list, ndarray, pandas or Polars Series).
                Missing and non-numeric entries are ignored.
            data_name: Label for the sample. None = Series name or 'data'.

        Returns:
            BenfordResult

        Raises:
            InsufficientDataError: if no value survives the sign filter
            BenfordError: if any stage fails (``stage`` names it)
        """
        cfg = self.config
        k = cfg.number_of_digits
        name = sample_name(data, data_name)

        # Step 1: Sample
        self._log(f"Step 1/{ANALYSIS_STEPS}: Loading {cfg.sign} values of '{name}'...")
        with _stage("load"):
            sample = load_sample(data, cfg.sign)
        self._log(f"  Values used: {len(sample):,}")

        # Step 2: Theoretical distribution
        self._log(f"Step 2/{ANALYSIS_STEPS}: Generating Benford distribution ({k} digit(s))...")
        with _stage("benford_distribution"):
            benford_digits = generate_benford_digits(k)
            benford_dist = generate_benford_distribution(benford_digits)

        # Step 3: First order
        self._log(f"Step 3/{ANALYSIS_STEPS}: Computing first order distribution...")
        with _stage("first_order"):
            empirical = generate_empirical_distribution(sample.values, k, benford_digits)
            n = empirical.n

        # Step 4: Second order
        self._log(f"Step 4/{ANALYSIS_STEPS}: Computing second order distribution...")
        with _stage("second_order"):
            second_order = generate_empirical_distribution(
                sample.values, k, benford_digits,
                second_order=True, discrete=cfg.discrete, round=cfg.round,
            )
            n_second_order = second_order.n
        self._log(f"  Second order observations: {n_second_order:,}")

        # Step 5: Differences
        self._log(f"Step 5/{ANALYSIS_STEPS}: Comparing frequencies...")
        with _stage("differences"):
            benford_dist_freq = benford_dist * n
            difference = empirical.dist_freq - benford_dist_freq
            squared_diff = difference ** 2 / benford_dist_freq
            absolute_diff = np.abs(difference)
            z_stat = z_statistic(benford_dist, empirical.dist, n)

        # Step 6: Scores and tests
        self._log(f"Step 6/{ANALYSIS_STEPS}: Running conformity tests...")
        with _stage("mad"):
            mad = mean_absolute_deviation(benford_dist, empirical.dist)
            conformity = mad_conformity(mad, k)

        with _stage("summation"):
            summation = generate_summation(benford_digits, empirical.data, empirical.data_digits)
            excess_summation = abs_excess_summation(summation)

        with _stage("mantissa"):
            mantissa = extract_mantissa(empirical.data)
            moments = mantissa_moments(mantissa)

        with _stage("distortion_factor"):
            dfactor = distortion_factor(empirical.data)

        with _stage("chisq"):
            chisq = chisq_test(empirical.dist_freq, benford_dist_freq, name)

        with _stage("mantissa_arc_test"):
            mat = mantissa_arc_test(mantissa, name)

        with _stage("ks_test"):
            ks = ks_test(benford_dist, empirical.dist, n, name)

        # Step 7: Result
        self._log(f"Step 7/{ANALYSIS_STEPS}: Assembling result...")
        bfd = tuple(
            DigitRow(
                digits=int(benford_digits[i]),
                data_dist=float(empirical.dist[i]),
                data_second_order_dist=float(second_order.dist[i]),
                benford_dist=float(benford_dist[i]),
                data_second_order_dist_freq=float(second_order.dist_freq[i]),
                data_dist_freq=float(empirical.dist_freq[i]),
                benford_dist_freq=float(benford_dist_freq[i]),
                benford_so_dist_freq=float(benford_dist[i] * n_second_order),
                data_summation=float(summation[i]),
                abs_excess_summation=float(excess_summation[i]),
                difference=float(difference[i]),
                squared_diff=float(squared_diff[i]),
                absolute_diff=float(absolute_diff[i]),
                z_statistic=float(z_stat[i]),
            )
            for i in range(len(benford_digits))
        )

        result = BenfordResult(
            info=BenfordInfo(
                data_name=name,
                n=n,
                n_second_order=n_second_order,
                number_of_digits=k,
            ),
            data=SampleData(
                lines_used=tuple(int(x) for x in sample.lines),
                data_used=tuple(float(x) for x in empirical.data),
                data_mantissa=tuple(float(x) for x in mantissa),
                data_digits=tuple(int(x) for x in empirical.data_digits),
            ),
            s_o_data=SecondOrderData(
                second_order=tuple(float(x) for x in second_order.data),
                data_second_order_digits=tuple(int(x) for x in second_order.data_digits),
            ),
            bfd=bfd,
            mantissa=moments,
            mad=mad,
            mad_conformity=conformity,
            distortion_factor=float(dfactor),
            stats=BenfordStats(chisq=chisq, mantissa_arc_test=mat, ks_test=ks),
        )

        self._log(f"Benford analysis complete! MAD = {mad:.6f} ({conformity or 'no conformity table'})")
        return result


def benford(
    data,
    number_of_digits: int = DEFAULT_NUMBER_OF_DIGITS,
    sign: str = DEFAULT_SIGN,
    discrete: bool = DEFAULT_DISCRETE,
    round: int = DEFAULT_ROUND,
    data_name: Optional[str] = None,
) -> BenfordResult:
    """
    Benford analysis of a numeric sample in one call.

    Examples:
        >>> result = benford([100, 200, 150, 120, 999, 111, 105, 130, 190, 250], 1)
        >>> result.info.n
        10
    """
    analyzer = BenfordAnalyzer(
        number_of_digits=number_of_digits,
        sign=sign,
        discrete=discrete,
        round=round,
    )
    return analyzer.analyze(data, data_name=data_name)
