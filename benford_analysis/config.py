"""
Configuration and constants for Benford analysis.
"""

from dataclasses import dataclass, asdict

# === Defaults ===
DEFAULT_NUMBER_OF_DIGITS = 2
DEFAULT_SIGN = "positive"
DEFAULT_DISCRETE = True
DEFAULT_ROUND = 3
DEFAULT_DATA_NAME = "data"

# Relative tolerance added to the scaled value before flooring it to a digit
# group. Absorbs float noise like 0.29 * 100 = 28.999999999999996 (a few ulps)
# without moving genuine values such as 1.99999999999 into the next group.
DIGIT_RELATIVE_TOLERANCE = 1e-13

# Number of steps reported by BenfordAnalyzer(verbose=True)
ANALYSIS_STEPS = 7


# === Sign Filter ===
class SignFilter:
    POSITIVE = "positive"    # v > 0
    NEGATIVE = "negative"    # v < 0
    BOTH = "both"            # v != 0

    ALL = (POSITIVE, NEGATIVE, BOTH)


# === MAD Conformity (Nigrini, 2012) ===
class ConformityLevel:
    CLOSE = "Close conformity"
    ACCEPTABLE = "Acceptable conformity"
    MARGINAL = "Marginally acceptable conformity"
    NONCONFORMITY = "Nonconformity"


class Thresholds:
    # Upper bounds (inclusive) for close / acceptable / marginally acceptable.
    # Anything above the last bound is nonconformity.
    MAD_FIRST_DIGIT = (0.006, 0.012, 0.015)
    MAD_FIRST_TWO_DIGITS = (0.0012, 0.0018, 0.0022)
    MAD_FIRST_THREE_DIGITS = (0.00036, 0.00044, 0.00050)

    MAD = {
        1: MAD_FIRST_DIGIT,
        2: MAD_FIRST_TWO_DIGITS,
        3: MAD_FIRST_THREE_DIGITS,
    }


DIGITS_USED = {
    1: "First Digit",
    2: "First-Two Digits",
    3: "First-Three Digits",
}

# Mantissa moments of a Benford-conforming sample (uniform on [0, 1))
MANTISSA_EXPECTED = {
    "mean": 0.5,
    "var": 1 / 12,
    "ek": -1.2,
    "sk": 0.0,
}


# === Analysis Configuration ===
@dataclass(frozen=True)
class BenfordConfig:
    """Configuration for a single Benford analysis."""
    number_of_digits: int = DEFAULT_NUMBER_OF_DIGITS
    sign: str = DEFAULT_SIGN
    discrete: bool = DEFAULT_DISCRETE
    round: int = DEFAULT_ROUND

    def validate(self) -> "BenfordConfig":
        """
        Check every field, raising ConfigurationError on the first bad one.

        Returns:
            self, so the call can be chained.
        """
        from .exceptions import ConfigurationError

        if not _is_int(self.number_of_digits) or self.number_of_digits < 1:
            raise ConfigurationError(
                f"number_of_digits must be a positive integer, got {self.number_of_digits!r}",
                stage="validate",
            )
        if self.sign not in SignFilter.ALL:
            raise ConfigurationError(
                f"Unknown sign: {self.sign!r}. Choose from: {list(SignFilter.ALL)}",
                stage="validate",
            )
        if not isinstance(self.discrete, bool):
            raise ConfigurationError(
                f"discrete must be True or False, got {self.discrete!r}",
                stage="validate",
            )
        if not _is_int(self.round) or self.round < 0:
            raise ConfigurationError(
                f"round must be a non-negative integer, got {self.round!r}",
                stage="validate",
            )
        return self

    def to_dict(self) -> dict:
        return asdict(self)


def _is_int(value) -> bool:
    # bool is an int subclass; True digits make no sense
    return isinstance(value, int) and not isinstance(value, bool)
