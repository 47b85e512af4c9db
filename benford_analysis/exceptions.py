"""
Errors raised by the Benford analysis engine.

Every error carries the name of the analysis stage that failed so callers
can tell a bad configuration from a sample that is too small.
"""

from typing import Optional


class BenfordError(ValueError):
    """Base error for a failed Benford analysis."""

    def __init__(self, message: str, stage: Optional[str] = None):
        self.message = message
        self.stage = stage
        super().__init__(message)

    def __str__(self) -> str:
        if self.stage:
            return f"[{self.stage}] {self.message}"
        return self.message


class ConfigurationError(BenfordError):
    """Invalid digit count, sign mode or rounding precision."""


class InsufficientDataError(BenfordError):
    """Nothing left to analyze after sign filtering."""


class DegenerateDistributionError(BenfordError):
    """A theoretical probability of zero ended up in a denominator."""
