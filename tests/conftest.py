"""
Pytest configuration and fixtures for benford_analysis tests.
"""

import pytest
import sys
import os

import numpy as np

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


@pytest.fixture
def invoice_amounts():
    """Small positive sample with known leading digits."""
    return [100, 200, 150, 120, 999, 111, 105, 130, 190, 250]


@pytest.fixture
def benford_sample():
    """Large sample whose mantissas are uniform on [0, 1) (follows Benford exactly)."""
    rng = np.random.default_rng(42)
    return 10 ** rng.uniform(0, 6, 100_000)


@pytest.fixture
def mixed_sample():
    """Both signs, zero, missing and non-numeric entries."""
    return [-120.5, 340, 0, None, "n/a", 56, -9, float("nan"), 1200]
