"""
Pytest configuration and shared fixtures for britthreads tests.
"""

import pytest

from britthreads.calculator import (
    calculate_ba,
    calculate_bsc,
    calculate_whitworth,
)


# ─── Results (module-scoped, calculations are pure) ──────────────────────


@pytest.fixture(scope="module")
def bsw_quarter():
    """1/4" BSW (20 TPI), the usual reference size."""
    return calculate_whitworth(0.25, 20)


@pytest.fixture(scope="module")
def bsc_quarter():
    """1/4" BSC (26 TPI)."""
    return calculate_bsc(0.25, 26)


@pytest.fixture(scope="module")
def ba_zero():
    """0 BA - pitch 1.00mm, major 6.00mm."""
    return calculate_ba(0)


@pytest.fixture(scope="module")
def ba_two():
    """2 BA - the most common BA size."""
    return calculate_ba(2)
