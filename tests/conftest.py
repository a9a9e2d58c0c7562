"""Pytest configuration and fixtures."""

import pytest

from src.core.money import Money
from src.core.logging import setup_logging


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure structured logging once for the test run."""
    setup_logging(level="DEBUG", json_logs=False)


@pytest.fixture
def usd():
    """Factory for USD amounts."""
    def make(units: int = 0, nanos: int = 0) -> Money:
        return Money(units=units, nanos=nanos, currency_code="USD")
    return make


@pytest.fixture
def sample_amounts(usd):
    """Valid USD amounts covering signs, carries and borrows."""
    return [
        usd(0, 0),
        usd(1, 0),
        usd(-1, 0),
        usd(0, 1),
        usd(0, -1),
        usd(0, 500000000),
        usd(0, -500000000),
        usd(1, 800000000),
        usd(-1, -800000000),
        usd(3, 999999999),
        usd(-3, -999999999),
        usd(12, 250000000),
        usd(-7, -100000000),
    ]
