"""
Pytest configuration and fixtures for trader ledger tests.

This module provides:
- Deterministic and failing price readers
- Portfolio, directory and context fixtures
- Factory helpers for trades
"""

from decimal import Decimal
from typing import Optional

import pytest

from trader.app_context import AppContext, set_app_context
from trader.config.settings import Settings, reset_settings
from trader.domain.models import Trade
from trader.services import Portfolio, ClientDirectory, PortfolioDirectory


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings():
    """Make every test start from default settings and no global context."""
    reset_settings()
    set_app_context(None)
    yield
    reset_settings()
    set_app_context(None)


# =============================================================================
# PRICE READER FIXTURES
# =============================================================================


class FixedPriceReader:
    """
    Deterministic price reader for testing.

    Provides fixed prices in cents and records every lookup.
    """

    FIXED_PRICES = {
        "AAPL": 5000,
        "MSFT": 37825,
        "GOOGL": 14275,
        "TSLA": 24875,
    }

    def __init__(self, prices: Optional[dict[str, int]] = None):
        self._prices = dict(self.FIXED_PRICES if prices is None else prices)
        self.lookups: list[str] = []

    def get_price_for(self, security_code: str) -> Optional[int]:
        self.lookups.append(security_code)
        return self._prices.get(security_code)

    def set_price(self, security_code: str, price_in_cents: int) -> None:
        self._prices[security_code] = price_in_cents


class FailingPriceReader:
    """Price reader that always raises an exception."""

    def get_price_for(self, security_code: str) -> Optional[int]:
        raise ConnectionError("Network unavailable")


@pytest.fixture
def price_reader() -> FixedPriceReader:
    """Provide deterministic price reader."""
    return FixedPriceReader()


@pytest.fixture
def failing_price_reader() -> FailingPriceReader:
    """Provide a price reader that always fails."""
    return FailingPriceReader()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def portfolio() -> Portfolio:
    """Provide a freshly opened portfolio holding the default $1,000 seed."""
    return Portfolio(portfolio_id=1, client_id=1)


@pytest.fixture
def client_directory() -> ClientDirectory:
    return ClientDirectory()


@pytest.fixture
def portfolio_directory() -> PortfolioDirectory:
    return PortfolioDirectory()


@pytest.fixture
def app_context(price_reader) -> AppContext:
    """Provide an application context with deterministic prices."""
    return AppContext(settings=Settings(), price_reader=price_reader)


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def buy(security_code: str, quantity: int, price_in_cents: int = 0) -> Trade:
    """Helper to create a BUY trade."""
    return Trade.buy(security_code, quantity, price_in_cents)


def sell(security_code: str, quantity: int, price_in_cents: int = 0) -> Trade:
    """Helper to create a SELL trade."""
    return Trade.sell(security_code, quantity, price_in_cents)


def assert_dollars(actual: Decimal, expected: str) -> None:
    """Assert a dollar amount equals the expected string amount exactly."""
    assert actual == Decimal(expected), f"Expected {expected}, got {actual}"
