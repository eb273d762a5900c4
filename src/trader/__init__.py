"""Per-client trade ledger with on-demand portfolio valuation."""

from trader.core.exceptions import (
    AppError,
    InsufficientFundsError,
    PriceUnavailableError,
)
from trader.domain.models import Trade, TradeType, Position, CASH_ACCOUNT
from trader.providers import PriceReader, StubPriceReader
from trader.services import Portfolio, Positions

__version__ = "0.1.0"

__all__ = [
    "AppError",
    "InsufficientFundsError",
    "PriceUnavailableError",
    "Trade",
    "TradeType",
    "Position",
    "CASH_ACCOUNT",
    "PriceReader",
    "StubPriceReader",
    "Portfolio",
    "Positions",
]
