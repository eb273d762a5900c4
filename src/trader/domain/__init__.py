"""Domain layer - pure business models with no external dependencies."""

from trader.domain.models import (
    Trade,
    TradeType,
    TradeDirection,
    CASH_ACCOUNT,
    Position,
    EMPTY_CASH_POSITION,
    Client,
)

__all__ = [
    "Trade",
    "TradeType",
    "TradeDirection",
    "CASH_ACCOUNT",
    "Position",
    "EMPTY_CASH_POSITION",
    "Client",
]
