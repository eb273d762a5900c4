"""Domain models package."""

from trader.domain.models.enums import TradeType, TradeDirection
from trader.domain.models.trade import Trade, CASH_ACCOUNT, CASH_UNIT_PRICE_IN_CENTS
from trader.domain.models.position import Position, EMPTY_CASH_POSITION
from trader.domain.models.client import Client

__all__ = [
    "TradeType",
    "TradeDirection",
    "Trade",
    "CASH_ACCOUNT",
    "CASH_UNIT_PRICE_IN_CENTS",
    "Position",
    "EMPTY_CASH_POSITION",
    "Client",
]
