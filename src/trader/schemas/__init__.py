"""Serialization schemas."""

from trader.schemas.trade import TradeRecord
from trader.schemas.position import PositionSummary

__all__ = [
    "TradeRecord",
    "PositionSummary",
]
