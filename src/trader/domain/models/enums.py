"""Enumerations for domain models."""

from enum import Enum


class TradeDirection(str, Enum):
    """Sign of a trade's effect on the security it targets."""

    INCREASE = "INCREASE"
    DECREASE = "DECREASE"

    @property
    def multiplier(self) -> int:
        return 1 if self is TradeDirection.INCREASE else -1


class TradeType(str, Enum):
    """Types of ledger trades."""

    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    BUY = "BUY"
    SELL = "SELL"

    @property
    def direction(self) -> TradeDirection:
        """Effect on the holdings of the traded security."""
        if self in (TradeType.DEPOSIT, TradeType.BUY):
            return TradeDirection.INCREASE
        return TradeDirection.DECREASE

    @property
    def cash_direction(self) -> TradeDirection:
        """Effect on the cash account."""
        if self in (TradeType.DEPOSIT, TradeType.SELL):
            return TradeDirection.INCREASE
        return TradeDirection.DECREASE

    @property
    def is_security_trade(self) -> bool:
        return self in (TradeType.BUY, TradeType.SELL)

    def reverse(self) -> "TradeType":
        """Cash-side type moving money the opposite way to this security trade."""
        if self is TradeType.BUY:
            return TradeType.WITHDRAWAL
        if self is TradeType.SELL:
            return TradeType.DEPOSIT
        raise ValueError(f"{self.value} has no cash-side reverse")
