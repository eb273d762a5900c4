"""Trade domain model."""

from dataclasses import dataclass, replace
from typing import Optional

from trader.domain.models.enums import TradeType, TradeDirection

CASH_ACCOUNT = "CASH"

# Cash is counted in cents, each worth one cent
CASH_UNIT_PRICE_IN_CENTS = 1


@dataclass(frozen=True)
class Trade:
    """
    Immutable ledger entry for a single financial event.

    Supports: DEPOSIT, WITHDRAWAL, BUY, SELL.
    - DEPOSIT/WITHDRAWAL move the cash account; quantity is the amount in cents
    - BUY/SELL move a security; a price of 0 means "fill at market"
    - Callers are responsible for passing non-negative quantities and prices
    """

    trade_type: TradeType
    security_code: str
    quantity: int
    price_in_cents: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.trade_type, str):
            object.__setattr__(self, "trade_type", TradeType(self.trade_type))

    @classmethod
    def buy(cls, security_code: str, quantity: int, price_in_cents: int = 0) -> "Trade":
        return cls(TradeType.BUY, security_code, quantity, price_in_cents)

    @classmethod
    def sell(cls, security_code: str, quantity: int, price_in_cents: int = 0) -> "Trade":
        return cls(TradeType.SELL, security_code, quantity, price_in_cents)

    @classmethod
    def deposit(cls, amount_in_cents: int) -> "Trade":
        return cls(TradeType.DEPOSIT, CASH_ACCOUNT, amount_in_cents, CASH_UNIT_PRICE_IN_CENTS)

    @classmethod
    def withdrawal(cls, amount_in_cents: int) -> "Trade":
        return cls(TradeType.WITHDRAWAL, CASH_ACCOUNT, amount_in_cents, CASH_UNIT_PRICE_IN_CENTS)

    @property
    def direction(self) -> TradeDirection:
        return self.trade_type.direction

    @property
    def total_in_cents(self) -> int:
        return self.quantity * self.price_in_cents

    @property
    def is_market_order(self) -> bool:
        """Return True if the price must be filled from a price source."""
        return self.price_in_cents == 0

    def at_price(self, price_in_cents: int) -> "Trade":
        """Return a copy of this trade with the price bound."""
        return replace(self, price_in_cents=price_in_cents)

    def cash_counter_entry(self) -> Optional["Trade"]:
        """
        Derive the cash movement that funds or settles this trade.

        A BUY withdraws its total from the cash account and a SELL deposits
        it. Cash trades are already cash movements and have no counter-entry.
        """
        if not self.trade_type.is_security_trade:
            return None
        return Trade(
            trade_type=self.trade_type.reverse(),
            security_code=CASH_ACCOUNT,
            quantity=self.total_in_cents,
            price_in_cents=CASH_UNIT_PRICE_IN_CENTS,
        )
