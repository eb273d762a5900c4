"""Position domain model."""

from dataclasses import dataclass, replace
from decimal import Decimal

from trader.core.money import cents_to_dollars
from trader.domain.models.trade import Trade, CASH_ACCOUNT, CASH_UNIT_PRICE_IN_CENTS


@dataclass(frozen=True)
class Position:
    """
    Net holding of one security at a point in the fold.

    Market price stays 0 until the position is revalued, except for the cash
    account whose units are always worth one cent.
    """

    security_code: str
    quantity: int = 0
    cost_basis_in_cents: int = 0
    market_price_in_cents: int = 0

    @classmethod
    def opened_for(cls, security_code: str) -> "Position":
        """Return an empty position ready to absorb the first trade."""
        if security_code == CASH_ACCOUNT:
            return cls(security_code, market_price_in_cents=CASH_UNIT_PRICE_IN_CENTS)
        return cls(security_code)

    @property
    def is_cash(self) -> bool:
        return self.security_code == CASH_ACCOUNT

    @property
    def total_value_in_cents(self) -> int:
        return self.quantity * self.market_price_in_cents

    @property
    def profit_in_cents(self) -> int:
        return self.total_value_in_cents - self.cost_basis_in_cents

    @property
    def cost_basis(self) -> Decimal:
        return cents_to_dollars(self.cost_basis_in_cents)

    @property
    def total_value(self) -> Decimal:
        return cents_to_dollars(self.total_value_in_cents)

    @property
    def profit(self) -> Decimal:
        return cents_to_dollars(self.profit_in_cents)

    def apply(self, trade: Trade) -> "Position":
        """Return this position moved by the trade's signed quantity and total."""
        sign = trade.direction.multiplier
        return replace(
            self,
            quantity=self.quantity + sign * trade.quantity,
            cost_basis_in_cents=self.cost_basis_in_cents + sign * trade.total_in_cents,
        )

    def at_market_price(self, market_price_in_cents: int) -> "Position":
        """Return this position revalued at the given unit price."""
        return replace(self, market_price_in_cents=market_price_in_cents)


# Zero balance reported before any cash trade has been folded
EMPTY_CASH_POSITION = Position(CASH_ACCOUNT)
