"""Pydantic schemas for valuation output."""

from decimal import Decimal

from pydantic import BaseModel

from trader.domain.models import Position


class PositionSummary(BaseModel):
    """A revalued position with both cent and dollar figures."""

    security_code: str
    quantity: int
    cost_basis_in_cents: int
    market_price_in_cents: int
    total_value_in_cents: int
    profit_in_cents: int
    total_value: Decimal
    profit: Decimal

    @classmethod
    def from_position(cls, position: Position) -> "PositionSummary":
        return cls(
            security_code=position.security_code,
            quantity=position.quantity,
            cost_basis_in_cents=position.cost_basis_in_cents,
            market_price_in_cents=position.market_price_in_cents,
            total_value_in_cents=position.total_value_in_cents,
            profit_in_cents=position.profit_in_cents,
            total_value=position.total_value,
            profit=position.profit,
        )
