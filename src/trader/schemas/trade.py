"""Pydantic schemas for serializing trades."""

from pydantic import BaseModel, ConfigDict

from trader.domain.models import Trade, TradeType


class TradeRecord(BaseModel):
    """One entry of a portfolio's trade history, as stored or sent."""

    model_config = ConfigDict(frozen=True)

    trade_type: TradeType
    security_code: str
    quantity: int
    price_in_cents: int
    # Derived; kept on the record so readers need not recompute it
    total_in_cents: int

    @classmethod
    def from_trade(cls, trade: Trade) -> "TradeRecord":
        return cls(
            trade_type=trade.trade_type,
            security_code=trade.security_code,
            quantity=trade.quantity,
            price_in_cents=trade.price_in_cents,
            total_in_cents=trade.total_in_cents,
        )

    def to_trade(self) -> Trade:
        return Trade(
            trade_type=self.trade_type,
            security_code=self.security_code,
            quantity=self.quantity,
            price_in_cents=self.price_in_cents,
        )
