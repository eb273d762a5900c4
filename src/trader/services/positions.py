"""Fold engine deriving positions from a trade history."""

from typing import Iterable, Optional

from trader.core.exceptions import PriceUnavailableError
from trader.domain.models import Trade, Position, CASH_ACCOUNT
from trader.providers.price_reader import PriceReader


class Positions:
    """
    Holdings derived by replaying trades in order.

    Positions are never edited outside a fold and never persisted; the trade
    history stays the source of truth and is replayed on every query.
    """

    def __init__(self) -> None:
        self._positions: dict[str, Position] = {}

    @classmethod
    def from_trades(cls, trades: Iterable[Trade]) -> "Positions":
        """Fold an ordered trade sequence into positions, starting from empty."""
        positions = cls()
        for trade in trades:
            positions.apply(trade)
        return positions

    def apply(self, trade: Trade) -> None:
        """Incorporate one trade, opening the security's position if needed."""
        current = self._positions.get(trade.security_code)
        if current is None:
            current = Position.opened_for(trade.security_code)
        self._positions[trade.security_code] = current.apply(trade)

    def update_market_prices_using(self, price_reader: PriceReader) -> None:
        """
        Revalue every held security at its current market price.

        The cash account is skipped. A missing quote raises
        PriceUnavailableError rather than valuing the holding at zero.
        """
        for security_code, position in list(self._positions.items()):
            if position.is_cash:
                continue
            price_in_cents = price_reader.get_price_for(security_code)
            if price_in_cents is None:
                raise PriceUnavailableError(security_code)
            self._positions[security_code] = position.at_market_price(price_in_cents)

    def cash_position(self) -> Optional[Position]:
        return self._positions.get(CASH_ACCOUNT)

    def get_positions(self) -> dict[str, Position]:
        """Return a snapshot of the positions keyed by security code."""
        return dict(self._positions)
