"""Portfolio: one client's trade history and the valuations derived from it."""

import logging
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from trader.config.settings import get_settings
from trader.core.exceptions import (
    InsufficientFundsError,
    PriceUnavailableError,
    ValidationError,
)
from trader.core.money import cents_to_dollars, dollars_to_cents
from trader.domain.models import (
    Trade,
    TradeType,
    TradeDirection,
    Position,
    EMPTY_CASH_POSITION,
)
from trader.providers.price_reader import PriceReader
from trader.schemas.trade import TradeRecord
from trader.services.positions import Positions

logger = logging.getLogger(__name__)


class Portfolio:
    """
    Records the financial position of a client and the history of their trades.

    The history is append-only and always starts with the seed deposit. Holdings
    and cash are never stored; every query replays the history from scratch.

    Readers take the current history tuple without locking. Orders build a new
    tuple and swap it in under the portfolio lock, so the funds check and the
    append happen as one step.
    """

    def __init__(
        self,
        portfolio_id: int,
        client_id: int,
        initial_deposit_in_dollars: Optional[int] = None,
        enforce_cash_balance: bool = False,
    ):
        """
        Create a portfolio seeded with its starting balance.

        Args:
            portfolio_id: Identifier of this portfolio
            client_id: Identifier of the owning client
            initial_deposit_in_dollars: Seed balance; defaults to the configured value
            enforce_cash_balance: Also reject withdrawals larger than the cash held
        """
        self._portfolio_id = portfolio_id
        self._client_id = client_id
        self._enforce_cash_balance = enforce_cash_balance
        self._lock = threading.Lock()
        self._history: tuple[Trade, ...] = ()

        if initial_deposit_in_dollars is None:
            initial_deposit_in_dollars = get_settings().initial_deposit_in_dollars
        self.place_order(Trade.deposit(dollars_to_cents(initial_deposit_in_dollars)))

    @property
    def portfolio_id(self) -> int:
        return self._portfolio_id

    @property
    def client_id(self) -> int:
        return self._client_id

    def get_cash(self) -> Decimal:
        """Return the cash balance in dollars."""
        return cents_to_dollars(self.get_cash_in_cents())

    def get_cash_in_cents(self) -> int:
        return self._cash_position_of(self._history).total_value_in_cents

    def place_order(self, trade: Trade) -> Trade:
        """
        Accept a trade into the history.

        A BUY must be covered by the cash held; otherwise InsufficientFundsError
        is raised and nothing is appended. An accepted BUY or SELL is preceded
        in the history by its cash counter-entry.

        Negative quantities or prices, and BUY/SELL orders still awaiting a
        market price, raise ValidationError.
        """
        self._validate(trade)

        with self._lock:
            history = self._history
            self._ensure_sufficient_funds_are_available_for(trade, history)

            entries = [trade]
            counter_entry = trade.cash_counter_entry()
            if counter_entry is not None:
                entries.insert(0, counter_entry)
            self._history = history + tuple(entries)

        logger.info(
            "Portfolio %s accepted %s %s x%s at %s cents",
            self._portfolio_id,
            trade.trade_type.value,
            trade.security_code,
            trade.quantity,
            trade.price_in_cents,
        )
        return trade

    def place_order_using_prices_from(self, price_reader: PriceReader) -> "OrderPlacement":
        """Return a helper that fills market orders from the given price source."""
        return OrderPlacement(portfolio=self, price_reader=price_reader)

    def has_sufficient_funds_for(self, trade: Trade) -> bool:
        """Return True if the cash held covers the trade's cost."""
        return self._has_sufficient_funds_for(trade, self._history)

    def get_positions(self) -> Positions:
        """Fold the current history into positions, without market prices."""
        return Positions.from_trades(self._history)

    def calculate_positions_using(self, price_reader: PriceReader) -> dict[str, Position]:
        """Return every position revalued at the reader's current prices."""
        positions = self.get_positions()
        positions.update_market_prices_using(price_reader)
        return positions.get_positions()

    def calculate_profit_using(self, price_reader: PriceReader) -> Decimal:
        """Return the unrealised profit in dollars across all securities held."""
        positions = self.calculate_positions_using(price_reader)
        profit_in_cents = sum(
            position.profit_in_cents
            for position in positions.values()
            if not position.is_cash
        )
        return cents_to_dollars(profit_in_cents)

    def get_history(self) -> list[Trade]:
        """Return a copy of the trade history, oldest first."""
        return list(self._history)

    def history_records(self) -> list[TradeRecord]:
        """Return the trade history as serializable records."""
        return [TradeRecord.from_trade(trade) for trade in self._history]

    @staticmethod
    def _validate(trade: Trade) -> None:
        if trade.quantity < 0:
            raise ValidationError(f"{trade.trade_type.value} requires quantity >= 0")
        if trade.price_in_cents < 0:
            raise ValidationError(f"{trade.trade_type.value} requires price >= 0")
        if trade.trade_type.is_security_trade and trade.is_market_order:
            raise ValidationError(
                f"{trade.trade_type.value} of {trade.security_code} has no price; "
                "resolve it through place_order_using_prices_from"
            )

    def _ensure_sufficient_funds_are_available_for(
        self,
        trade: Trade,
        history: tuple[Trade, ...],
    ) -> None:
        if not self._is_cash_constrained(trade):
            return

        if not self._has_sufficient_funds_for(trade, history):
            available = self._cash_position_of(history).total_value_in_cents
            logger.warning(
                "Portfolio %s rejected %s of %s: %s cents available, %s cents required",
                self._portfolio_id,
                trade.trade_type.value,
                trade.security_code,
                available,
                trade.total_in_cents,
            )
            raise InsufficientFundsError(
                available_in_cents=available,
                attempted_in_cents=trade.total_in_cents,
            )

    def _is_cash_constrained(self, trade: Trade) -> bool:
        if trade.trade_type == TradeType.BUY:
            return True
        return self._enforce_cash_balance and trade.trade_type == TradeType.WITHDRAWAL

    def _has_sufficient_funds_for(self, trade: Trade, history: tuple[Trade, ...]) -> bool:
        if trade.trade_type.cash_direction == TradeDirection.INCREASE:
            return True
        return self._cash_position_of(history).total_value_in_cents >= trade.total_in_cents

    @staticmethod
    def _cash_position_of(history: tuple[Trade, ...]) -> Position:
        cash_position = Positions.from_trades(history).cash_position()
        return cash_position if cash_position is not None else EMPTY_CASH_POSITION


@dataclass(frozen=True)
class OrderPlacement:
    """Places orders on a portfolio, filling market orders from a price source."""

    portfolio: Portfolio
    price_reader: PriceReader

    def for_trade(self, trade: Trade) -> Trade:
        """
        Resolve a zero-priced trade at the current market price, then place it.

        The quote is fetched before the portfolio lock is taken.
        """
        if trade.is_market_order:
            price_in_cents = self.price_reader.get_price_for(trade.security_code)
            if price_in_cents is None:
                raise PriceUnavailableError(trade.security_code)
            trade = trade.at_price(price_in_cents)

        return self.portfolio.place_order(trade)
