"""Registry of client portfolios."""

import itertools
import logging
import threading
from typing import Optional

from trader.core.exceptions import NotFoundError, ValidationError
from trader.services.portfolio import Portfolio

logger = logging.getLogger(__name__)


class PortfolioDirectory:
    """
    In-memory directory holding one portfolio per client.

    Portfolios are opened at onboarding and live for the rest of the process.
    """

    def __init__(
        self,
        initial_deposit_in_dollars: Optional[int] = None,
        enforce_cash_balance: bool = False,
    ):
        self._initial_deposit_in_dollars = initial_deposit_in_dollars
        self._enforce_cash_balance = enforce_cash_balance
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._portfolios: dict[int, Portfolio] = {}
        self._portfolio_ids_by_client: dict[int, int] = {}

    def create_portfolio_for(self, client_id: int) -> Portfolio:
        """Open the portfolio of a client, seeded with the starting balance."""
        with self._lock:
            if client_id in self._portfolio_ids_by_client:
                raise ValidationError(f"Client {client_id} already has a portfolio")

            portfolio = Portfolio(
                portfolio_id=next(self._ids),
                client_id=client_id,
                initial_deposit_in_dollars=self._initial_deposit_in_dollars,
                enforce_cash_balance=self._enforce_cash_balance,
            )
            self._portfolios[portfolio.portfolio_id] = portfolio
            self._portfolio_ids_by_client[client_id] = portfolio.portfolio_id

        logger.info("Opened portfolio %s for client %s", portfolio.portfolio_id, client_id)
        return portfolio

    def find_portfolio_by_id(self, portfolio_id: int) -> Portfolio:
        portfolio = self._portfolios.get(portfolio_id)
        if portfolio is None:
            raise NotFoundError("Portfolio", portfolio_id)
        return portfolio

    def find_portfolio_for_client(self, client_id: int) -> Portfolio:
        portfolio_id = self._portfolio_ids_by_client.get(client_id)
        if portfolio_id is None:
            raise NotFoundError("Portfolio for client", client_id)
        return self._portfolios[portfolio_id]

    def find_all(self) -> list[Portfolio]:
        with self._lock:
            return list(self._portfolios.values())
