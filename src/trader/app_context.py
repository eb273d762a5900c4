"""Application context for in-process service management.

Wires the client and portfolio directories to a price source so callers can
onboard clients and trade without assembling the services themselves.
"""

from typing import Optional

from trader.config.settings import Settings, get_settings
from trader.domain.models import Client
from trader.providers.price_reader import PriceReader
from trader.providers.stub_provider import StubPriceReader
from trader.services import ClientDirectory, PortfolioDirectory, Portfolio


class AppContext:
    """
    Application context providing in-process access to all services.

    Services are created up front and live as long as the context, so
    concurrent callers always share the same directories.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        price_reader: Optional[PriceReader] = None,
    ):
        """
        Initialize application context.

        Args:
            settings: Settings to use. Falls back to the global settings.
            price_reader: Price source for valuations. Defaults to the stub reader.
        """
        self._settings = settings if settings is not None else get_settings()
        self._price_reader = price_reader if price_reader is not None else StubPriceReader()

        self._client_directory = ClientDirectory()
        self._portfolio_directory = PortfolioDirectory(
            initial_deposit_in_dollars=self._settings.initial_deposit_in_dollars,
            enforce_cash_balance=self._settings.enforce_cash_balance,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def price_reader(self) -> PriceReader:
        return self._price_reader

    @property
    def clients(self) -> ClientDirectory:
        """Get the ClientDirectory instance."""
        return self._client_directory

    @property
    def portfolios(self) -> PortfolioDirectory:
        """Get the PortfolioDirectory instance."""
        return self._portfolio_directory

    def register_client(
        self,
        first_name: str,
        last_name: str,
        email: Optional[str] = None,
    ) -> Client:
        """Register a client and open their portfolio."""
        client = self.clients.register(Client.named(first_name, last_name, email))
        self.portfolios.create_portfolio_for(client.client_id)
        return client

    def portfolio_for(self, client_id: int) -> Portfolio:
        """Get the portfolio of a registered client."""
        self.clients.get_client(client_id)
        return self.portfolios.find_portfolio_for_client(client_id)


# Global application context
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
