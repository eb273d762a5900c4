"""
Integration tests for onboarding and trading through AppContext.

Tests cover:
- Registering a client opens a seeded portfolio
- Trading at market prices through the context's price reader
- Global context accessors
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from trader.app_context import AppContext, get_app_context, set_app_context
from trader.config.settings import Settings
from trader.core.exceptions import InsufficientFundsError, NotFoundError
from trader.domain.models import Trade, CASH_ACCOUNT
from trader.providers import StubPriceReader


class TestOnboarding:
    """Tests for registering clients."""

    def test_registered_client_gets_portfolio(self, app_context: AppContext):
        """
        GIVEN a fresh application context
        WHEN Sarah-Jane registers
        THEN she has a portfolio holding the $1,000 seed deposit
        """
        client = app_context.register_client("Sarah-Jane", "Smith")

        portfolio = app_context.portfolio_for(client.client_id)
        assert portfolio.client_id == client.client_id
        assert portfolio.get_cash() == 1000.0
        assert len(portfolio.get_history()) == 1

    def test_each_client_has_own_portfolio(self, app_context: AppContext):
        sarah = app_context.register_client("Sarah-Jane", "Smith")
        joe = app_context.register_client("Joe", "Smith")

        sarahs = app_context.portfolio_for(sarah.client_id)
        joes = app_context.portfolio_for(joe.client_id)
        sarahs.place_order(Trade.buy("AAPL", 10, 5000))

        assert sarahs.portfolio_id != joes.portfolio_id
        assert sarahs.get_cash() == Decimal("500.00")
        assert joes.get_cash() == Decimal("1000.00")
        assert len(app_context.clients.find_all()) == 2

    def test_concurrent_registrations_each_get_a_portfolio(self, app_context: AppContext):
        """
        GIVEN a fresh application context
        WHEN 16 clients register from different threads at once
        THEN every client is stored and owns exactly one portfolio
        """
        registrations = 16
        barrier = threading.Barrier(registrations)

        def register(index: int):
            barrier.wait()
            return app_context.register_client(f"Client{index}", "Smith")

        with ThreadPoolExecutor(max_workers=registrations) as executor:
            clients = list(executor.map(register, range(registrations)))

        assert sorted(c.client_id for c in clients) == list(range(1, registrations + 1))
        assert len(app_context.clients.find_all()) == registrations
        assert len(app_context.portfolios.find_all()) == registrations
        for client in clients:
            assert app_context.portfolio_for(client.client_id).client_id == client.client_id

    def test_unknown_client_has_no_portfolio(self, app_context: AppContext):
        with pytest.raises(NotFoundError):
            app_context.portfolio_for(99)

    def test_settings_drive_seed_deposit(self):
        context = AppContext(settings=Settings(initial_deposit_in_dollars=200))

        client = context.register_client("Joe", "Smith")

        assert context.portfolio_for(client.client_id).get_cash() == Decimal("200.00")


class TestTradingThroughContext:
    """Tests for market orders and valuation with the context's price reader."""

    def test_market_buy_and_valuation(self, app_context: AppContext):
        client = app_context.register_client("Sarah-Jane", "Smith")
        portfolio = app_context.portfolio_for(client.client_id)
        placement = portfolio.place_order_using_prices_from(app_context.price_reader)

        placement.for_trade(Trade.buy("AAPL", 10))
        with pytest.raises(InsufficientFundsError):
            placement.for_trade(Trade.buy("AAPL", 11))

        positions = portfolio.calculate_positions_using(app_context.price_reader)
        assert positions["AAPL"].quantity == 10
        assert positions[CASH_ACCOUNT].total_value == Decimal("500.00")
        assert portfolio.calculate_profit_using(app_context.price_reader) == Decimal("0")

    def test_stub_price_reader_is_default(self):
        context = AppContext(settings=Settings())

        assert isinstance(context.price_reader, StubPriceReader)
        assert context.price_reader.get_price_for("aapl") == 18550
        assert context.price_reader.get_price_for("UNKNOWN") is None


class TestGlobalContext:
    """Tests for the module-level context accessors."""

    def test_get_app_context_is_singleton(self):
        assert get_app_context() is get_app_context()

    def test_set_app_context(self, app_context: AppContext):
        set_app_context(app_context)

        assert get_app_context() is app_context


class TestStubPrices:
    """Tests for valuing portfolios with the stub price reader."""

    def test_moving_a_stub_price_moves_profit(self):
        """
        GIVEN 10 AAPL bought at the stub quote of $185.50
        WHEN the stub quote moves to $190.00
        THEN the portfolio shows a $45.00 profit
        """
        reader = StubPriceReader()
        context = AppContext(settings=Settings(initial_deposit_in_dollars=5000), price_reader=reader)
        client = context.register_client("Sarah-Jane", "Smith")
        portfolio = context.portfolio_for(client.client_id)
        portfolio.place_order_using_prices_from(reader).for_trade(Trade.buy("AAPL", 10))

        reader.set_price("aapl", 19000)

        assert portfolio.calculate_profit_using(reader) == Decimal("45.00")

    def test_prices_can_be_overridden_at_construction(self):
        reader = StubPriceReader({"xyz": 1234, "AAPL": 100})

        assert reader.get_price_for("XYZ") == 1234
        assert reader.get_price_for("AAPL") == 100
