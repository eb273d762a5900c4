"""Service layer - business logic orchestration."""

from trader.services.positions import Positions
from trader.services.portfolio import Portfolio, OrderPlacement
from trader.services.client_directory import ClientDirectory
from trader.services.portfolio_directory import PortfolioDirectory

__all__ = [
    "Positions",
    "Portfolio",
    "OrderPlacement",
    "ClientDirectory",
    "PortfolioDirectory",
]
