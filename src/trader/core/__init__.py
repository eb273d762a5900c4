"""Core utilities and shared functionality."""

from trader.core.money import (
    cents_to_dollars,
    dollars_to_cents,
    CENTS_PER_DOLLAR,
)
from trader.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    InsufficientFundsError,
    PriceUnavailableError,
)

__all__ = [
    "cents_to_dollars",
    "dollars_to_cents",
    "CENTS_PER_DOLLAR",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "InsufficientFundsError",
    "PriceUnavailableError",
]
