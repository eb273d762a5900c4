"""Price providers module."""

from trader.providers.price_reader import PriceReader
from trader.providers.stub_provider import StubPriceReader

__all__ = [
    "PriceReader",
    "StubPriceReader",
]
