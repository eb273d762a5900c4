"""Stub price reader for offline/testing use."""

from typing import Mapping, Optional


# Deterministic fake prices for common symbols, in cents
_STUB_PRICES_IN_CENTS: dict[str, int] = {
    "AAPL": 18550,
    "GOOGL": 14275,
    "MSFT": 37825,
    "AMZN": 17850,
    "TSLA": 24875,
    "NVDA": 48525,
    "META": 50550,
    "SPY": 48525,
    "QQQ": 41875,
    "VTI": 25230,
}


class StubPriceReader:
    """
    Stub price reader with deterministic fake prices for offline operation.

    Uses predefined prices for common symbols; unknown symbols have no price.
    """

    def __init__(self, prices_in_cents: Optional[Mapping[str, int]] = None):
        """Initialize with optional prices that extend or override the defaults."""
        self._prices = dict(_STUB_PRICES_IN_CENTS)
        if prices_in_cents:
            self._prices.update({code.upper(): price for code, price in prices_in_cents.items()})

    def get_price_for(self, security_code: str) -> Optional[int]:
        """Return the stub price for a symbol, or None if unknown."""
        return self._prices.get(security_code.upper())

    def set_price(self, security_code: str, price_in_cents: int) -> None:
        """Move the quoted price of a symbol."""
        self._prices[security_code.upper()] = price_in_cents
