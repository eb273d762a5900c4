"""Price reader protocol."""

from typing import Optional, Protocol


class PriceReader(Protocol):
    """
    Protocol for market price sources.

    The ledger never owns a price reader; callers pass one into each
    valuation or market order.
    """

    def get_price_for(self, security_code: str) -> Optional[int]:
        """
        Return the current unit price of a security in cents.

        Unknown codes may return None or raise; the ledger turns None into
        PriceUnavailableError and lets exceptions propagate.
        """
        ...
