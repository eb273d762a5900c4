"""Conversions between integer cents and Decimal dollars."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENTS_PER_DOLLAR = 100
_TWO_PLACES = Decimal("0.01")


def cents_to_dollars(cents: int) -> Decimal:
    """Return an amount in cents as Decimal dollars with two decimal places."""
    return (Decimal(cents) / CENTS_PER_DOLLAR).quantize(_TWO_PLACES)


def dollars_to_cents(dollars: Union[int, str, Decimal]) -> int:
    """
    Convert a dollar amount to whole cents.

    Floats are rejected; pass a string or Decimal for fractional amounts.
    """
    if isinstance(dollars, float):
        raise TypeError("Use a str or Decimal for dollar amounts, not float")
    amount = (Decimal(dollars) * CENTS_PER_DOLLAR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(amount)
