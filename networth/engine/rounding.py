"""Decimal rounding used for presented values."""

from decimal import ROUND_HALF_EVEN, Decimal


CENTS = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round to two decimal places (banker's rounding)."""
    return value.quantize(CENTS, rounding=ROUND_HALF_EVEN)
