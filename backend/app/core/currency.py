"""Conversion between decimal currency amounts and integer minor units."""

from decimal import ROUND_HALF_EVEN, Decimal

MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: Decimal | int | float) -> int:
    """Convert a validated decimal amount (``12.50``) into cents (``1250``).

    Float input goes through ``str`` so that ``19.99`` is read as written
    rather than as its binary approximation.
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return int((value * MINOR_UNITS_PER_MAJOR).to_integral_value(rounding=ROUND_HALF_EVEN))
