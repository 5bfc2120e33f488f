"""
Currency helpers.

Amounts come in as int, str, float or Decimal and are normalised through
``Decimal(str(value))``. Balances accumulate as exact fractions and are
handed back as full-precision Decimals; rounding to cents only happens
when a value leaves the system (JSON, CSV).
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from fractions import Fraction
from typing import Union

Number = Union[int, float, str, Decimal, Fraction]

# Balances and transfers within this tolerance of zero are settled.
EPSILON = Decimal("0.01")

CENTS = Decimal("0.01")


def to_decimal(value: Number) -> Decimal:
    """Normalise a user supplied amount to Decimal."""
    if isinstance(value, Fraction):
        return fraction_to_decimal(value)
    if isinstance(value, bool):
        raise ValueError(f"Not a currency amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, TypeError):
            raise ValueError(f"Not a currency amount: {value!r}")
    if not amount.is_finite():
        raise ValueError(f"Not a currency amount: {value!r}")
    return amount


def fraction_to_decimal(value: Fraction) -> Decimal:
    return Decimal(value.numerator) / Decimal(value.denominator)


def round_currency(value: Number) -> Decimal:
    """Round to cents, half up."""
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
