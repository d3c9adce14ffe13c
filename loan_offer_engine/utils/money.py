"""Currency rounding utilities"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from numbers import Real

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value: float | int | Decimal) -> Decimal:
    """Convert a number to Decimal through its shortest repr (0.1 -> Decimal('0.1'))"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_currency(value: float | int | Decimal) -> Decimal:
    """
    Round to whole cents, halves away from zero.

    Precision grows with the magnitude, so any finite amount can be rounded;
    infinities and NaN raise decimal.InvalidOperation.
    """
    amount = to_decimal(value)
    with localcontext() as ctx:
        if amount.is_finite():
            ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def is_number(value: object) -> bool:
    """True for finite real numbers; bools and numeric strings do not count"""
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return False
    return math.isfinite(value)


def format_amount(value: float | int) -> str:
    """Render a bound for messages: 10000.0 -> '10000', 5.5 -> '5.5'"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
