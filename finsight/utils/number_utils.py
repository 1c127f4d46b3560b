"""Number formatting utilities for generated advice text"""

from decimal import Decimal, ROUND_HALF_UP, localcontext


def to_fixed(value: float, digits: int = 0) -> str:
    """
    Format with a fixed number of decimals, rounding halves away from zero.

    Rounds the exact binary value of the float (1.45 is stored just below
    1.45, so it formats as "1.4"). Precision grows with the magnitude so very
    large values format instead of raising.
    """
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        return str(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def plain_number(value: float) -> str:
    """Render whole numbers without a trailing '.0' (5000.0 -> '5000')"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
