"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def percent_of(part: Decimal, whole: Decimal) -> Decimal:
    """Return ``part / whole * 100``, or zero when ``whole`` is zero."""
    if not whole:
        return ZERO
    try:
        return part / whole * HUNDRED
    except InvalidOperation:
        return ZERO


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))


def round_money(value: Decimal, places: int = 2) -> Decimal:
    """Round to ``places`` decimals, halves away from zero.

    The working precision grows with the value, so amounts with more digits
    than the default context still round instead of raising.
    """
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(quantum, rounding=ROUND_HALF_UP)


__all__ = ["percent_of", "round_half_up", "round_money", "ZERO", "HUNDRED"]
