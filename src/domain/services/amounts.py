"""Parsing and display helpers for monetary amounts."""

from decimal import Decimal, InvalidOperation
import math
import re

from src.domain.constants import DEFAULT_CURRENCY_SYMBOL
from src.utils.decimal_utils import ZERO, round_money

_NON_NUMERIC = re.compile(r"[^0-9.\-]")

# Amounts outside 1e-100 .. 1e100 in magnitude are treated as unparseable;
# within it, sums and ratios stay far from the Decimal exponent limits.
AMOUNT_EXPONENT_LIMIT = 100


def _bounded(value: Decimal) -> Decimal:
    if not value.is_finite():
        return ZERO
    if value and abs(value.adjusted()) > AMOUNT_EXPONENT_LIMIT:
        return ZERO
    return value


def parse_amount(raw) -> Decimal:
    """Parse a possibly formatted amount into a Decimal.

    Every character other than digits, the decimal point and the minus sign
    is dropped, so ``"₹42,000"`` and ``"$1,250.00"`` both parse. Anything
    that still is not a finite number, or whose magnitude lies outside
    ``10**±AMOUNT_EXPONENT_LIMIT``, yields zero; this function never raises.

    Args:
        raw: String, number or None.

    Returns:
        Decimal: Parsed value, or zero when unparseable.
    """
    if raw is None or isinstance(raw, bool):
        return ZERO
    if isinstance(raw, Decimal):
        return _bounded(raw)
    if isinstance(raw, int):
        return _bounded(Decimal(raw))
    if isinstance(raw, float):
        return _bounded(Decimal(str(raw))) if math.isfinite(raw) else ZERO

    cleaned = _NON_NUMERIC.sub("", str(raw))
    if not cleaned:
        return ZERO
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return ZERO
    return _bounded(value)


def format_amount(
    value,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
    places: int = 2,
) -> str:
    """Format an amount for display, e.g. ``₹42,000.00``.

    Args:
        value: Amount to format; strings are parsed first.
        symbol: Currency symbol prefix.
        places: Number of decimal places.

    Returns:
        str: Formatted amount with thousands separators.
    """
    amount = parse_amount(value)
    rounded = round_money(amount, places)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.{places}f}"


__all__ = ["parse_amount", "format_amount", "AMOUNT_EXPONENT_LIMIT"]
