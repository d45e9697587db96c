"""Domain normalization helpers."""

from collections.abc import Mapping
from datetime import date, datetime

UNCATEGORIZED = "Uncategorized"


def read_field(record, field: str):
    """Return ``field`` from a dataclass-like record or a mapping."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def normalize_category(category: str | None) -> str:
    """Normalize category labels used for grouping.

    Args:
        category: Raw category or type tag from a record.

    Returns:
        str: Trimmed label, or ``Uncategorized`` when blank.
    """
    if category is None:
        return UNCATEGORIZED
    cleaned = str(category).strip()
    return cleaned if cleaned else UNCATEGORIZED


def normalize_date(value) -> date | None:
    """Normalize record dates.

    Args:
        value: ``date``, ``datetime`` or ISO ``YYYY-MM-DD`` string.

    Returns:
        date | None: Parsed date, or None when the value is not a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


__all__ = [
    "read_field",
    "normalize_category",
    "normalize_date",
    "UNCATEGORIZED",
]
