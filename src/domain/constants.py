"""Domain constants for personal finance tracking."""

DEFAULT_CURRENCY_CODE = "INR"
DEFAULT_CURRENCY_SYMBOL = "₹"

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

COMMON_EXPENSE_CATEGORIES = (
    "Groceries",
    "Transportation",
    "Dining",
    "Entertainment",
    "Shopping",
)


__all__ = [
    "DEFAULT_CURRENCY_CODE",
    "DEFAULT_CURRENCY_SYMBOL",
    "CURRENCY_SYMBOLS",
    "COMMON_EXPENSE_CATEGORIES",
]
