"""Summary statistics over daily expenses."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.models import (
    CategoryStatistic,
    ExpenseStatistics,
    MonthlyTotal,
)
from src.domain.services.amounts import parse_amount
from src.domain.services.normalization import (
    normalize_category,
    normalize_date,
    read_field,
)
from src.utils.decimal_utils import ZERO


def trend_window_start(today: date, months: int) -> date:
    """Return the first day of the month ``months - 1`` months before today.

    Raises:
        ValueError: If ``months`` is lower than 1.
    """
    if months < 1:
        raise ValueError("months must be at least 1")
    index = today.year * 12 + (today.month - 1) - (months - 1)
    year, month_index = divmod(index, 12)
    return date(year, month_index + 1, 1)


def compute_expense_statistics(
    expenses: Iterable,
    today: date,
    months: int = 6,
) -> ExpenseStatistics:
    """Compute counts, totals and a monthly trend for daily expenses.

    Args:
        expenses: Daily expense records (``amount``, ``category``, ``date``).
        today: Reference date closing the monthly trend window.
        months: Number of calendar months in the trend, current included.

    Returns:
        ExpenseStatistics: Totals, per-category figures sorted by total
        descending, and month totals in ascending month order.
    """
    window_start = trend_window_start(today, months)
    counts: dict[str, int] = {}
    category_totals: dict[str, Decimal] = {}
    month_totals: dict[str, Decimal] = {}
    total_amount = ZERO
    expense_count = 0

    for expense in expenses:
        expense_count += 1
        amount = parse_amount(read_field(expense, "amount"))
        total_amount += amount

        category = normalize_category(read_field(expense, "category"))
        counts[category] = counts.get(category, 0) + 1
        category_totals[category] = (
            category_totals.get(category, ZERO) + amount
        )

        spent_on = normalize_date(read_field(expense, "date"))
        if spent_on is None or spent_on < window_start:
            continue
        month_key = f"{spent_on.year:04d}-{spent_on.month:02d}"
        month_totals[month_key] = month_totals.get(month_key, ZERO) + amount

    categories = sorted(
        (
            CategoryStatistic(
                category=category,
                count=counts[category],
                total=total,
            )
            for category, total in category_totals.items()
        ),
        key=lambda item: item.total,
        reverse=True,
    )
    monthly_trend = [
        MonthlyTotal(month=month, total=month_totals[month])
        for month in sorted(month_totals)
    ]
    return ExpenseStatistics(
        expense_count=expense_count,
        total_amount=total_amount,
        categories=categories,
        monthly_trend=monthly_trend,
    )


__all__ = ["compute_expense_statistics", "trend_window_start"]
