"""Heuristic weekly budget recommendations from expense history.

The recommender looks at how much was spent per ISO week and per category,
estimates short-term trends by comparing the older and newer halves of the
latest values, and scales averages by a fixed seasonality table. With fewer
than ``MIN_HISTORY`` expenses it falls back to a starter budget.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.constants import COMMON_EXPENSE_CATEGORIES
from src.domain.models import (
    BudgetRecommendation,
    RecommendedCategory,
    SpendingComparison,
)
from src.domain.services.amounts import parse_amount
from src.domain.services.normalization import (
    normalize_category,
    normalize_date,
    read_field,
)
from src.utils.decimal_utils import ZERO, HUNDRED, round_half_up

MIN_HISTORY = 5
MIN_TREND_POINTS = 3
TREND_WINDOW = 5
WEEKLY_TREND_WEEKS = 6
TREND_CLAMP = Decimal("0.3")
STARTER_WEEKLY_FLOOR = 500
STARTER_EXPENSES_PER_WEEK = 10
STARTER_MIN_CATEGORIES = 3
STARTER_COMMON_SHARE = 15

# Sunday first, matching calendar day-of-week numbering.
DAY_OF_WEEK_FACTORS = tuple(
    Decimal(value) for value in ("1.1", "0.9", "0.8", "0.9", "1.0", "1.3", "1.2")
)
MONTH_FACTORS = tuple(
    Decimal(value)
    for value in (
        "1.2", "0.9", "0.9", "1.0", "1.0", "1.1",
        "1.3", "1.1", "1.0", "1.0", "1.1", "1.5",
    )
)


@dataclass(frozen=True)
class _Spend:
    amount: Decimal
    category: str
    spent_on: date | None


def _collect(expenses: Iterable) -> list[_Spend]:
    spends = [
        _Spend(
            amount=parse_amount(read_field(expense, "amount")),
            category=normalize_category(read_field(expense, "category")),
            spent_on=normalize_date(read_field(expense, "date")),
        )
        for expense in expenses
    ]
    # Undated expenses sort first so dated history stays chronological.
    return sorted(spends, key=lambda spend: spend.spent_on or date.min)


def _mean(values: list[Decimal]) -> Decimal:
    return sum(values, ZERO) / len(values) if values else ZERO


def calculate_trend(values: list[Decimal]) -> Decimal:
    """Return a clamped relative trend over the latest values.

    The newest ``TREND_WINDOW`` values are split in two halves; the trend is
    the relative change from the older half's mean to the newer half's,
    clamped to ``±TREND_CLAMP``. Fewer than three values give zero.
    """
    if len(values) < MIN_TREND_POINTS:
        return ZERO
    recent = values[-TREND_WINDOW:]
    midpoint = len(recent) // 2
    first_avg = _mean(recent[:midpoint])
    second_avg = _mean(recent[midpoint:])
    trend = (second_avg - first_avg) / (first_avg or Decimal("1"))
    return max(-TREND_CLAMP, min(TREND_CLAMP, trend))


def seasonal_factor(today: date) -> Decimal:
    """Return the mean of the day-of-week and month factors for ``today``."""
    day_factor = DAY_OF_WEEK_FACTORS[(today.weekday() + 1) % 7]
    month_factor = MONTH_FACTORS[today.month - 1]
    return (day_factor + month_factor) / 2


def weekly_totals(spends: list[_Spend]) -> list[Decimal]:
    """Return spending per ISO week, oldest week first."""
    totals: dict[tuple[int, int], Decimal] = {}
    for spend in spends:
        if spend.spent_on is None:
            continue
        iso_year, iso_week, _ = spend.spent_on.isocalendar()
        key = (iso_year, iso_week)
        totals[key] = totals.get(key, ZERO) + spend.amount
    return [totals[key] for key in sorted(totals)]


def recommend_budget(
    expenses: Iterable,
    today: date,
) -> BudgetRecommendation:
    """Suggest next week's budget from past daily expenses.

    Args:
        expenses: Records exposing ``amount``, ``category`` and ``date``.
        today: Reference date used for seasonality.

    Returns:
        BudgetRecommendation: Forecast, per-category suggestions sorted by
        amount descending, savings target and rationale.
    """
    spends = _collect(expenses)
    if len(spends) < MIN_HISTORY:
        return _starter_recommendation(spends)

    weeks = weekly_totals(spends)
    weekly_trend = (
        calculate_trend(weeks[-WEEKLY_TREND_WEEKS:])
        if len(weeks) >= MIN_TREND_POINTS
        else ZERO
    )

    by_category: dict[str, list[Decimal]] = {}
    for spend in spends:
        by_category.setdefault(spend.category.lower(), []).append(
            spend.amount
        )
    averages = {
        category: _mean(amounts) for category, amounts in by_category.items()
    }
    trend_factors = {
        category: (
            Decimal("1") + calculate_trend(amounts)
            if len(amounts) >= MIN_TREND_POINTS
            else Decimal("1")
        )
        for category, amounts in by_category.items()
    }
    total_average = sum(averages.values(), ZERO)

    seasonality = seasonal_factor(today)
    forecast = _mean(weeks) * (Decimal("1") + weekly_trend) * seasonality

    categories: list[RecommendedCategory] = []
    for category, average in averages.items():
        factor = trend_factors[category]
        share = average / total_average * HUNDRED if total_average > 0 else ZERO
        comparison = SpendingComparison.SIMILAR
        if factor > Decimal("1.1"):
            comparison = SpendingComparison.HIGHER
        if factor < Decimal("0.9"):
            comparison = SpendingComparison.LOWER
        warning = None
        if factor > Decimal("1.2") and share > 15:
            warning = f"Spending in {category} is trending up significantly"
        categories.append(
            RecommendedCategory(
                category=category,
                amount=round_half_up(average * factor * seasonality),
                percent_of_total=round_half_up(share),
                compared_to_average=comparison,
                warning=warning,
            )
        )
    categories.sort(key=lambda item: item.amount, reverse=True)

    savings_percent = 20 if weekly_trend > 0 else 10
    rationale = [f"Based on your past {len(weeks)} weeks of spending data"]
    if weekly_trend > Decimal("0.05"):
        rationale.append(
            "Your spending is trending upward "
            f"({round_half_up(weekly_trend * HUNDRED)}% increase)"
        )
    elif weekly_trend < Decimal("-0.05"):
        rationale.append(
            "Your spending is trending downward "
            f"({round_half_up(abs(weekly_trend) * HUNDRED)}% decrease)"
        )
    else:
        rationale.append("Your spending has been relatively stable")
    high_categories = [
        item.category
        for item in categories
        if item.compared_to_average is SpendingComparison.HIGHER
        and item.percent_of_total > 10
    ]
    if high_categories:
        rationale.append(
            f"You're spending more than usual on: {', '.join(high_categories)}"
        )

    confidence = min(
        100,
        round_half_up(
            Decimal(len(spends)) / 30 * 40
            + Decimal(len(weeks)) / 8 * 40
            + Decimal(len(averages)) / 5 * 20
        ),
    )
    weekly_total = round_half_up(forecast)
    return BudgetRecommendation(
        weekly_total=weekly_total,
        next_week_forecast=weekly_total,
        savings_recommendation=round_half_up(
            forecast * savings_percent / HUNDRED
        ),
        confidence_score=confidence,
        categories=categories,
        rationale=rationale,
    )


def _starter_recommendation(spends: list[_Spend]) -> BudgetRecommendation:
    total_spent = sum((spend.amount for spend in spends), ZERO)
    per_expense = total_spent / max(1, len(spends))
    weekly_total = max(
        STARTER_WEEKLY_FLOOR,
        round_half_up(per_expense * STARTER_EXPENSES_PER_WEEK),
    )
    divisor = max(Decimal("1"), total_spent)

    category_totals: dict[str, Decimal] = {}
    for spend in spends:
        category_totals[spend.category] = (
            category_totals.get(spend.category, ZERO) + spend.amount
        )

    categories = []
    for category, total in category_totals.items():
        share = round_half_up(total / divisor * HUNDRED)
        categories.append(
            RecommendedCategory(
                category=category,
                amount=round_half_up(Decimal(weekly_total) * share / HUNDRED),
                percent_of_total=share,
            )
        )
    if len(categories) < STARTER_MIN_CATEGORIES:
        for category in COMMON_EXPENSE_CATEGORIES:
            if category in category_totals:
                continue
            categories.append(
                RecommendedCategory(
                    category=category,
                    amount=round_half_up(
                        Decimal(weekly_total) * STARTER_COMMON_SHARE / HUNDRED
                    ),
                    percent_of_total=STARTER_COMMON_SHARE,
                )
            )
    categories.sort(key=lambda item: item.amount, reverse=True)

    return BudgetRecommendation(
        weekly_total=weekly_total,
        next_week_forecast=weekly_total,
        savings_recommendation=round_half_up(
            Decimal(weekly_total) * 10 / HUNDRED
        ),
        confidence_score=min(30, len(spends) * 5),
        categories=categories,
        rationale=[
            f"Based on limited data ({len(spends)} expense entries)",
            "Add more manual expenses for improved recommendations",
            "This is a starter budget to help you begin tracking",
        ],
    )


__all__ = [
    "recommend_budget",
    "calculate_trend",
    "seasonal_factor",
    "weekly_totals",
    "MIN_HISTORY",
]
