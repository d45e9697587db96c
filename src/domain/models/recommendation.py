"""Domain models for budget recommendations."""

from dataclasses import dataclass, field
from enum import Enum


class SpendingComparison(str, Enum):
    HIGHER = "higher"
    LOWER = "lower"
    SIMILAR = "similar"


@dataclass(frozen=True)
class RecommendedCategory:
    """Suggested weekly spending for one category.

    Attributes:
        category: Category name.
        amount: Suggested weekly amount, rounded to whole units.
        percent_of_total: Share of typical spending, rounded.
        compared_to_average: Direction of the recent category trend.
        warning: Optional message when the category is trending up sharply.
    """

    category: str
    amount: int
    percent_of_total: int
    compared_to_average: SpendingComparison = SpendingComparison.SIMILAR
    warning: str | None = None


@dataclass(frozen=True)
class BudgetRecommendation:
    """Weekly budget suggestion derived from expense history."""

    weekly_total: int
    next_week_forecast: int
    savings_recommendation: int
    confidence_score: int
    categories: list[RecommendedCategory] = field(default_factory=list)
    rationale: list[str] = field(default_factory=list)


__all__ = [
    "SpendingComparison",
    "RecommendedCategory",
    "BudgetRecommendation",
]
