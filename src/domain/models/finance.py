"""Domain models for financial aggregates."""

from dataclasses import dataclass
from decimal import Decimal

from .entries import BudgetCategory, BudgetState


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset values.
        liability_total: Sum of liability amounts.
        net_worth: Assets minus liabilities.
        currency_code: Currency the figures are expressed in.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str


@dataclass(frozen=True)
class SurplusSummary:
    """Income against spending over a period."""

    income_total: Decimal
    expense_total: Decimal
    surplus: Decimal
    currency_code: str


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a given category."""

    category: str
    total: Decimal
    percent_of_total: Decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """Breakdown of amounts by category, in first-seen order."""

    currency_code: str
    grand_total: Decimal
    categories: list[CategoryAmount]


@dataclass(frozen=True)
class BudgetStatus:
    """Share of a budget already spent and its alert level."""

    percentage: int
    status: BudgetState


@dataclass(frozen=True)
class BudgetOverview:
    """Budget categories with totals across all of them."""

    categories: list[BudgetCategory]
    total_budgeted: Decimal
    total_spent: Decimal
    currency_code: str

    @property
    def remaining(self) -> Decimal:
        """Return total_budgeted minus total_spent."""
        return self.total_budgeted - self.total_spent


@dataclass(frozen=True)
class CategoryStatistic:
    """Number of expenses and their total for one category."""

    category: str
    count: int
    total: Decimal


@dataclass(frozen=True)
class MonthlyTotal:
    """Spending total for a calendar month (``YYYY-MM``)."""

    month: str
    total: Decimal


@dataclass(frozen=True)
class ExpenseStatistics:
    """Summary statistics over daily expenses."""

    expense_count: int
    total_amount: Decimal
    categories: list[CategoryStatistic]
    monthly_trend: list[MonthlyTotal]


__all__ = [
    "NetWorthSummary",
    "SurplusSummary",
    "CategoryAmount",
    "CategoryBreakdown",
    "BudgetStatus",
    "BudgetOverview",
    "CategoryStatistic",
    "MonthlyTotal",
    "ExpenseStatistics",
]
