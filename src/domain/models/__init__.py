"""Domain models package."""

from .entries import (
    ENTRY_TYPES,
    Asset,
    BudgetCategory,
    BudgetState,
    DailyExpense,
    EntryKind,
    IncomeEntry,
    LedgerEntry,
    Liability,
    LiabilityStatus,
    Trend,
    kind_of,
    new_entry_id,
)
from .finance import (
    BudgetOverview,
    BudgetStatus,
    CategoryAmount,
    CategoryBreakdown,
    CategoryStatistic,
    ExpenseStatistics,
    MonthlyTotal,
    NetWorthSummary,
    SurplusSummary,
)
from .recommendation import (
    BudgetRecommendation,
    RecommendedCategory,
    SpendingComparison,
)
from .tools import BillReminder, BillStatus, GrowthPoint, InterestResult

__all__ = [
    "Asset",
    "Liability",
    "BudgetCategory",
    "IncomeEntry",
    "DailyExpense",
    "LedgerEntry",
    "EntryKind",
    "Trend",
    "LiabilityStatus",
    "BudgetState",
    "ENTRY_TYPES",
    "kind_of",
    "new_entry_id",
    "NetWorthSummary",
    "SurplusSummary",
    "CategoryAmount",
    "CategoryBreakdown",
    "BudgetStatus",
    "BudgetOverview",
    "CategoryStatistic",
    "MonthlyTotal",
    "ExpenseStatistics",
    "BudgetRecommendation",
    "RecommendedCategory",
    "SpendingComparison",
    "BillStatus",
    "BillReminder",
    "GrowthPoint",
    "InterestResult",
]
