"""Application use cases package."""

from .get_budget_overview import GetBudgetOverviewUseCase, BudgetOverview
from .get_bill_reminders import GetBillRemindersUseCase, BillReminder
from .get_budget_recommendation import (
    GetBudgetRecommendationUseCase,
    BudgetRecommendation,
)
from .get_category_breakdown import (
    GetCategoryBreakdownUseCase,
    BreakdownSource,
    CategoryBreakdown,
    CategoryAmount,
)
from .get_expense_statistics import (
    GetExpenseStatisticsUseCase,
    ExpenseStatistics,
)
from .get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
    NetWorthSummary,
)
from .get_surplus_summary import (
    GetSurplusSummaryUseCase,
    ExpenseSource,
    SurplusSummary,
)
from .manage_entries import (
    DeleteEntryUseCase,
    SaveEntryResult,
    SaveEntryUseCase,
    resolve_entry_kind,
)
from .seed_sample_data import SeedSampleDataResult, SeedSampleDataUseCase

__all__ = [
    "GetNetWorthSummaryUseCase",
    "NetWorthSummary",
    "GetSurplusSummaryUseCase",
    "ExpenseSource",
    "SurplusSummary",
    "GetCategoryBreakdownUseCase",
    "BreakdownSource",
    "CategoryBreakdown",
    "CategoryAmount",
    "GetBudgetOverviewUseCase",
    "BudgetOverview",
    "GetExpenseStatisticsUseCase",
    "ExpenseStatistics",
    "GetBudgetRecommendationUseCase",
    "BudgetRecommendation",
    "GetBillRemindersUseCase",
    "BillReminder",
    "SaveEntryUseCase",
    "SaveEntryResult",
    "DeleteEntryUseCase",
    "resolve_entry_kind",
    "SeedSampleDataUseCase",
    "SeedSampleDataResult",
]
