"""Domain package for business rules and core models."""

from .constants import DEFAULT_CURRENCY_CODE, DEFAULT_CURRENCY_SYMBOL
from .exceptions import (
    DuplicateRecordError,
    FinanceError,
    RecordNotFoundError,
    UnknownEntryKindError,
)
from .models import (
    Asset,
    BudgetCategory,
    BudgetState,
    CategoryBreakdown,
    DailyExpense,
    EntryKind,
    IncomeEntry,
    Liability,
    NetWorthSummary,
    SurplusSummary,
)
from .policies import BudgetThresholds, STANDARD_THRESHOLDS
from .services import (
    budget_status,
    format_amount,
    group_by_category,
    net_worth,
    parse_amount,
    sum_amounts,
    surplus,
)

__all__ = [
    "Asset",
    "Liability",
    "BudgetCategory",
    "BudgetState",
    "IncomeEntry",
    "DailyExpense",
    "EntryKind",
    "NetWorthSummary",
    "SurplusSummary",
    "CategoryBreakdown",
    "BudgetThresholds",
    "STANDARD_THRESHOLDS",
    "DEFAULT_CURRENCY_CODE",
    "DEFAULT_CURRENCY_SYMBOL",
    "FinanceError",
    "UnknownEntryKindError",
    "RecordNotFoundError",
    "DuplicateRecordError",
    "parse_amount",
    "format_amount",
    "sum_amounts",
    "net_worth",
    "surplus",
    "group_by_category",
    "budget_status",
]
