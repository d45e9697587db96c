"""Domain services package."""

from .amounts import format_amount, parse_amount
from .finance import (
    budget_status,
    compute_category_breakdown,
    compute_net_worth_summary,
    compute_surplus_summary,
    group_by_category,
    make_budget_category,
    net_worth,
    sum_amounts,
    summarize_budget,
    surplus,
    total_assets,
    total_budget_spent,
    total_daily_expenses,
    total_income,
    total_liabilities,
    with_budget_amounts,
)
from .interest import compound_interest, simple_interest
from .normalization import normalize_category, normalize_date, read_field
from .recommender import recommend_budget
from .reminders import bill_status, build_bill_reminders, filter_reminders
from .statistics import compute_expense_statistics
from .validation import validate_amount_sign

__all__ = [
    "parse_amount",
    "format_amount",
    "sum_amounts",
    "total_assets",
    "total_liabilities",
    "total_income",
    "total_budget_spent",
    "total_daily_expenses",
    "net_worth",
    "surplus",
    "group_by_category",
    "compute_category_breakdown",
    "budget_status",
    "make_budget_category",
    "with_budget_amounts",
    "compute_net_worth_summary",
    "compute_surplus_summary",
    "summarize_budget",
    "compute_expense_statistics",
    "recommend_budget",
    "normalize_category",
    "normalize_date",
    "read_field",
    "validate_amount_sign",
    "simple_interest",
    "compound_interest",
    "bill_status",
    "build_bill_reminders",
    "filter_reminders",
]
