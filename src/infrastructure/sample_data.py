"""Sample portfolio used to populate an empty ledger."""

from datetime import date
from decimal import Decimal

from src.domain.models import (
    Asset,
    DailyExpense,
    IncomeEntry,
    LedgerEntry,
    Liability,
    LiabilityStatus,
)
from src.domain.policies import STANDARD_THRESHOLDS, BudgetThresholds
from src.domain.services.finance import make_budget_category


def build_sample_entries(
    thresholds: BudgetThresholds = STANDARD_THRESHOLDS,
) -> list[LedgerEntry]:
    """Return a fresh sample portfolio with new entry ids.

    Args:
        thresholds: Policy used to derive budget category status.

    Returns:
        list[LedgerEntry]: Assets, liabilities, budget categories, incomes
        and daily expenses, in that order.
    """
    assets = [
        Asset("Cash Reserve", Decimal("15000"), "Cash", date(2025, 4, 20),
              change=Decimal("1200")),
        Asset("Stock Portfolio", Decimal("42000"), "Stocks",
              date(2025, 4, 22), change=Decimal("3200")),
        Asset("Retirement Account", Decimal("78000"), "Retirement",
              date(2025, 4, 15), change=Decimal("5000")),
        Asset("Real Estate Property", Decimal("350000"), "Real Estate",
              date(2025, 1, 10), change=Decimal("12000")),
    ]
    liabilities = [
        Liability("Mortgage", Decimal("245000"), "Secured", Decimal("4.5"),
                  Decimal("1850"), date(2025, 5, 10)),
        Liability("Car Loan", Decimal("18500"), "Secured", Decimal("3.9"),
                  Decimal("450"), date(2025, 5, 15)),
        Liability("Credit Card", Decimal("3200"), "Unsecured",
                  Decimal("18.99"), Decimal("200"), date(2025, 5, 5),
                  status=LiabilityStatus.WARNING),
    ]
    budget = [
        make_budget_category(title, budgeted, spent, thresholds)
        for title, budgeted, spent in (
            ("Housing", "2000", "1950"),
            ("Food", "600", "630"),
            ("Transportation", "400", "380"),
            ("Entertainment", "300", "350"),
            ("Utilities", "250", "235"),
        )
    ]
    incomes = [
        IncomeEntry("Salary", Decimal("5500"), "Monthly net salary"),
        IncomeEntry("Freelance Work", Decimal("1200"),
                    "Web development projects"),
        IncomeEntry("Dividends", Decimal("320"), "Quarterly stock dividends"),
    ]
    daily_expenses = [
        DailyExpense("Grocery Shopping", Decimal("125.50"), "Groceries",
                     date(2025, 5, 12), "Weekly groceries"),
        DailyExpense("Dinner with friends", Decimal("78.25"), "Dining",
                     date(2025, 5, 13), "Italian restaurant"),
        DailyExpense("Gas", Decimal("45.00"), "Transportation",
                     date(2025, 5, 14)),
        DailyExpense("Netflix Subscription", Decimal("15.99"),
                     "Entertainment", date(2025, 5, 10)),
        DailyExpense("Coffee shop", Decimal("5.75"), "Dining",
                     date(2025, 5, 15)),
        DailyExpense("Pharmacy", Decimal("28.50"), "Health",
                     date(2025, 5, 11)),
        DailyExpense("Online shopping", Decimal("67.30"), "Shopping",
                     date(2025, 5, 9)),
        DailyExpense("Electric bill", Decimal("95.40"), "Utilities",
                     date(2025, 5, 8)),
    ]
    return [*assets, *liabilities, *budget, *incomes, *daily_expenses]


__all__ = ["build_sample_entries"]
