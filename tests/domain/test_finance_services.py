"""Tests for the finance aggregation services."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import (
    Asset,
    BudgetCategory,
    BudgetState,
    DailyExpense,
    IncomeEntry,
    Liability,
)
from src.domain.policies import EARLY_WARNING_THRESHOLDS
from src.domain.services import finance


def _asset(title: str, value: str, asset_type: str = "Cash") -> Asset:
    return Asset(title, Decimal(value), asset_type, date(2025, 4, 20))


def _liability(title: str, amount: str) -> Liability:
    return Liability(
        title,
        Decimal(amount),
        "Secured",
        Decimal("4.5"),
        Decimal("100"),
        date(2025, 5, 10),
    )


def test_sum_amounts_of_empty_records_is_zero() -> None:
    """Summing nothing should give zero."""
    assert finance.sum_amounts([], "value") == Decimal("0")


def test_sum_amounts_reads_mappings_and_dataclasses() -> None:
    """Records may be dataclasses or plain mappings."""
    records = [_asset("Cash", "100"), {"value": "₹2,500"}, {"value": None}]

    assert finance.sum_amounts(records, "value") == Decimal("2600")


def test_net_worth_of_formatted_amounts() -> None:
    """Net worth should subtract liabilities from formatted asset values."""
    assets = [{"value": "₹425,000"}, {"value": "₹85,750"}]
    liabilities = [{"amount": "₹320,000"}]

    assert finance.net_worth(assets, liabilities) == Decimal("190750")


def test_net_worth_matches_totals() -> None:
    """Net worth should equal total assets minus total liabilities."""
    assets = [_asset("Cash", "15000"), _asset("Stocks", "42000.50")]
    liabilities = [_liability("Car Loan", "18500.25")]

    assert finance.net_worth(assets, liabilities) == (
        finance.total_assets(assets) - finance.total_liabilities(liabilities)
    )
    assert finance.net_worth([], []) == Decimal("0")


def test_surplus_uses_budget_spent_by_default() -> None:
    """Surplus should subtract the spent amount of budget categories."""
    incomes = [IncomeEntry("Salary", Decimal("5500"))]
    categories = [
        BudgetCategory("Food", Decimal("600"), Decimal("630")),
        BudgetCategory("Housing", Decimal("2000"), Decimal("1950")),
    ]

    assert finance.surplus(incomes, categories) == Decimal("2920")


def test_surplus_can_sum_daily_expense_amounts() -> None:
    """Daily expenses should be summed on their amount field."""
    incomes = [{"amount": "1000"}]
    expenses = [
        DailyExpense("Gas", Decimal("45"), "Transportation", date(2025, 5, 1))
    ]

    assert finance.surplus(incomes, expenses, "amount") == Decimal("955")


def test_group_by_category_keeps_first_seen_order() -> None:
    """Groups should appear in the order their category first occurs."""
    records = [
        {"category": "Dining", "amount": "30"},
        {"category": "Groceries", "amount": "50"},
        {"category": "Dining", "amount": "20"},
    ]

    groups = finance.group_by_category(records, "category", "amount")

    assert list(groups) == ["Dining", "Groceries"]
    assert groups["Dining"].total == Decimal("50")
    assert groups["Dining"].percent_of_total == Decimal("50")


def test_group_by_category_percentages_sum_to_hundred() -> None:
    """Shares should add up to 100 when there is a positive total."""
    records = [
        {"type": "Cash", "value": "1"},
        {"type": "Stocks", "value": "1"},
        {"type": "Property", "value": "1"},
    ]

    groups = finance.group_by_category(records, "type", "value")

    total_share = sum(item.percent_of_total for item in groups.values())
    assert float(total_share) == pytest.approx(100.0)


def test_group_by_category_zero_total_gives_zero_shares() -> None:
    """All shares should be zero when the grand total is zero."""
    records = [
        {"type": "Cash", "value": "0"},
        {"type": "Stocks", "value": "garbage"},
    ]

    groups = finance.group_by_category(records, "type", "value")

    assert all(
        item.percent_of_total == Decimal("0") for item in groups.values()
    )


def test_group_by_category_labels_blank_categories() -> None:
    """Blank or missing categories should be grouped as Uncategorized."""
    records = [{"category": " ", "amount": "5"}, {"amount": "7"}]

    groups = finance.group_by_category(records, "category", "amount")

    assert list(groups) == ["Uncategorized"]
    assert groups["Uncategorized"].total == Decimal("12")


@pytest.mark.parametrize(
    ("budgeted", "spent", "percentage", "status"),
    [
        (500, 0, 0, BudgetState.NORMAL),
        (500, 450, 90, BudgetState.WARNING),
        (500, 600, 120, BudgetState.DANGER),
        (500, 500, 100, BudgetState.DANGER),
        (200, 179, 90, BudgetState.WARNING),
        (200, 177, 89, BudgetState.NORMAL),
        (0, 100, 0, BudgetState.NORMAL),
        ("₹2,000", "₹1,950", 98, BudgetState.WARNING),
    ],
)
def test_budget_status_standard_policy(
    budgeted,
    spent,
    percentage,
    status,
) -> None:
    """The standard policy warns from 90% and flags danger from 100%."""
    result = finance.budget_status(budgeted, spent)

    assert result.percentage == percentage
    assert result.status is status


@pytest.mark.parametrize(
    ("budgeted", "spent"),
    [
        (1, 1e30),
        ("0.01", "1" + "0" * 28),
    ],
)
def test_budget_status_handles_ratios_beyond_default_precision(
    budgeted,
    spent,
) -> None:
    """Huge spent to budget ratios should still round to a percentage."""
    result = finance.budget_status(budgeted, spent)

    assert result.percentage == 10**32
    assert result.status is BudgetState.DANGER


def test_group_by_category_ignores_out_of_range_amounts() -> None:
    """An absurdly long amount string counts as zero instead of overflowing."""
    groups = finance.group_by_category(
        [
            {"c": "a", "v": "1" + "0" * 1000001},
            {"c": "b", "v": "50"},
        ],
        "c",
        "v",
    )

    assert groups["a"].total == Decimal("0")
    assert groups["b"].total == Decimal("50")
    assert groups["b"].percent_of_total == Decimal("100")


def test_sum_amounts_of_large_values_does_not_overflow() -> None:
    records = [{"v": "9" * 100}] * 3

    assert finance.sum_amounts(records, "v") > Decimal("1E+100")


def test_budget_status_early_warning_policy() -> None:
    """The early warning policy warns from 75% and flags danger from 90%."""
    warning = finance.budget_status(500, 400, EARLY_WARNING_THRESHOLDS)
    danger = finance.budget_status(500, 450, EARLY_WARNING_THRESHOLDS)

    assert warning.status is BudgetState.WARNING
    assert danger.status is BudgetState.DANGER


def test_make_budget_category_derives_fields() -> None:
    """Building a category should fill percentage and status."""
    category = finance.make_budget_category("Food", "600", "630")

    assert category.budgeted == Decimal("600")
    assert category.percentage == 105
    assert category.status is BudgetState.DANGER
    assert category.id


def test_with_budget_amounts_refreshes_derived_fields() -> None:
    """Changing amounts should recompute the derived fields."""
    category = finance.make_budget_category(
        "Transport",
        "400",
        "100",
        entry_id="abc",
    )

    updated = finance.with_budget_amounts(category, spent="380")

    assert updated.id == "abc"
    assert updated.spent == Decimal("380")
    assert updated.percentage == 95
    assert updated.status is BudgetState.WARNING
    assert category.status is BudgetState.NORMAL


def test_compute_net_worth_summary_warns_on_negative_amounts() -> None:
    """Negative asset values should be reported but still counted."""
    logger = MagicMock()
    assets = [_asset("Cash", "1000"), _asset("Odd", "-50")]
    liabilities = [_liability("Loan", "200")]

    summary = finance.compute_net_worth_summary(
        assets,
        liabilities,
        currency_code="INR",
        logger=logger,
    )

    assert summary.asset_total == Decimal("950")
    assert summary.liability_total == Decimal("200")
    assert summary.net_worth == Decimal("750")
    assert summary.currency_code == "INR"
    logger.warning.assert_called_once()
    assert "Odd" in logger.warning.call_args[0][0]


def test_compute_surplus_summary_uses_selected_field() -> None:
    """The expense field should select which amount is summed."""
    logger = MagicMock()
    incomes = [IncomeEntry("Salary", Decimal("5500"))]
    expenses = [{"amount": "125.50"}, {"amount": "74.50"}]

    summary = finance.compute_surplus_summary(
        incomes,
        expenses,
        currency_code="USD",
        logger=logger,
        expense_field="amount",
    )

    assert summary.expense_total == Decimal("200.00")
    assert summary.surplus == Decimal("5300.00")
    logger.warning.assert_not_called()


def test_summarize_budget_rederives_with_thresholds() -> None:
    """Stored statuses should be recomputed under the given policy."""
    stale = BudgetCategory(
        "Food",
        Decimal("500"),
        Decimal("400"),
        percentage=1,
        status=BudgetState.NORMAL,
    )

    overview = finance.summarize_budget(
        [stale],
        EARLY_WARNING_THRESHOLDS,
        currency_code="INR",
    )

    assert overview.categories[0].percentage == 80
    assert overview.categories[0].status is BudgetState.WARNING
    assert overview.total_budgeted == Decimal("500")
    assert overview.remaining == Decimal("100")


def test_compute_category_breakdown_totals() -> None:
    """The breakdown should carry the grand total and currency."""
    assets = [_asset("A", "100", "Cash"), _asset("B", "300", "Stocks")]

    breakdown = finance.compute_category_breakdown(
        assets,
        "type",
        "value",
        currency_code="INR",
    )

    assert breakdown.grand_total == Decimal("400")
    assert [item.category for item in breakdown.categories] == [
        "Cash",
        "Stocks",
    ]
    assert breakdown.categories[1].percent_of_total == Decimal("75")
