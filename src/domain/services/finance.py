"""Domain services for finance aggregates.

Every function here is pure: it takes already loaded records (dataclasses
or mappings) and returns derived figures without touching storage.
"""

from collections.abc import Iterable
from dataclasses import replace
from decimal import Decimal
from logging import Logger

from src.domain.models import (
    Asset,
    BudgetCategory,
    BudgetOverview,
    BudgetState,
    BudgetStatus,
    CategoryAmount,
    CategoryBreakdown,
    IncomeEntry,
    Liability,
    NetWorthSummary,
    SurplusSummary,
    new_entry_id,
)
from src.domain.policies import STANDARD_THRESHOLDS, BudgetThresholds
from src.domain.services.amounts import parse_amount
from src.domain.services.normalization import (
    normalize_category,
    read_field,
)
from src.domain.services.validation import validate_amount_sign
from src.utils.decimal_utils import ZERO, HUNDRED, percent_of, round_half_up


def sum_amounts(records: Iterable, field: str) -> Decimal:
    """Return the total of ``field`` across records.

    Args:
        records: Dataclass instances or mappings.
        field: Attribute or key holding the amount.

    Returns:
        Decimal: Sum of the parsed amounts; zero for no records.
    """
    return sum(
        (parse_amount(read_field(record, field)) for record in records),
        ZERO,
    )


def total_assets(assets: Iterable[Asset]) -> Decimal:
    return sum_amounts(assets, "value")


def total_liabilities(liabilities: Iterable[Liability]) -> Decimal:
    return sum_amounts(liabilities, "amount")


def total_income(incomes: Iterable[IncomeEntry]) -> Decimal:
    return sum_amounts(incomes, "amount")


def total_budget_spent(categories: Iterable[BudgetCategory]) -> Decimal:
    return sum_amounts(categories, "spent")


def total_daily_expenses(expenses: Iterable) -> Decimal:
    return sum_amounts(expenses, "amount")


def net_worth(assets: Iterable, liabilities: Iterable) -> Decimal:
    """Return total asset value minus total liability amount."""
    return total_assets(assets) - total_liabilities(liabilities)


def surplus(
    incomes: Iterable,
    expenses: Iterable,
    expense_field: str = "spent",
) -> Decimal:
    """Return total income minus total expenses.

    Args:
        incomes: Income entries.
        expenses: Budget categories (``spent``) or daily expenses
            (``amount``).
        expense_field: Field summed on ``expenses``.
    """
    return total_income(incomes) - sum_amounts(expenses, expense_field)


def group_by_category(
    records: Iterable,
    category_field: str,
    amount_field: str,
) -> dict[str, CategoryAmount]:
    """Group amounts by category and compute each group's share.

    Groups keep the order in which their category first appears. When the
    grand total is zero every share is zero.

    Args:
        records: Dataclass instances or mappings.
        category_field: Attribute or key holding the category tag.
        amount_field: Attribute or key holding the amount.

    Returns:
        dict[str, CategoryAmount]: Totals and shares keyed by category.
    """
    totals: dict[str, Decimal] = {}
    for record in records:
        category = normalize_category(read_field(record, category_field))
        amount = parse_amount(read_field(record, amount_field))
        totals[category] = totals.get(category, ZERO) + amount

    grand_total = sum(totals.values(), ZERO)
    return {
        category: CategoryAmount(
            category=category,
            total=total,
            percent_of_total=percent_of(total, grand_total),
        )
        for category, total in totals.items()
    }


def compute_category_breakdown(
    records: Iterable,
    category_field: str,
    amount_field: str,
    *,
    currency_code: str,
) -> CategoryBreakdown:
    """Return ``group_by_category`` results as a breakdown model."""
    groups = group_by_category(records, category_field, amount_field)
    categories = list(groups.values())
    return CategoryBreakdown(
        currency_code=currency_code,
        grand_total=sum((item.total for item in categories), ZERO),
        categories=categories,
    )


def budget_status(
    budgeted,
    spent,
    thresholds: BudgetThresholds = STANDARD_THRESHOLDS,
) -> BudgetStatus:
    """Return the spent percentage and alert level of a budget.

    Args:
        budgeted: Planned amount.
        spent: Actual amount.
        thresholds: Warning and danger percentages.

    Returns:
        BudgetStatus: Rounded percentage and its status.
    """
    planned = parse_amount(budgeted)
    actual = parse_amount(spent)
    percentage = (
        round_half_up(actual / planned * HUNDRED) if planned > 0 else 0
    )
    if percentage >= thresholds.danger:
        status = BudgetState.DANGER
    elif percentage >= thresholds.warning:
        status = BudgetState.WARNING
    else:
        status = BudgetState.NORMAL
    return BudgetStatus(percentage=percentage, status=status)


def make_budget_category(
    title: str,
    budgeted,
    spent,
    thresholds: BudgetThresholds = STANDARD_THRESHOLDS,
    entry_id: str | None = None,
) -> BudgetCategory:
    """Build a budget category with its derived fields filled in."""
    planned = parse_amount(budgeted)
    actual = parse_amount(spent)
    derived = budget_status(planned, actual, thresholds)
    return BudgetCategory(
        title=title,
        budgeted=planned,
        spent=actual,
        percentage=derived.percentage,
        status=derived.status,
        id=entry_id or new_entry_id(),
    )


def with_budget_amounts(
    category: BudgetCategory,
    thresholds: BudgetThresholds = STANDARD_THRESHOLDS,
    *,
    budgeted=None,
    spent=None,
) -> BudgetCategory:
    """Return a replacement category with refreshed derived fields.

    Args:
        category: Existing category.
        thresholds: Threshold policy in force.
        budgeted: Optional new planned amount.
        spent: Optional new actual amount.
    """
    planned = parse_amount(
        category.budgeted if budgeted is None else budgeted
    )
    actual = parse_amount(category.spent if spent is None else spent)
    derived = budget_status(planned, actual, thresholds)
    return replace(
        category,
        budgeted=planned,
        spent=actual,
        percentage=derived.percentage,
        status=derived.status,
    )


def compute_net_worth_summary(
    assets: list[Asset],
    liabilities: list[Liability],
    *,
    currency_code: str,
    logger: Logger,
) -> NetWorthSummary:
    """Compute net worth totals from asset and liability records.

    Args:
        assets: Asset records.
        liabilities: Liability records.
        currency_code: Currency the records are expressed in.
        logger: Logger used for warnings.

    Returns:
        NetWorthSummary: Asset, liability and net worth totals.
    """
    for asset in assets:
        validate_amount_sign(
            "asset",
            parse_amount(read_field(asset, "value")),
            logger,
            read_field(asset, "title"),
        )
    for liability in liabilities:
        validate_amount_sign(
            "liability",
            parse_amount(read_field(liability, "amount")),
            logger,
            read_field(liability, "title"),
        )
    asset_total = total_assets(assets)
    liability_total = total_liabilities(liabilities)
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        currency_code=currency_code,
    )


def compute_surplus_summary(
    incomes: list[IncomeEntry],
    expenses: list,
    *,
    currency_code: str,
    logger: Logger,
    expense_field: str = "spent",
) -> SurplusSummary:
    """Compute income, expense and surplus totals.

    Args:
        incomes: Income entries.
        expenses: Budget categories or daily expenses.
        currency_code: Currency the records are expressed in.
        logger: Logger used for warnings.
        expense_field: ``spent`` for budget categories, ``amount`` for
            daily expenses.

    Returns:
        SurplusSummary: Income, expense and surplus totals.
    """
    for income in incomes:
        validate_amount_sign(
            "income",
            parse_amount(read_field(income, "amount")),
            logger,
            read_field(income, "title"),
        )
    income_total = total_income(incomes)
    expense_total = sum_amounts(expenses, expense_field)
    return SurplusSummary(
        income_total=income_total,
        expense_total=expense_total,
        surplus=income_total - expense_total,
        currency_code=currency_code,
    )


def summarize_budget(
    categories: list[BudgetCategory],
    thresholds: BudgetThresholds,
    *,
    currency_code: str,
) -> BudgetOverview:
    """Return budget categories re-derived under ``thresholds``."""
    derived = [
        with_budget_amounts(category, thresholds) for category in categories
    ]
    return BudgetOverview(
        categories=derived,
        total_budgeted=sum_amounts(derived, "budgeted"),
        total_spent=sum_amounts(derived, "spent"),
        currency_code=currency_code,
    )


__all__ = [
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
]
