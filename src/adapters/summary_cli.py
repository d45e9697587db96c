"""CLI adapter printing the headline figures of the ledger."""

import os

from src.application.use_cases import BreakdownSource, ExpenseSource
from src.domain.exceptions import FinanceError
from src.domain.services.amounts import format_amount
from src.infrastructure.container import build_finance_services
from src.infrastructure.logging.logger import get_app_logger


def _parse_expense_source(value: str | None, logger) -> ExpenseSource:
    """Return the expense source named by ``value``.

    Args:
        value: ``budget`` or ``daily_expenses``.
        logger: Logger used for warnings.

    Returns:
        ExpenseSource: Parsed source, ``BUDGET`` when missing or invalid.
    """
    if not value:
        return ExpenseSource.BUDGET
    try:
        return ExpenseSource(value.strip().lower())
    except ValueError:
        logger.warning(
            f"Invalid expense source '{value}'. "
            "Expected budget or daily_expenses."
        )
        return ExpenseSource.BUDGET


def main() -> None:
    """Print net worth, surplus, budget status and asset breakdown."""
    logger = get_app_logger()
    services = build_finance_services()
    symbol = services.settings.currency_symbol

    source = _parse_expense_source(
        os.getenv("FINVAULT_EXPENSE_SOURCE"),
        logger,
    )
    try:
        if services.settings.backend == "memory":
            logger.info(
                "Memory backend selected; summarizing the sample ledger."
            )
            services.seed_sample_data().execute()
        net_worth = services.net_worth().execute()
        surplus = services.surplus().execute(source=source)
        overview = services.budget_overview().execute()
        breakdown = services.category_breakdown().execute(
            BreakdownSource.ASSETS
        )
    except FinanceError as exc:
        logger.error(f"Summary failed: {exc}")
        raise SystemExit(1) from exc

    print(f"Ledger summary (currency={net_worth.currency_code})")
    print(
        f"Assets: {format_amount(net_worth.asset_total, symbol)}, "
        f"liabilities: {format_amount(net_worth.liability_total, symbol)}, "
        f"net worth: {format_amount(net_worth.net_worth, symbol)}"
    )
    print(
        f"Income: {format_amount(surplus.income_total, symbol)}, "
        f"expenses ({source.value}): "
        f"{format_amount(surplus.expense_total, symbol)}, "
        f"surplus: {format_amount(surplus.surplus, symbol)}"
    )
    for category in overview.categories:
        print(
            f"- {category.title}: {format_amount(category.spent, symbol)} of "
            f"{format_amount(category.budgeted, symbol)} "
            f"({category.percentage}%, {category.status.value})"
        )
    for item in breakdown.categories:
        print(
            f"* {item.category}: {format_amount(item.total, symbol)} "
            f"({item.percent_of_total:.1f}%)"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
