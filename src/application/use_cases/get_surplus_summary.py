"""Use case to compute income against spending."""

from enum import Enum

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.domain.models import SurplusSummary
from src.domain.services.finance import compute_surplus_summary
from src.infrastructure.logging.logger import get_app_logger


class ExpenseSource(str, Enum):
    """Which records count as spending."""

    BUDGET = "budget"
    DAILY_EXPENSES = "daily_expenses"


class GetSurplusSummaryUseCase:
    """Compute total income, total expenses and the surplus."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY_CODE,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(
        self,
        source: ExpenseSource = ExpenseSource.BUDGET,
    ) -> SurplusSummary:
        """Return the surplus summary.

        Args:
            source: ``BUDGET`` sums the spent amount of budget categories,
                ``DAILY_EXPENSES`` sums logged daily expenses.

        Returns:
            SurplusSummary: Income, expense, and surplus totals.
        """
        incomes = self._repository.list_incomes()
        if source is ExpenseSource.DAILY_EXPENSES:
            expenses = self._repository.list_daily_expenses()
            expense_field = "amount"
        else:
            expenses = self._repository.list_budget_categories()
            expense_field = "spent"
        summary = compute_surplus_summary(
            incomes,
            expenses,
            currency_code=self._currency_code,
            logger=self._logger,
            expense_field=expense_field,
        )
        self._logger.info(
            f"Surplus computed from {source.value}: "
            f"income={summary.income_total}, expenses={summary.expense_total}"
        )
        return summary


__all__ = ["GetSurplusSummaryUseCase", "ExpenseSource", "SurplusSummary"]
