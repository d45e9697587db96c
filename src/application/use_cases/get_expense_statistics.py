"""Use case to summarize daily expenses."""

from datetime import date

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models import ExpenseStatistics
from src.domain.services.statistics import compute_expense_statistics
from src.infrastructure.logging.logger import get_app_logger


class GetExpenseStatisticsUseCase:
    """Compute counts, category totals and the monthly spending trend."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        logger=None,
        months: int = 6,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._months = months

    def execute(self, today: date | None = None) -> ExpenseStatistics:
        """Return expense statistics.

        Args:
            today: Optional reference date; defaults to the current date.
        """
        reference = today or date.today()
        statistics = compute_expense_statistics(
            self._repository.list_daily_expenses(),
            reference,
            months=self._months,
        )
        self._logger.info(
            f"Expense statistics: count={statistics.expense_count}, "
            f"total={statistics.total_amount}"
        )
        return statistics


__all__ = ["GetExpenseStatisticsUseCase", "ExpenseStatistics"]
