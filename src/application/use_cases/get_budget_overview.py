"""Use case to read budget categories with their alert levels."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.domain.models import BudgetOverview, BudgetState
from src.domain.policies import STANDARD_THRESHOLDS, BudgetThresholds
from src.domain.services.finance import summarize_budget
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetOverviewUseCase:
    """Return budget categories re-derived under the active policy."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        logger=None,
        thresholds: BudgetThresholds = STANDARD_THRESHOLDS,
        currency_code: str = DEFAULT_CURRENCY_CODE,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._thresholds = thresholds
        self._currency_code = currency_code

    def execute(self) -> BudgetOverview:
        """Return the budget overview.

        Stored percentages and statuses are recomputed so a change of
        threshold policy is reflected without rewriting storage.
        """
        overview = summarize_budget(
            self._repository.list_budget_categories(),
            self._thresholds,
            currency_code=self._currency_code,
        )
        over_budget = [
            category.title
            for category in overview.categories
            if category.status is BudgetState.DANGER
        ]
        if over_budget:
            self._logger.warning(
                f"Budget categories at danger level: {', '.join(over_budget)}"
            )
        self._logger.info(
            f"Budget overview: budgeted={overview.total_budgeted}, "
            f"spent={overview.total_spent}"
        )
        return overview


__all__ = ["GetBudgetOverviewUseCase", "BudgetOverview"]
