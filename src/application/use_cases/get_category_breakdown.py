"""Use case to break amounts down by category."""

from enum import Enum

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.domain.models import CategoryAmount, CategoryBreakdown
from src.domain.services.finance import compute_category_breakdown
from src.infrastructure.logging.logger import get_app_logger


class BreakdownSource(str, Enum):
    """Records that can be broken down, with their grouping fields."""

    ASSETS = "assets"
    LIABILITIES = "liabilities"
    BUDGET = "budget"
    DAILY_EXPENSES = "daily_expenses"


# (category field, amount field) per source.
_FIELDS = {
    BreakdownSource.ASSETS: ("type", "value"),
    BreakdownSource.LIABILITIES: ("type", "amount"),
    BreakdownSource.BUDGET: ("title", "spent"),
    BreakdownSource.DAILY_EXPENSES: ("category", "amount"),
}


class GetCategoryBreakdownUseCase:
    """Group ledger amounts by type or category."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY_CODE,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger entries.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency the ledger is kept in.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(self, source: BreakdownSource) -> CategoryBreakdown:
        """Return the breakdown for ``source``.

        Args:
            source: Collection to group.

        Returns:
            CategoryBreakdown: Per-category totals and shares.
        """
        records = self._load(source)
        category_field, amount_field = _FIELDS[source]
        breakdown = compute_category_breakdown(
            records,
            category_field,
            amount_field,
            currency_code=self._currency_code,
        )
        self._logger.info(
            f"Breakdown of {source.value}: "
            f"{len(breakdown.categories)} categories, "
            f"total={breakdown.grand_total}"
        )
        return breakdown

    def _load(self, source: BreakdownSource) -> list:
        if source is BreakdownSource.ASSETS:
            return self._repository.list_assets()
        if source is BreakdownSource.LIABILITIES:
            return self._repository.list_liabilities()
        if source is BreakdownSource.BUDGET:
            return self._repository.list_budget_categories()
        return self._repository.list_daily_expenses()


__all__ = [
    "GetCategoryBreakdownUseCase",
    "BreakdownSource",
    "CategoryBreakdown",
    "CategoryAmount",
]
