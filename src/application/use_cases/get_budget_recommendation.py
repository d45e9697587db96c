"""Use case to suggest next week's budget."""

from datetime import date

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models import BudgetRecommendation
from src.domain.services.recommender import recommend_budget
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetRecommendationUseCase:
    """Derive a weekly budget recommendation from daily expenses."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, today: date | None = None) -> BudgetRecommendation:
        """Return the recommendation for the week following ``today``."""
        recommendation = recommend_budget(
            self._repository.list_daily_expenses(),
            today or date.today(),
        )
        self._logger.info(
            f"Budget recommendation: weekly={recommendation.weekly_total}, "
            f"confidence={recommendation.confidence_score}"
        )
        return recommendation


__all__ = ["GetBudgetRecommendationUseCase", "BudgetRecommendation"]
