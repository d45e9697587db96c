"""Tests for GetBudgetOverviewUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_budget_overview import (
    GetBudgetOverviewUseCase,
)
from src.domain.models import BudgetCategory, BudgetState
from src.domain.policies import EARLY_WARNING_THRESHOLDS


def _categories() -> list[BudgetCategory]:
    return [
        BudgetCategory("Housing", Decimal("2000"), Decimal("1500")),
        BudgetCategory("Entertainment", Decimal("300"), Decimal("350")),
    ]


def test_execute_derives_statuses_and_warns_on_danger() -> None:
    repository = MagicMock()
    repository.list_budget_categories.return_value = _categories()
    logger = MagicMock()

    overview = GetBudgetOverviewUseCase(repository, logger=logger).execute()

    assert [category.status for category in overview.categories] == [
        BudgetState.NORMAL,
        BudgetState.DANGER,
    ]
    assert overview.total_budgeted == Decimal("2300")
    assert overview.total_spent == Decimal("1850")
    logger.warning.assert_called_once()
    assert "Entertainment" in logger.warning.call_args[0][0]


def test_execute_applies_configured_policy() -> None:
    repository = MagicMock()
    repository.list_budget_categories.return_value = _categories()
    logger = MagicMock()

    overview = GetBudgetOverviewUseCase(
        repository,
        logger=logger,
        thresholds=EARLY_WARNING_THRESHOLDS,
    ).execute()

    assert overview.categories[0].percentage == 75
    assert overview.categories[0].status is BudgetState.WARNING
