"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases import (
    DeleteEntryUseCase,
    GetBillRemindersUseCase,
    GetBudgetOverviewUseCase,
    GetBudgetRecommendationUseCase,
    GetCategoryBreakdownUseCase,
    GetExpenseStatisticsUseCase,
    GetNetWorthSummaryUseCase,
    GetSurplusSummaryUseCase,
    SaveEntryUseCase,
    SeedSampleDataUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.finance_repository_factory import (
    create_finance_repository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.sample_data import build_sample_entries
from src.infrastructure.settings import FinVaultSettings


def build_settings() -> FinVaultSettings:
    """Return settings read from the environment."""
    return FinVaultSettings.from_env()


def build_database_adapter(
    settings: FinVaultSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or build_settings()
    return SqlAlchemyDatabaseEngineAdapter(resolved.database_url)


def build_finance_repository(
    settings: FinVaultSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> FinanceRepositoryPort:
    """Return the configured ledger repository."""
    resolved = settings or build_settings()
    if resolved.backend == "sqlalchemy" and db_port is None:
        db_port = build_database_adapter(resolved)
    return create_finance_repository(
        db_port,
        logger=get_app_logger(),
        backend=resolved.backend,
    )


class FinanceServices:
    """Use cases bound to one repository and one settings instance."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        settings: FinVaultSettings,
        logger=None,
    ) -> None:
        self.repository = repository
        self.settings = settings
        self._logger = logger or get_app_logger()

    def net_worth(self) -> GetNetWorthSummaryUseCase:
        return GetNetWorthSummaryUseCase(
            self.repository,
            logger=self._logger,
            currency_code=self.settings.currency_code,
        )

    def surplus(self) -> GetSurplusSummaryUseCase:
        return GetSurplusSummaryUseCase(
            self.repository,
            logger=self._logger,
            currency_code=self.settings.currency_code,
        )

    def category_breakdown(self) -> GetCategoryBreakdownUseCase:
        return GetCategoryBreakdownUseCase(
            self.repository,
            logger=self._logger,
            currency_code=self.settings.currency_code,
        )

    def budget_overview(self) -> GetBudgetOverviewUseCase:
        return GetBudgetOverviewUseCase(
            self.repository,
            logger=self._logger,
            thresholds=self.settings.thresholds,
            currency_code=self.settings.currency_code,
        )

    def expense_statistics(self) -> GetExpenseStatisticsUseCase:
        return GetExpenseStatisticsUseCase(self.repository, logger=self._logger)

    def budget_recommendation(self) -> GetBudgetRecommendationUseCase:
        return GetBudgetRecommendationUseCase(
            self.repository,
            logger=self._logger,
        )

    def bill_reminders(self) -> GetBillRemindersUseCase:
        return GetBillRemindersUseCase(self.repository, logger=self._logger)

    def save_entry(self) -> SaveEntryUseCase:
        return SaveEntryUseCase(
            self.repository,
            logger=self._logger,
            thresholds=self.settings.thresholds,
        )

    def delete_entry(self) -> DeleteEntryUseCase:
        return DeleteEntryUseCase(self.repository, logger=self._logger)

    def seed_sample_data(self) -> SeedSampleDataUseCase:
        thresholds = self.settings.thresholds
        return SeedSampleDataUseCase(
            self.repository,
            build_sample_entries(thresholds),
            logger=self._logger,
            thresholds=thresholds,
        )


def build_finance_services(
    settings: FinVaultSettings | None = None,
    repository: FinanceRepositoryPort | None = None,
) -> FinanceServices:
    """Return use cases wired to the configured repository."""
    resolved = settings or build_settings()
    resolved_repository = repository or build_finance_repository(resolved)
    return FinanceServices(resolved_repository, resolved)


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_finance_repository",
    "build_finance_services",
    "FinanceServices",
]
