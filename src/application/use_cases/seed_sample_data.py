"""Use case for loading a sample portfolio into an empty ledger."""

from dataclasses import dataclass

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.manage_entries import SaveEntryUseCase
from src.domain.models import EntryKind, LedgerEntry
from src.domain.policies import STANDARD_THRESHOLDS, BudgetThresholds
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SeedSampleDataResult:
    """Result of a seeding run.

    Attributes:
        inserted_count: Number of entries written.
        skipped: True when the ledger already held data.
    """

    inserted_count: int
    skipped: bool


class SeedSampleDataUseCase:
    """Populate an empty ledger with sample entries."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        entries: list[LedgerEntry],
        logger=None,
        thresholds: BudgetThresholds = STANDARD_THRESHOLDS,
    ) -> None:
        self._repository = repository
        self._entries = entries
        self._logger = logger or get_app_logger()
        self._save = SaveEntryUseCase(
            repository,
            logger=self._logger,
            thresholds=thresholds,
        )

    def execute(self) -> SeedSampleDataResult:
        """Insert the sample entries unless the ledger has data already."""
        if any(self._repository.list_entries(kind) for kind in EntryKind):
            self._logger.info("Ledger already holds entries; skipping seed")
            return SeedSampleDataResult(inserted_count=0, skipped=True)

        for entry in self._entries:
            self._save.execute(entry)
        self._logger.info(f"Seeded {len(self._entries)} sample entries")
        return SeedSampleDataResult(
            inserted_count=len(self._entries),
            skipped=False,
        )


__all__ = ["SeedSampleDataUseCase", "SeedSampleDataResult"]
