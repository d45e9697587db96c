"""Use cases to add, replace and delete ledger entries."""

from dataclasses import dataclass

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.exceptions import UnknownEntryKindError
from src.domain.models import BudgetCategory, EntryKind, LedgerEntry, kind_of
from src.domain.policies import STANDARD_THRESHOLDS, BudgetThresholds
from src.domain.services.amounts import parse_amount
from src.domain.services.finance import with_budget_amounts
from src.domain.services.validation import validate_amount_sign
from src.infrastructure.logging.logger import get_app_logger

# Field holding the headline amount of each entry kind.
AMOUNT_FIELDS = {
    EntryKind.ASSET: "value",
    EntryKind.LIABILITY: "amount",
    EntryKind.BUDGET: "spent",
    EntryKind.INCOME: "amount",
    EntryKind.DAILY_EXPENSE: "amount",
}


def resolve_entry_kind(value: EntryKind | str) -> EntryKind:
    """Return the EntryKind matching ``value``.

    Raises:
        UnknownEntryKindError: If ``value`` names no ledger collection.
    """
    if isinstance(value, EntryKind):
        return value
    try:
        return EntryKind(str(value).strip().lower())
    except ValueError as exc:
        raise UnknownEntryKindError(str(value)) from exc


@dataclass(frozen=True)
class SaveEntryResult:
    """Outcome of a save.

    Attributes:
        entry: Entry as stored, with derived fields filled in.
        created: True when the entry was added, False when replaced.
    """

    entry: LedgerEntry
    created: bool


class SaveEntryUseCase:
    """Add an entry, or replace the stored entry with the same id."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        logger=None,
        thresholds: BudgetThresholds = STANDARD_THRESHOLDS,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port storing ledger entries.
            logger: Optional logger compatible with logging.Logger-like API.
            thresholds: Policy used to derive budget category status.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._thresholds = thresholds

    def execute(self, entry: LedgerEntry) -> SaveEntryResult:
        """Store ``entry``.

        Budget categories get their percentage and status recomputed before
        storage.

        Raises:
            UnknownEntryKindError: If ``entry`` is not a ledger record.
        """
        try:
            kind = kind_of(entry)
        except TypeError as exc:
            raise UnknownEntryKindError(type(entry).__name__) from exc

        if isinstance(entry, BudgetCategory):
            entry = with_budget_amounts(entry, self._thresholds)
        validate_amount_sign(
            kind.value,
            parse_amount(getattr(entry, AMOUNT_FIELDS[kind])),
            self._logger,
            entry.title,
        )

        if self._repository.contains_entry(kind, entry.id):
            self._repository.replace_entry(entry)
            created = False
        else:
            self._repository.add_entry(entry)
            created = True
        action = "Added" if created else "Replaced"
        self._logger.info(f"{action} {kind.value} entry {entry.id}")
        return SaveEntryResult(entry=entry, created=created)


class DeleteEntryUseCase:
    """Remove a ledger entry."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, kind: EntryKind | str, entry_id: str) -> None:
        """Delete the entry ``entry_id`` from ``kind``.

        Raises:
            UnknownEntryKindError: If ``kind`` names no collection.
            RecordNotFoundError: If the entry does not exist.
        """
        resolved = resolve_entry_kind(kind)
        self._repository.delete_entry(resolved, entry_id)
        self._logger.info(f"Deleted {resolved.value} entry {entry_id}")


__all__ = [
    "SaveEntryUseCase",
    "SaveEntryResult",
    "DeleteEntryUseCase",
    "resolve_entry_kind",
]
