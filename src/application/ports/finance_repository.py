"""Application port for ledger storage."""

from typing import Protocol

from src.domain.models import (
    Asset,
    BudgetCategory,
    DailyExpense,
    EntryKind,
    IncomeEntry,
    LedgerEntry,
    Liability,
)


class FinanceRepositoryPort(Protocol):
    """Port exposing read and write access to ledger entries.

    Entries are immutable; updates are full replacements keyed by id.
    """

    def list_entries(self, kind: EntryKind) -> list[LedgerEntry]:
        """Return every entry of ``kind`` in insertion order."""

    def contains_entry(self, kind: EntryKind, entry_id: str) -> bool:
        """Return True when an entry of ``kind`` has ``entry_id``."""

    def add_entry(self, entry: LedgerEntry) -> None:
        """Store a new entry.

        Raises:
            DuplicateRecordError: If the id is already stored.
        """

    def replace_entry(self, entry: LedgerEntry) -> None:
        """Replace the stored entry sharing ``entry.id``.

        Raises:
            RecordNotFoundError: If no entry has that id.
        """

    def delete_entry(self, kind: EntryKind, entry_id: str) -> None:
        """Remove an entry.

        Raises:
            RecordNotFoundError: If no entry has that id.
        """

    def list_assets(self) -> list[Asset]:
        """Return stored assets."""

    def list_liabilities(self) -> list[Liability]:
        """Return stored liabilities."""

    def list_budget_categories(self) -> list[BudgetCategory]:
        """Return stored budget categories."""

    def list_incomes(self) -> list[IncomeEntry]:
        """Return stored income entries."""

    def list_daily_expenses(self) -> list[DailyExpense]:
        """Return stored daily expenses."""


__all__ = ["FinanceRepositoryPort"]
