"""In-memory ledger repository.

Holds every ledger collection in plain dictionaries keyed by entry id. The
Streamlit app keeps one instance per browser session in ``st.session_state``.
"""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.exceptions import DuplicateRecordError, RecordNotFoundError
from src.domain.models import (
    Asset,
    BudgetCategory,
    DailyExpense,
    EntryKind,
    IncomeEntry,
    LedgerEntry,
    Liability,
    kind_of,
)


class InMemoryFinanceRepository(FinanceRepositoryPort):
    """Ledger state container kept in process memory."""

    def __init__(self, entries: list[LedgerEntry] | None = None) -> None:
        """Initialize the repository.

        Args:
            entries: Optional entries stored in the given order.
        """
        self._collections: dict[EntryKind, dict[str, LedgerEntry]] = {
            kind: {} for kind in EntryKind
        }
        for entry in entries or []:
            self.add_entry(entry)

    def list_entries(self, kind: EntryKind) -> list[LedgerEntry]:
        return list(self._collections[kind].values())

    def contains_entry(self, kind: EntryKind, entry_id: str) -> bool:
        return entry_id in self._collections[kind]

    def add_entry(self, entry: LedgerEntry) -> None:
        kind = kind_of(entry)
        collection = self._collections[kind]
        if entry.id in collection:
            raise DuplicateRecordError(kind.value, entry.id)
        collection[entry.id] = entry

    def replace_entry(self, entry: LedgerEntry) -> None:
        kind = kind_of(entry)
        collection = self._collections[kind]
        if entry.id not in collection:
            raise RecordNotFoundError(kind.value, entry.id)
        # Assigning an existing key keeps the entry's position.
        collection[entry.id] = entry

    def delete_entry(self, kind: EntryKind, entry_id: str) -> None:
        collection = self._collections[kind]
        if entry_id not in collection:
            raise RecordNotFoundError(kind.value, entry_id)
        del collection[entry_id]

    def list_assets(self) -> list[Asset]:
        return self.list_entries(EntryKind.ASSET)

    def list_liabilities(self) -> list[Liability]:
        return self.list_entries(EntryKind.LIABILITY)

    def list_budget_categories(self) -> list[BudgetCategory]:
        return self.list_entries(EntryKind.BUDGET)

    def list_incomes(self) -> list[IncomeEntry]:
        return self.list_entries(EntryKind.INCOME)

    def list_daily_expenses(self) -> list[DailyExpense]:
        return self.list_entries(EntryKind.DAILY_EXPENSE)


__all__ = ["InMemoryFinanceRepository"]
