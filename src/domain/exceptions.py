"""Domain exceptions for ledger operations."""


class FinanceError(Exception):
    """Base class for finance ledger errors."""


class UnknownEntryKindError(FinanceError):
    """Raised when an entry kind is not one of the supported collections."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown entry kind: {kind}")
        self.kind = kind


class RecordNotFoundError(FinanceError):
    """Raised when replacing or deleting an entry that does not exist."""

    def __init__(self, kind: str, entry_id: str) -> None:
        super().__init__(f"No {kind} entry with id {entry_id}")
        self.kind = kind
        self.entry_id = entry_id


class DuplicateRecordError(FinanceError):
    """Raised when adding an entry whose id is already stored."""

    def __init__(self, kind: str, entry_id: str) -> None:
        super().__init__(f"A {kind} entry with id {entry_id} already exists")
        self.kind = kind
        self.entry_id = entry_id


__all__ = [
    "FinanceError",
    "UnknownEntryKindError",
    "RecordNotFoundError",
    "DuplicateRecordError",
]
