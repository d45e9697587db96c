"""Domain models for the records a user keeps in the ledger."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from uuid import uuid4


def new_entry_id() -> str:
    """Return a fresh identifier for a ledger entry."""
    return uuid4().hex


class EntryKind(str, Enum):
    """Collections held by the ledger."""

    ASSET = "asset"
    LIABILITY = "liability"
    BUDGET = "budget"
    INCOME = "income"
    DAILY_EXPENSE = "daily_expense"


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"


class LiabilityStatus(str, Enum):
    CURRENT = "current"
    WARNING = "warning"
    LATE = "late"


class BudgetState(str, Enum):
    NORMAL = "normal"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class Asset:
    """Something the user owns.

    Attributes:
        title: Display name, e.g. "Stock Portfolio".
        value: Current value.
        type: Free-form category tag ("Property", "Investment", "Cash").
        date: Valuation date.
        change: Value change since the previous valuation.
        trend: Direction of the last change.
    """

    title: str
    value: Decimal
    type: str
    date: date
    change: Decimal = Decimal("0")
    trend: Trend = Trend.UP
    id: str = field(default_factory=new_entry_id)


@dataclass(frozen=True)
class Liability:
    """Something the user owes.

    Attributes:
        title: Display name, e.g. "Car Loan".
        amount: Outstanding balance.
        type: Free-form category tag ("Secured", "Unsecured").
        interest_rate: Annual interest rate in percent.
        payment_amount: Instalment amount per payment period.
        due_date: Next payment due date.
        payment_period: Period label for the instalment.
        status: Repayment status.
    """

    title: str
    amount: Decimal
    type: str
    interest_rate: Decimal
    payment_amount: Decimal
    due_date: date
    payment_period: str = "monthly"
    status: LiabilityStatus = LiabilityStatus.CURRENT
    id: str = field(default_factory=new_entry_id)


@dataclass(frozen=True)
class BudgetCategory:
    """Planned versus actual spending for a named bucket.

    ``percentage`` and ``status`` are derived from ``budgeted`` and ``spent``;
    build instances through ``make_budget_category`` or refresh them with
    ``with_budget_amounts`` so they never drift.
    """

    title: str
    budgeted: Decimal
    spent: Decimal
    percentage: int = 0
    status: BudgetState = BudgetState.NORMAL
    id: str = field(default_factory=new_entry_id)


@dataclass(frozen=True)
class IncomeEntry:
    """A recurring or one-off source of income."""

    title: str
    amount: Decimal
    description: str = ""
    id: str = field(default_factory=new_entry_id)


@dataclass(frozen=True)
class DailyExpense:
    """A single day-to-day purchase."""

    title: str
    amount: Decimal
    category: str
    date: date
    notes: str | None = None
    id: str = field(default_factory=new_entry_id)


LedgerEntry = Asset | Liability | BudgetCategory | IncomeEntry | DailyExpense

ENTRY_TYPES: dict[EntryKind, type] = {
    EntryKind.ASSET: Asset,
    EntryKind.LIABILITY: Liability,
    EntryKind.BUDGET: BudgetCategory,
    EntryKind.INCOME: IncomeEntry,
    EntryKind.DAILY_EXPENSE: DailyExpense,
}


def kind_of(entry: LedgerEntry) -> EntryKind:
    """Return the collection an entry belongs to.

    Raises:
        TypeError: If ``entry`` is not a ledger record.
    """
    for kind, entry_type in ENTRY_TYPES.items():
        if isinstance(entry, entry_type):
            return kind
    raise TypeError(f"Unsupported ledger entry: {type(entry).__name__}")


__all__ = [
    "Asset",
    "Liability",
    "BudgetCategory",
    "IncomeEntry",
    "DailyExpense",
    "LedgerEntry",
    "EntryKind",
    "Trend",
    "LiabilityStatus",
    "BudgetState",
    "ENTRY_TYPES",
    "kind_of",
    "new_entry_id",
]
