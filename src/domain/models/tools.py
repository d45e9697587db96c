"""Domain models for the interest calculator and bill reminders."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class BillStatus(str, Enum):
    UPCOMING = "upcoming"
    DUE = "due"
    OVERDUE = "overdue"
    PAID = "paid"


@dataclass(frozen=True)
class GrowthPoint:
    """Balance of an investment at the end of a whole year."""

    year: int
    amount: Decimal


@dataclass(frozen=True)
class InterestResult:
    """Outcome of an interest calculation.

    Attributes:
        principal: Amount invested or borrowed.
        interest: Interest earned over the whole term, rounded to cents.
        total: Principal plus interest, rounded to cents.
        schedule: Year-end balances from year 0; empty for simple interest.
    """

    principal: Decimal
    interest: Decimal
    total: Decimal
    schedule: list[GrowthPoint] = field(default_factory=list)


@dataclass(frozen=True)
class BillReminder:
    """Payment reminder derived from a liability's next due date.

    Attributes:
        liability_id: Identifier of the liability the bill belongs to.
        title: Liability title.
        amount: Instalment due.
        due_date: Next due date.
        days_until_due: Whole days from today; negative once overdue.
        status: Upcoming, due today, overdue or paid.
        needs_reminder: True when unpaid and due within the reminder window.
    """

    liability_id: str
    title: str
    amount: Decimal
    due_date: date
    days_until_due: int
    status: BillStatus
    needs_reminder: bool = False


__all__ = [
    "BillStatus",
    "GrowthPoint",
    "InterestResult",
    "BillReminder",
]
