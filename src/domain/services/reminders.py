"""Bill reminders derived from liability due dates."""

from collections.abc import Collection, Iterable
from datetime import date

from src.domain.models import BillReminder, BillStatus
from src.domain.services.amounts import parse_amount
from src.domain.services.normalization import normalize_date, read_field

DEFAULT_REMINDER_DAYS = 3
MAX_REMINDER_DAYS = 30
REMINDER_VIEWS = ("all", "upcoming", "overdue")


def bill_status(due_date: date, today: date, paid: bool = False) -> BillStatus:
    """Return the status of a bill due on ``due_date``."""
    if paid:
        return BillStatus.PAID
    days = (due_date - today).days
    if days < 0:
        return BillStatus.OVERDUE
    if days == 0:
        return BillStatus.DUE
    return BillStatus.UPCOMING


def build_bill_reminders(
    liabilities: Iterable,
    today: date,
    reminder_days: int = DEFAULT_REMINDER_DAYS,
    paid_ids: Collection[str] = (),
) -> list[BillReminder]:
    """Return one reminder per liability with a due date.

    Args:
        liabilities: Liability records (``id``, ``title``,
            ``payment_amount``, ``due_date``).
        today: Reference date.
        reminder_days: Days before the due date a reminder starts.
        paid_ids: Liability ids already paid for the current period.

    Returns:
        list[BillReminder]: Reminders sorted by due date, then title.

    Raises:
        ValueError: If ``reminder_days`` is outside 0 to 30.
    """
    if not 0 <= reminder_days <= MAX_REMINDER_DAYS:
        raise ValueError(
            f"reminder_days must be between 0 and {MAX_REMINDER_DAYS}"
        )
    reminders = []
    for liability in liabilities:
        due_date = normalize_date(read_field(liability, "due_date"))
        if due_date is None:
            continue
        liability_id = read_field(liability, "id") or ""
        paid = liability_id in paid_ids
        days = (due_date - today).days
        reminders.append(
            BillReminder(
                liability_id=liability_id,
                title=read_field(liability, "title") or "",
                amount=parse_amount(read_field(liability, "payment_amount")),
                due_date=due_date,
                days_until_due=days,
                status=bill_status(due_date, today, paid),
                needs_reminder=not paid and 0 <= days <= reminder_days,
            )
        )
    return sorted(reminders, key=lambda item: (item.due_date, item.title))


def filter_reminders(
    reminders: Iterable[BillReminder],
    view: str = "all",
) -> list[BillReminder]:
    """Return the reminders shown in ``view``.

    ``upcoming`` keeps bills not yet due or due today, ``overdue`` keeps
    unpaid bills past their date and ``all`` keeps everything.

    Raises:
        ValueError: If ``view`` is not one of ``REMINDER_VIEWS``.
    """
    if view not in REMINDER_VIEWS:
        raise ValueError(f"Unknown reminder view: {view}")
    if view == "upcoming":
        wanted = {BillStatus.UPCOMING, BillStatus.DUE}
    elif view == "overdue":
        wanted = {BillStatus.OVERDUE}
    else:
        return list(reminders)
    return [item for item in reminders if item.status in wanted]


__all__ = [
    "bill_status",
    "build_bill_reminders",
    "filter_reminders",
    "DEFAULT_REMINDER_DAYS",
    "MAX_REMINDER_DAYS",
    "REMINDER_VIEWS",
]
