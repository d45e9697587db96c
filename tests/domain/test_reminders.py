"""Tests for bill reminders."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import BillStatus, Liability
from src.domain.services import reminders

TODAY = date(2025, 5, 10)


def _liability(title: str, payment: str, due_date: date) -> Liability:
    return Liability(
        title,
        Decimal("1000"),
        "Unsecured",
        Decimal("10"),
        Decimal(payment),
        due_date,
    )


@pytest.fixture
def liabilities() -> list[Liability]:
    return [
        _liability("Credit Card", "200", date(2025, 5, 12)),
        _liability("Car Loan", "350", date(2025, 5, 10)),
        _liability("Mortgage", "1500", date(2025, 5, 1)),
        _liability("Student Loan", "150", date(2025, 6, 1)),
    ]


@pytest.mark.parametrize(
    ("due_date", "paid", "expected"),
    [
        (date(2025, 5, 11), False, BillStatus.UPCOMING),
        (TODAY, False, BillStatus.DUE),
        (date(2025, 5, 9), False, BillStatus.OVERDUE),
        (date(2025, 5, 9), True, BillStatus.PAID),
    ],
)
def test_bill_status(due_date, paid, expected) -> None:
    assert reminders.bill_status(due_date, TODAY, paid) is expected


def test_build_bill_reminders_sorts_by_due_date(liabilities) -> None:
    result = reminders.build_bill_reminders(liabilities, TODAY)

    assert [item.title for item in result] == [
        "Mortgage",
        "Car Loan",
        "Credit Card",
        "Student Loan",
    ]
    assert [item.days_until_due for item in result] == [-9, 0, 2, 22]
    assert [item.status for item in result] == [
        BillStatus.OVERDUE,
        BillStatus.DUE,
        BillStatus.UPCOMING,
        BillStatus.UPCOMING,
    ]
    assert result[1].amount == Decimal("350")
    assert result[1].liability_id == liabilities[1].id


def test_reminder_window_excludes_overdue_and_distant_bills(
    liabilities,
) -> None:
    """Only unpaid bills due within the window need a reminder."""
    result = reminders.build_bill_reminders(liabilities, TODAY)
    narrow = reminders.build_bill_reminders(
        liabilities,
        TODAY,
        reminder_days=0,
    )

    assert [item.title for item in result if item.needs_reminder] == [
        "Car Loan",
        "Credit Card",
    ]
    assert [item.title for item in narrow if item.needs_reminder] == [
        "Car Loan"
    ]


def test_paid_bills_need_no_reminder(liabilities) -> None:
    result = reminders.build_bill_reminders(
        liabilities,
        TODAY,
        paid_ids={liabilities[1].id, liabilities[2].id},
    )
    by_title = {item.title: item for item in result}

    assert by_title["Car Loan"].status is BillStatus.PAID
    assert by_title["Car Loan"].needs_reminder is False
    assert by_title["Mortgage"].status is BillStatus.PAID


def test_build_bill_reminders_reads_mappings() -> None:
    """Records without a usable due date are skipped."""
    result = reminders.build_bill_reminders(
        [
            {
                "id": "a",
                "title": "Rent",
                "payment_amount": "₹12,000",
                "due_date": "2025-05-13",
            },
            {"id": "b", "title": "Unknown", "due_date": None},
        ],
        TODAY,
    )

    assert len(result) == 1
    assert result[0].amount == Decimal("12000")
    assert result[0].needs_reminder is True


@pytest.mark.parametrize("days", [-1, 31])
def test_build_bill_reminders_rejects_reminder_window(days) -> None:
    with pytest.raises(ValueError):
        reminders.build_bill_reminders([], TODAY, reminder_days=days)


def test_filter_reminders_views(liabilities) -> None:
    result = reminders.build_bill_reminders(liabilities, TODAY)

    upcoming = reminders.filter_reminders(result, "upcoming")
    overdue = reminders.filter_reminders(result, "overdue")

    assert [item.title for item in upcoming] == [
        "Car Loan",
        "Credit Card",
        "Student Loan",
    ]
    assert [item.title for item in overdue] == ["Mortgage"]
    assert reminders.filter_reminders(result) == result


def test_filter_reminders_rejects_unknown_view() -> None:
    with pytest.raises(ValueError, match="Unknown reminder view"):
        reminders.filter_reminders([], "later")
