"""Tests for the entry management use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.manage_entries import (
    DeleteEntryUseCase,
    SaveEntryUseCase,
    resolve_entry_kind,
)
from src.domain.exceptions import UnknownEntryKindError
from src.domain.models import (
    BudgetCategory,
    BudgetState,
    DailyExpense,
    EntryKind,
    IncomeEntry,
)


def test_save_adds_new_entry() -> None:
    repository = MagicMock()
    repository.contains_entry.return_value = False
    income = IncomeEntry("Salary", Decimal("5500"))

    result = SaveEntryUseCase(repository, logger=MagicMock()).execute(income)

    assert result.created is True
    assert result.entry is income
    repository.contains_entry.assert_called_once_with(
        EntryKind.INCOME,
        income.id,
    )
    repository.add_entry.assert_called_once_with(income)
    repository.replace_entry.assert_not_called()


def test_save_replaces_existing_entry() -> None:
    repository = MagicMock()
    repository.contains_entry.return_value = True
    income = IncomeEntry("Salary", Decimal("6000"))

    result = SaveEntryUseCase(repository, logger=MagicMock()).execute(income)

    assert result.created is False
    repository.replace_entry.assert_called_once_with(income)
    repository.add_entry.assert_not_called()


def test_save_derives_budget_status_before_storing() -> None:
    """Budget categories should be stored with fresh derived fields."""
    repository = MagicMock()
    repository.contains_entry.return_value = False
    category = BudgetCategory("Food", Decimal("600"), Decimal("570"))

    result = SaveEntryUseCase(repository, logger=MagicMock()).execute(
        category
    )

    stored = repository.add_entry.call_args[0][0]
    assert stored is result.entry
    assert stored.id == category.id
    assert stored.percentage == 95
    assert stored.status is BudgetState.WARNING


def test_save_warns_on_negative_amount() -> None:
    repository = MagicMock()
    repository.contains_entry.return_value = False
    logger = MagicMock()

    SaveEntryUseCase(repository, logger=logger).execute(
        IncomeEntry("Refund", Decimal("-20"))
    )

    logger.warning.assert_called_once()


def test_save_rejects_non_entries() -> None:
    with pytest.raises(UnknownEntryKindError):
        SaveEntryUseCase(MagicMock(), logger=MagicMock()).execute(
            {"title": "dict"}
        )


def test_delete_resolves_kind_names() -> None:
    repository = MagicMock()
    logger = MagicMock()

    DeleteEntryUseCase(repository, logger=logger).execute(
        "Daily_Expense",
        "abc",
    )

    repository.delete_entry.assert_called_once_with(
        EntryKind.DAILY_EXPENSE,
        "abc",
    )
    logger.info.assert_called_once()


def test_resolve_entry_kind_rejects_unknown_names() -> None:
    assert resolve_entry_kind(EntryKind.ASSET) is EntryKind.ASSET
    with pytest.raises(UnknownEntryKindError):
        resolve_entry_kind("transactions")


def test_save_uses_given_date_fields_unchanged() -> None:
    repository = MagicMock()
    repository.contains_entry.return_value = False
    expense = DailyExpense("Gas", Decimal("45"), "Fuel", date(2025, 5, 14))

    result = SaveEntryUseCase(repository, logger=MagicMock()).execute(
        expense
    )

    assert result.entry.date == date(2025, 5, 14)
