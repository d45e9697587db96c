"""Tests for the in-memory ledger repository."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from src.domain.exceptions import DuplicateRecordError, RecordNotFoundError
from src.domain.models import Asset, EntryKind, IncomeEntry
from src.infrastructure.memory_repository import InMemoryFinanceRepository


def _asset(title: str, value: str) -> Asset:
    return Asset(title, Decimal(value), "Cash", date(2025, 4, 20))


def test_entries_are_listed_per_kind_in_insertion_order() -> None:
    first = _asset("Cash", "100")
    second = _asset("Stocks", "200")
    income = IncomeEntry("Salary", Decimal("5500"))

    repository = InMemoryFinanceRepository([first, income, second])

    assert repository.list_assets() == [first, second]
    assert repository.list_incomes() == [income]
    assert repository.list_liabilities() == []
    assert repository.contains_entry(EntryKind.ASSET, first.id)
    assert not repository.contains_entry(EntryKind.INCOME, first.id)


def test_replace_keeps_position() -> None:
    first = _asset("Cash", "100")
    second = _asset("Stocks", "200")
    repository = InMemoryFinanceRepository([first, second])

    repository.replace_entry(replace(first, value=Decimal("150")))

    assert [asset.value for asset in repository.list_assets()] == [
        Decimal("150"),
        Decimal("200"),
    ]


def test_add_rejects_duplicate_ids() -> None:
    asset = _asset("Cash", "100")
    repository = InMemoryFinanceRepository([asset])

    with pytest.raises(DuplicateRecordError):
        repository.add_entry(asset)


def test_replace_and_delete_unknown_entries_raise() -> None:
    repository = InMemoryFinanceRepository()

    with pytest.raises(RecordNotFoundError):
        repository.replace_entry(_asset("Ghost", "1"))
    with pytest.raises(RecordNotFoundError):
        repository.delete_entry(EntryKind.ASSET, "missing")


def test_delete_removes_entry() -> None:
    asset = _asset("Cash", "100")
    repository = InMemoryFinanceRepository([asset])

    repository.delete_entry(EntryKind.ASSET, asset.id)

    assert repository.list_assets() == []


def test_listing_returns_a_copy() -> None:
    """Mutating a returned list must not change the ledger."""
    repository = InMemoryFinanceRepository([_asset("Cash", "100")])

    repository.list_assets().clear()

    assert len(repository.list_assets()) == 1
