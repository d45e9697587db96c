"""SQLAlchemy-backed ledger repository.

Each entry kind lives in its own table. Rows carry a ``position`` column so
listings come back in insertion order on every backend.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Callable

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.exceptions import DuplicateRecordError, RecordNotFoundError
from src.domain.models import (
    Asset,
    BudgetCategory,
    BudgetState,
    DailyExpense,
    EntryKind,
    IncomeEntry,
    LedgerEntry,
    Liability,
    LiabilityStatus,
    Trend,
    kind_of,
)
from src.domain.services.amounts import parse_amount
from src.domain.services.normalization import normalize_date
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class _TableLayout:
    """Table layout and row mapping for one entry kind."""

    table: str
    columns: dict[str, str]
    from_row: Callable[[Any], LedgerEntry]
    to_params: Callable[[LedgerEntry], dict[str, Any]]


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _text(value: Decimal) -> str:
    return str(parse_amount(value))


def _row_date(value) -> date:
    return normalize_date(value) or date.min


# Decimal text, so every backend returns exactly the digits that were stored.
_AMOUNT_COLUMN = "TEXT NOT NULL"


_TABLES: dict[EntryKind, _TableLayout] = {
    EntryKind.ASSET: _TableLayout(
        table="assets",
        columns={
            "title": "VARCHAR(200) NOT NULL",
            "value": _AMOUNT_COLUMN,
            "type": "VARCHAR(100) NOT NULL",
            "valued_on": "DATE",
            "change": _AMOUNT_COLUMN,
            "trend": "VARCHAR(10) NOT NULL",
        },
        from_row=lambda row: Asset(
            id=row.id,
            title=row.title,
            value=parse_amount(row.value),
            type=row.type,
            date=_row_date(row.valued_on),
            change=parse_amount(row.change),
            trend=Trend(row.trend),
        ),
        to_params=lambda entry: {
            "title": entry.title,
            "value": _text(entry.value),
            "type": entry.type,
            "valued_on": _iso(entry.date),
            "change": _text(entry.change),
            "trend": entry.trend.value,
        },
    ),
    EntryKind.LIABILITY: _TableLayout(
        table="liabilities",
        columns={
            "title": "VARCHAR(200) NOT NULL",
            "amount": _AMOUNT_COLUMN,
            "type": "VARCHAR(100) NOT NULL",
            "interest_rate": _AMOUNT_COLUMN,
            "payment_amount": _AMOUNT_COLUMN,
            "due_date": "DATE",
            "payment_period": "VARCHAR(20) NOT NULL",
            "status": "VARCHAR(10) NOT NULL",
        },
        from_row=lambda row: Liability(
            id=row.id,
            title=row.title,
            amount=parse_amount(row.amount),
            type=row.type,
            interest_rate=parse_amount(row.interest_rate),
            payment_amount=parse_amount(row.payment_amount),
            due_date=_row_date(row.due_date),
            payment_period=row.payment_period,
            status=LiabilityStatus(row.status),
        ),
        to_params=lambda entry: {
            "title": entry.title,
            "amount": _text(entry.amount),
            "type": entry.type,
            "interest_rate": _text(entry.interest_rate),
            "payment_amount": _text(entry.payment_amount),
            "due_date": _iso(entry.due_date),
            "payment_period": entry.payment_period,
            "status": entry.status.value,
        },
    ),
    EntryKind.BUDGET: _TableLayout(
        table="budget_categories",
        columns={
            "title": "VARCHAR(200) NOT NULL",
            "budgeted": _AMOUNT_COLUMN,
            "spent": _AMOUNT_COLUMN,
            "percentage": "INTEGER NOT NULL",
            "status": "VARCHAR(10) NOT NULL",
        },
        from_row=lambda row: BudgetCategory(
            id=row.id,
            title=row.title,
            budgeted=parse_amount(row.budgeted),
            spent=parse_amount(row.spent),
            percentage=int(row.percentage),
            status=BudgetState(row.status),
        ),
        to_params=lambda entry: {
            "title": entry.title,
            "budgeted": _text(entry.budgeted),
            "spent": _text(entry.spent),
            "percentage": entry.percentage,
            "status": entry.status.value,
        },
    ),
    EntryKind.INCOME: _TableLayout(
        table="income_entries",
        columns={
            "title": "VARCHAR(200) NOT NULL",
            "amount": _AMOUNT_COLUMN,
            "description": "VARCHAR(500) NOT NULL",
        },
        from_row=lambda row: IncomeEntry(
            id=row.id,
            title=row.title,
            amount=parse_amount(row.amount),
            description=row.description or "",
        ),
        to_params=lambda entry: {
            "title": entry.title,
            "amount": _text(entry.amount),
            "description": entry.description,
        },
    ),
    EntryKind.DAILY_EXPENSE: _TableLayout(
        table="daily_expenses",
        columns={
            "title": "VARCHAR(200) NOT NULL",
            "amount": _AMOUNT_COLUMN,
            "category": "VARCHAR(100) NOT NULL",
            "spent_on": "DATE",
            "notes": "VARCHAR(500)",
        },
        from_row=lambda row: DailyExpense(
            id=row.id,
            title=row.title,
            amount=parse_amount(row.amount),
            category=row.category,
            date=_row_date(row.spent_on),
            notes=row.notes,
        ),
        to_params=lambda entry: {
            "title": entry.title,
            "amount": _text(entry.amount),
            "category": entry.category,
            "spent_on": _iso(entry.date),
            "notes": entry.notes,
        },
    ),
}

LEDGER_TABLES: tuple[str, ...] = tuple(
    layout.table for layout in _TABLES.values()
)


class SqlAlchemyFinanceRepository(FinanceRepositoryPort):
    """Repository storing ledger entries through SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def prepare_storage(self) -> None:
        """Create the ledger tables when they do not exist yet."""
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            for layout in _TABLES.values():
                column_sql = ",\n".join(
                    f"{name} {ddl}" for name, ddl in layout.columns.items()
                )
                conn.execute(
                    text(
                        f"""
                        CREATE TABLE IF NOT EXISTS {layout.table} (
                            id VARCHAR(64) PRIMARY KEY,
                            position INTEGER NOT NULL,
                            {column_sql}
                        )
                        """
                    )
                )
        self._logger.info(f"Ledger tables ready: {len(_TABLES)}")

    def list_entries(self, kind: EntryKind) -> list[LedgerEntry]:
        layout = _TABLES[kind]
        columns = ", ".join(["id", *layout.columns])
        query = text(
            f"SELECT {columns} FROM {layout.table} ORDER BY position"
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [layout.from_row(row) for row in rows]

    def contains_entry(self, kind: EntryKind, entry_id: str) -> bool:
        layout = _TABLES[kind]
        query = text(f"SELECT 1 FROM {layout.table} WHERE id = :id")
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"id": entry_id}).first()
        return row is not None

    def add_entry(self, entry: LedgerEntry) -> None:
        kind = kind_of(entry)
        layout = _TABLES[kind]
        if self.contains_entry(kind, entry.id):
            raise DuplicateRecordError(kind.value, entry.id)
        names = ["id", "position", *layout.columns]
        query = text(
            f"INSERT INTO {layout.table} ({', '.join(names)}) "
            f"VALUES ({', '.join(':' + name for name in names)})"
        )
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            position = conn.execute(
                text(f"SELECT COALESCE(MAX(position), 0) + 1 FROM {layout.table}")
            ).scalar_one()
            conn.execute(
                query,
                {"id": entry.id, "position": position, **layout.to_params(entry)},
            )

    def replace_entry(self, entry: LedgerEntry) -> None:
        kind = kind_of(entry)
        layout = _TABLES[kind]
        assignments = ", ".join(f"{name} = :{name}" for name in layout.columns)
        query = text(
            f"UPDATE {layout.table} SET {assignments} WHERE id = :id"
        )
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            updated = conn.execute(
                query,
                {"id": entry.id, **layout.to_params(entry)},
            ).rowcount
        if updated == 0:
            raise RecordNotFoundError(kind.value, entry.id)

    def delete_entry(self, kind: EntryKind, entry_id: str) -> None:
        layout = _TABLES[kind]
        query = text(f"DELETE FROM {layout.table} WHERE id = :id")
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            deleted = conn.execute(query, {"id": entry_id}).rowcount
        if deleted == 0:
            raise RecordNotFoundError(kind.value, entry_id)

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


__all__ = ["SqlAlchemyFinanceRepository", "LEDGER_TABLES"]
