"""Tests for the summary_cli adapter."""

from unittest.mock import MagicMock

import pytest

from src.adapters import summary_cli
from src.application.use_cases import ExpenseSource
from src.domain.exceptions import RecordNotFoundError
from src.infrastructure.container import FinanceServices
from src.infrastructure.memory_repository import InMemoryFinanceRepository
from src.infrastructure.settings import FinVaultSettings


def _patch(monkeypatch, services, logger):
    monkeypatch.setattr(summary_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        summary_cli,
        "build_finance_services",
        lambda: services,
    )


def test_parse_expense_source_defaults_to_budget() -> None:
    logger = MagicMock()

    assert summary_cli._parse_expense_source(None, logger) is (
        ExpenseSource.BUDGET
    )
    assert summary_cli._parse_expense_source(
        " Daily_Expenses ",
        logger,
    ) is ExpenseSource.DAILY_EXPENSES
    logger.warning.assert_not_called()


def test_parse_expense_source_warns_on_invalid_value() -> None:
    logger = MagicMock()

    result = summary_cli._parse_expense_source("weekly", logger)

    assert result is ExpenseSource.BUDGET
    logger.warning.assert_called_once()


def test_main_prints_sample_ledger_summary(monkeypatch, capsys):
    """The memory backend should summarize the seeded sample ledger."""
    logger = MagicMock()
    services = FinanceServices(
        InMemoryFinanceRepository(),
        FinVaultSettings(),
        logger=logger,
    )
    _patch(monkeypatch, services, logger)
    monkeypatch.delenv("FINVAULT_EXPENSE_SOURCE", raising=False)

    summary_cli.main()

    output = capsys.readouterr().out
    assert "net worth: ₹218,300.00" in output
    assert "Income: ₹7,020.00" in output
    assert "surplus: ₹3,475.00" in output
    assert "- Food: ₹630.00 of ₹600.00 (105%, danger)" in output
    assert "* Real Estate: ₹350,000.00" in output


def test_main_uses_daily_expenses_when_configured(monkeypatch, capsys):
    logger = MagicMock()
    services = FinanceServices(
        InMemoryFinanceRepository(),
        FinVaultSettings(),
        logger=logger,
    )
    _patch(monkeypatch, services, logger)
    monkeypatch.setenv("FINVAULT_EXPENSE_SOURCE", "daily_expenses")

    summary_cli.main()

    output = capsys.readouterr().out
    assert "expenses (daily_expenses): ₹461.69" in output


def test_main_exits_non_zero_on_finance_error(monkeypatch):
    logger = MagicMock()
    services = MagicMock()
    services.settings = FinVaultSettings(backend="sqlalchemy")
    services.net_worth.return_value.execute.side_effect = (
        RecordNotFoundError("asset", "abc")
    )
    _patch(monkeypatch, services, logger)

    with pytest.raises(SystemExit) as excinfo:
        summary_cli.main()

    assert excinfo.value.code == 1
    logger.error.assert_called_once()
