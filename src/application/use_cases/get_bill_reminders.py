"""Use case to list bill reminders for liabilities."""

from collections.abc import Collection
from datetime import date

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models import BillReminder
from src.domain.services.reminders import (
    DEFAULT_REMINDER_DAYS,
    build_bill_reminders,
)
from src.infrastructure.logging.logger import get_app_logger


class GetBillRemindersUseCase:
    """Derive payment reminders from the stored liabilities."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        today: date | None = None,
        reminder_days: int = DEFAULT_REMINDER_DAYS,
        paid_ids: Collection[str] = (),
    ) -> list[BillReminder]:
        """Return reminders for every liability, soonest due first.

        Args:
            today: Reference date; defaults to the current day.
            reminder_days: Days before a due date a reminder starts.
            paid_ids: Liability ids marked as paid.
        """
        reminders = build_bill_reminders(
            self._repository.list_liabilities(),
            today or date.today(),
            reminder_days=reminder_days,
            paid_ids=paid_ids,
        )
        due_soon = sum(1 for item in reminders if item.needs_reminder)
        self._logger.info(
            f"Bill reminders: bills={len(reminders)}, due_soon={due_soon}"
        )
        return reminders


__all__ = ["GetBillRemindersUseCase", "BillReminder"]
