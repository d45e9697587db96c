"""Use case to compute net worth from the ledger."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.domain.models import NetWorthSummary
from src.domain.services.finance import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute total assets, total liabilities and net worth."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY_CODE,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger entries.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency the ledger is kept in.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(self) -> NetWorthSummary:
        """Return the net worth summary.

        Returns:
            NetWorthSummary: Computed asset, liability, and net worth totals.
        """
        assets = self._repository.list_assets()
        liabilities = self._repository.list_liabilities()
        summary = compute_net_worth_summary(
            assets,
            liabilities,
            currency_code=self._currency_code,
            logger=self._logger,
        )
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]
