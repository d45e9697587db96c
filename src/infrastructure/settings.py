"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import (
    CURRENCY_SYMBOLS,
    DEFAULT_CURRENCY_CODE,
)
from src.domain.policies import BudgetThresholds, resolve_thresholds
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

SUPPORTED_BACKENDS = ("memory", "sqlalchemy")


@dataclass(frozen=True)
class FinVaultSettings:
    """Settings for storage, currency and budget alerts.

    Attributes:
        backend: Ledger backend identifier (memory or sqlalchemy).
        database_url: SQLAlchemy URL used by the sqlalchemy backend.
        currency_code: Currency the ledger is kept in.
        currency_symbol: Symbol used when formatting amounts.
        budget_policy: Name of the budget threshold policy.
    """

    backend: str = "memory"
    database_url: str | None = None
    currency_code: str = DEFAULT_CURRENCY_CODE
    currency_symbol: str = CURRENCY_SYMBOLS[DEFAULT_CURRENCY_CODE]
    budget_policy: str = "standard"

    @property
    def thresholds(self) -> BudgetThresholds:
        """Return the budget thresholds for the configured policy."""
        return resolve_thresholds(self.budget_policy)

    @classmethod
    def from_env(cls) -> "FinVaultSettings":
        """Build settings from environment variables.

        Returns:
            FinVaultSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If the backend or budget policy is unsupported.
        """
        dotenv.load_dotenv()
        backend = os.getenv("FINVAULT_BACKEND", "memory").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported FinVault backend: {backend}. "
                f"Expected one of {', '.join(SUPPORTED_BACKENDS)}."
            )
        currency_code = (
            os.getenv("FINVAULT_CURRENCY", DEFAULT_CURRENCY_CODE)
            .strip()
            .upper()
        )
        currency_symbol = os.getenv("FINVAULT_CURRENCY_SYMBOL") or (
            cls._default_symbol(currency_code)
        )
        budget_policy = os.getenv("FINVAULT_BUDGET_POLICY", "standard")
        resolve_thresholds(budget_policy)
        return cls(
            backend=backend,
            database_url=os.getenv("FINVAULT_DB_URL") or cls._default_db_url(),
            currency_code=currency_code,
            currency_symbol=currency_symbol,
            budget_policy=budget_policy.strip().lower(),
        )

    @staticmethod
    def _default_symbol(currency_code: str) -> str:
        """Return the symbol for a currency code, or the code itself."""
        symbol = CURRENCY_SYMBOLS.get(currency_code)
        if symbol is None:
            get_app_logger().warning(
                f"No symbol known for currency {currency_code}; "
                "set FINVAULT_CURRENCY_SYMBOL to override."
            )
            return f"{currency_code} "
        return symbol

    @staticmethod
    def _default_db_url() -> str:
        """Return the SQLite URL under the project data/ directory."""
        return f"sqlite:///{get_project_root() / 'data' / 'finvault.db'}"


__all__ = ["FinVaultSettings", "SUPPORTED_BACKENDS"]
