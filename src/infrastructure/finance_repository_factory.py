"""Factory helpers to select the ledger repository backend."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import FinanceRepositoryPort
from src.infrastructure.finance_repository import SqlAlchemyFinanceRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.memory_repository import InMemoryFinanceRepository


def create_finance_repository(
    db_port: DatabaseEnginePort | None,
    logger=None,
    backend: str = "memory",
) -> FinanceRepositoryPort:
    """Return a ledger repository implementation based on configuration.

    Args:
        db_port: Port providing the finance engine (sqlalchemy backend).
        logger: Optional logger compatible with logging.Logger-like API.
        backend: Backend name (memory or sqlalchemy).

    Returns:
        FinanceRepositoryPort: Concrete repository implementation.

    Raises:
        RuntimeError: If the sqlalchemy backend is selected without a
            database port.
        ValueError: If the backend is unsupported.
    """
    resolved_logger = logger or get_app_logger()
    selected_backend = backend.strip().lower()

    if selected_backend == "memory":
        return InMemoryFinanceRepository()

    if selected_backend == "sqlalchemy":
        if db_port is None:
            raise RuntimeError("SQLAlchemy backend requires a database port.")
        repository = SqlAlchemyFinanceRepository(
            db_port,
            logger=resolved_logger,
        )
        repository.prepare_storage()
        return repository

    raise ValueError(
        "Unsupported FinVault backend: "
        f"{selected_backend}. Expected memory or sqlalchemy."
    )


__all__ = ["create_finance_repository"]
