"""Port for reaching the SQL database that stores the FinVault ledger."""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Source of the SQLAlchemy engine backing persistent ledger storage.

    Repositories receive this port so connection URLs and pooling stay an
    infrastructure concern.
    """

    def get_finance_engine(self) -> Engine:
        """Return the engine bound to the ledger tables.

        Returns:
            Engine: Engine for assets, liabilities, budget, income and
            daily expense tables.
        """


__all__ = ["DatabaseEnginePort"]
