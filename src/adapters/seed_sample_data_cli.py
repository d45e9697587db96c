"""CLI adapter to load the sample portfolio into the configured ledger.

With the memory backend the data only lives for the duration of the run,
so this entry point is mostly useful with ``FINVAULT_BACKEND=sqlalchemy``.
"""

from src.domain.exceptions import FinanceError
from src.infrastructure.container import build_finance_services
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the sample data seeding use case."""
    logger = get_app_logger()
    services = build_finance_services()
    if services.settings.backend == "memory":
        logger.warning(
            "Memory backend selected; seeded entries are discarded on exit."
        )

    try:
        result = services.seed_sample_data().execute()
    except FinanceError as exc:
        logger.error(f"Seeding failed: {exc}")
        raise SystemExit(1) from exc

    if result.skipped:
        print("Ledger already holds entries; nothing seeded.")
        return
    print(f"Seeded {result.inserted_count} sample entries into the ledger.")


if __name__ == "__main__":  # pragma: no cover
    main()
