"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger


def validate_amount_sign(
    kind: str,
    amount: Decimal,
    logger: Logger,
    title: str | None = None,
) -> None:
    """Warn when an amount violates the non-negative convention.

    Assets, liabilities, incomes and expenses are all recorded as positive
    magnitudes; the direction comes from the collection they live in.

    Args:
        kind: Entry kind label used in the message.
        amount: Parsed amount.
        logger: Logger used for warnings.
        title: Optional entry title for context.
    """
    if amount < 0:
        label = f" '{title}'" if title else ""
        logger.warning(f"Negative {kind} amount{label}: {amount}")


__all__ = ["validate_amount_sign"]
