"""Tests for amount sign validation."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.services.validation import validate_amount_sign


def test_negative_amount_logs_warning() -> None:
    logger = MagicMock()

    validate_amount_sign("income", Decimal("-5"), logger, "Refund")

    logger.warning.assert_called_once_with(
        "Negative income amount 'Refund': -5"
    )


def test_non_negative_amount_is_silent() -> None:
    logger = MagicMock()

    validate_amount_sign("asset", Decimal("0"), logger)

    logger.warning.assert_not_called()
