"""Domain policies package."""

from .budget_thresholds import (
    EARLY_WARNING_THRESHOLDS,
    STANDARD_THRESHOLDS,
    THRESHOLD_POLICIES,
    BudgetThresholds,
    resolve_thresholds,
)

__all__ = [
    "BudgetThresholds",
    "STANDARD_THRESHOLDS",
    "EARLY_WARNING_THRESHOLDS",
    "THRESHOLD_POLICIES",
    "resolve_thresholds",
]
