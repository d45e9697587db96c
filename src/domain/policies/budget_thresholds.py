"""Threshold policies deciding when a budget category needs attention."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BudgetThresholds:
    """Spent-percentage thresholds for budget alerts.

    A category is ``warning`` once its percentage reaches ``warning`` and
    ``danger`` once it reaches ``danger`` (both inclusive).
    """

    warning: int = 90
    danger: int = 100

    def __post_init__(self) -> None:
        if self.warning < 0 or self.danger < 0:
            raise ValueError("Budget thresholds must be non-negative")
        if self.warning > self.danger:
            raise ValueError(
                f"Warning threshold {self.warning} exceeds "
                f"danger threshold {self.danger}"
            )


STANDARD_THRESHOLDS = BudgetThresholds(warning=90, danger=100)
EARLY_WARNING_THRESHOLDS = BudgetThresholds(warning=75, danger=90)

THRESHOLD_POLICIES = {
    "standard": STANDARD_THRESHOLDS,
    "early_warning": EARLY_WARNING_THRESHOLDS,
}


def resolve_thresholds(policy: str) -> BudgetThresholds:
    """Return the thresholds registered under ``policy``.

    Raises:
        ValueError: If the policy name is unknown.
    """
    key = policy.strip().lower()
    if key not in THRESHOLD_POLICIES:
        raise ValueError(
            f"Unsupported budget policy: {policy}. "
            f"Expected one of {', '.join(THRESHOLD_POLICIES)}."
        )
    return THRESHOLD_POLICIES[key]


__all__ = [
    "BudgetThresholds",
    "STANDARD_THRESHOLDS",
    "EARLY_WARNING_THRESHOLDS",
    "THRESHOLD_POLICIES",
    "resolve_thresholds",
]
