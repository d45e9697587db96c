"""Simple and compound interest calculators.

Rates are annual percentages and terms are in years, both parsed with
``parse_amount`` so form input such as ``"10"`` or ``"7.5%"`` works as is.
Results are rounded to cents; intermediate figures are not.
"""

from decimal import Decimal

from src.domain.models import GrowthPoint, InterestResult
from src.domain.services.amounts import parse_amount
from src.utils.decimal_utils import HUNDRED, round_money

COMPOUNDING_FREQUENCIES = {
    "annually": 1,
    "semi-annually": 2,
    "quarterly": 4,
    "monthly": 12,
}
MAX_TERM_YEARS = 100
MAX_RATE_PERCENT = 1000


def _parse_terms(rate_percent, years) -> tuple[Decimal, Decimal]:
    rate = parse_amount(rate_percent)
    term = parse_amount(years)
    if term < 0 or term > MAX_TERM_YEARS:
        raise ValueError(f"Term must be between 0 and {MAX_TERM_YEARS} years")
    if rate <= -HUNDRED or rate > MAX_RATE_PERCENT:
        raise ValueError(
            f"Rate must be above -100% and at most {MAX_RATE_PERCENT}%"
        )
    return rate / HUNDRED, term


def simple_interest(principal, rate_percent, years) -> InterestResult:
    """Return interest accrued linearly: ``P * r * t``.

    Args:
        principal: Amount invested or borrowed.
        rate_percent: Annual rate in percent.
        years: Term in years, fractions allowed.

    Raises:
        ValueError: If the term or rate is out of range.
    """
    amount = parse_amount(principal)
    rate, term = _parse_terms(rate_percent, years)
    interest = amount * rate * term
    return InterestResult(
        principal=amount,
        interest=round_money(interest),
        total=round_money(amount + interest),
    )


def compound_interest(
    principal,
    rate_percent,
    years,
    periods_per_year: int = 1,
) -> InterestResult:
    """Return ``P * (1 + r/n) ** (n*t)`` with a year-end growth schedule.

    The schedule lists the balance at every whole year from 0 through the
    last full year of the term.

    Args:
        principal: Amount invested.
        rate_percent: Annual rate in percent.
        years: Term in years, fractions allowed.
        periods_per_year: Compounding periods per year, one of
            ``COMPOUNDING_FREQUENCIES``.

    Raises:
        ValueError: If the frequency, term or rate is not supported.
    """
    if periods_per_year not in COMPOUNDING_FREQUENCIES.values():
        raise ValueError(
            f"Unsupported compounding frequency: {periods_per_year}"
        )
    amount = parse_amount(principal)
    rate, term = _parse_terms(rate_percent, years)
    periods = Decimal(periods_per_year)
    growth = Decimal(1) + rate / periods

    def balance(elapsed: Decimal) -> Decimal:
        return amount * growth ** (periods * elapsed)

    total = balance(term)
    schedule = [
        GrowthPoint(year=year, amount=round_money(balance(Decimal(year))))
        for year in range(int(term) + 1)
    ]
    return InterestResult(
        principal=amount,
        interest=round_money(total - amount),
        total=round_money(total),
        schedule=schedule,
    )


__all__ = [
    "simple_interest",
    "compound_interest",
    "COMPOUNDING_FREQUENCIES",
    "MAX_TERM_YEARS",
    "MAX_RATE_PERCENT",
]
