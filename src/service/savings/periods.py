"""
Period Rule Resolution for the Self Savings Planner.

Three kinds of periods drive how remnants are invested:
- Q (fixed) periods replace a transaction's remnant with a fixed amount
- P (extra) periods add an extra amount on top of the remnant
- K (bucket) periods group transactions for aggregate reporting

Q rules are applied before P rules, so an override can be topped up.
"""

from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from .models import BucketPeriod, ExtraPeriod, FixedPeriod


def select_fixed_period(
    moment: Optional[datetime],
    fixed_periods: Optional[Sequence[FixedPeriod]],
) -> Optional[FixedPeriod]:
    """
    Pick the Q period that governs a transaction.

    When several Q periods contain the date, the one with the latest start
    wins. Periods with the same start keep the first one in list order.

    Args:
        moment: Transaction date
        fixed_periods: Q periods in input order

    Returns:
        The governing Q period, or None if none contains the date
    """
    best: Optional[FixedPeriod] = None
    for period in fixed_periods or ():
        if not period.contains(moment):
            continue
        if best is None or period.start > best.start:
            best = period
    return best


def apply_fixed_periods(
    moment: Optional[datetime],
    remnant: Decimal,
    fixed_periods: Optional[Sequence[FixedPeriod]],
) -> Decimal:
    """Replace the remnant with the governing Q period's fixed amount, if any."""
    period = select_fixed_period(moment, fixed_periods)
    return period.fixed if period is not None else remnant


def apply_extra_periods(
    moment: Optional[datetime],
    remnant: Decimal,
    extra_periods: Optional[Sequence[ExtraPeriod]],
) -> Decimal:
    """Add the extra of every P period containing the date."""
    for period in extra_periods or ():
        if period.contains(moment):
            remnant += period.extra
    return remnant


def in_any_bucket(
    moment: Optional[datetime],
    bucket_periods: Optional[Iterable[BucketPeriod]],
) -> bool:
    """Check whether a date falls inside at least one K period."""
    return any(period.contains(moment) for period in bucket_periods or ())
