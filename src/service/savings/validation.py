"""
Transaction Validation for the Self Savings Planner.

This module checks a batch of enriched transactions against the business
rules before any of it is invested:
1. The wage itself must be non-negative (otherwise the whole batch fails)
2. Date and amount must be present
3. No duplicate (date, amount) pair among accepted transactions
4. Amount must be non-negative and within the wage
5. Supplied ceiling and remnant must match the round-up rule
6. Accepted amounts together must stay within the wage

Rules are checked in that order and the first failing rule decides the
rejection reason. Rejections are data, not exceptions.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence, Set, Tuple

from .models import (
    BucketPeriod,
    EnrichedTransaction,
    InvalidTransaction,
    ValidationOutcome,
    ValidTransaction,
)
from .money import ZERO, round_up_to_multiple
from .periods import in_any_bucket
from .settings import SavingsSettings, savings_settings

WAGE_NEGATIVE = "Wage must be >= 0"
DATE_MISSING = "Date must not be null"
AMOUNT_MISSING = "Amount must not be null"
DUPLICATE = "Duplicate transaction"
AMOUNT_NEGATIVE = "Amount must be >= 0"
AMOUNT_EXCEEDS_WAGE = "Amount exceeds wage"
CEILING_MISMATCH = "Ceiling mismatch"
REMNANT_MISMATCH = "Remnant mismatch"
TOTAL_EXCEEDS_WAGE = "Total exceeds wage"


def _differs(
    supplied: Optional[Decimal],
    expected: Decimal,
    tolerance: Decimal,
) -> bool:
    if supplied is None:
        return True
    return abs(supplied - expected) > tolerance


def _rejection_reason(
    txn: EnrichedTransaction,
    wage: Decimal,
    running_sum: Decimal,
    seen: Set[Tuple[datetime, Decimal]],
    settings: SavingsSettings,
) -> Optional[str]:
    """Return the first rule the transaction breaks, or None if it passes."""
    if txn.date is None:
        return DATE_MISSING
    if txn.amount is None:
        return AMOUNT_MISSING
    if (txn.date, txn.amount) in seen:
        return DUPLICATE
    if txn.amount < ZERO:
        return AMOUNT_NEGATIVE
    if txn.amount > wage:
        return AMOUNT_EXCEEDS_WAGE

    expected_ceiling = round_up_to_multiple(txn.amount, settings.rounding_multiple)
    expected_remnant = expected_ceiling - txn.amount
    if _differs(txn.ceiling, expected_ceiling, settings.comparison_tolerance):
        return CEILING_MISMATCH
    if _differs(txn.remnant, expected_remnant, settings.comparison_tolerance):
        return REMNANT_MISMATCH

    if running_sum + txn.amount > wage:
        return TOTAL_EXCEEDS_WAGE
    return None


def validate(
    wage: Decimal,
    transactions: Optional[Sequence[EnrichedTransaction]],
    bucket_periods: Optional[Sequence[BucketPeriod]] = None,
    settings: SavingsSettings = savings_settings,
) -> ValidationOutcome:
    """
    Split a batch into valid and invalid transactions.

    Transactions are examined in input order against a running total of
    accepted amounts, so a transaction within the wage on its own can still
    be rejected once earlier ones have used up the budget. Only accepted
    transactions count toward duplicate detection.

    Raw transactions must go through ``enrich()`` first; the supplied
    ceiling and remnant are always checked.

    Args:
        wage: Monthly wage, the cap on the accepted total
        transactions: Enriched transactions in input order
        bucket_periods: Optional K periods used to flag bucket membership
        settings: Savings settings (uses defaults if not provided)

    Returns:
        ValidationOutcome with both lists in input order
    """
    if wage < ZERO:
        return ValidationOutcome(
            valid_transactions=[],
            invalid_transactions=[InvalidTransaction(None, wage, WAGE_NEGATIVE)],
        )

    outcome = ValidationOutcome()
    if not transactions:
        return outcome

    running_sum = ZERO
    seen: Set[Tuple[datetime, Decimal]] = set()

    for txn in transactions:
        reason = _rejection_reason(txn, wage, running_sum, seen, settings)
        if reason is not None:
            outcome.invalid_transactions.append(
                InvalidTransaction(txn.date, txn.amount, reason)
            )
            continue

        running_sum += txn.amount
        seen.add((txn.date, txn.amount))
        outcome.valid_transactions.append(
            ValidTransaction(
                date=txn.date,
                amount=txn.amount,
                ceiling=txn.ceiling,
                remnant=txn.remnant,
                in_bucket=in_any_bucket(txn.date, bucket_periods),
            )
        )

    return outcome
