"""
Transaction enrichment for the Self Savings Planner.

Every expense is rounded up to the next multiple of 100; the difference
is the remnant that gets invested. Example: 375 -> ceiling 400, remnant 25.
"""

from typing import List, Sequence

from .models import EnrichedTransaction, RawTransaction
from .settings import SavingsSettings, savings_settings


def enrich(
    transactions: Sequence[RawTransaction],
    settings: SavingsSettings = savings_settings,
) -> List[EnrichedTransaction]:
    """
    Attach ceiling and remnant to each transaction.

    No validation happens here: negative amounts go through the same
    formula (their ceiling rounds toward positive infinity) and missing
    amounts produce missing ceiling/remnant.

    Args:
        transactions: Raw expenses in input order
        settings: Savings settings (uses defaults if not provided)

    Returns:
        Enriched transactions, same order and length as the input
    """
    return [txn.enrich(settings.rounding_multiple) for txn in transactions]
