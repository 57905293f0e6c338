"""
Data models for the savings engine.

These models represent the data structures used throughout the savings
pipeline, from raw expenses to validated batches and returns projections.
All of them are request-scoped value objects.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from .money import HUNDRED, round_up_to_multiple


class InvestmentMode(str, Enum):
    """Investment instrument used for a returns projection."""
    NPS = "nps"      # Pension instrument, tax benefit enabled
    INDEX = "index"  # Index fund proxy, no tax benefit

    @property
    def tax_benefit_enabled(self) -> bool:
        return self is InvestmentMode.NPS


@dataclass(frozen=True)
class EnrichedTransaction:
    """
    An expense together with its round-up data.

    Attributes:
        date: When the expense happened
        amount: Expense amount
        ceiling: Amount rounded up to the next multiple of 100
        remnant: ceiling - amount, the spare change to be invested
    """
    date: Optional[datetime]
    amount: Optional[Decimal]
    ceiling: Optional[Decimal]
    remnant: Optional[Decimal]


@dataclass(frozen=True)
class RawTransaction:
    """
    An expense as reported by the caller.

    Attributes:
        date: When the expense happened
        amount: Expense amount
    """
    date: Optional[datetime]
    amount: Optional[Decimal]

    def enrich(self, multiple: Decimal = HUNDRED) -> EnrichedTransaction:
        """Attach ceiling and remnant; a missing amount leaves both unset."""
        if self.amount is None:
            return EnrichedTransaction(self.date, None, None, None)
        ceiling = round_up_to_multiple(self.amount, multiple)
        return EnrichedTransaction(
            date=self.date,
            amount=self.amount,
            ceiling=ceiling,
            remnant=ceiling - self.amount,
        )


@dataclass(frozen=True)
class Period:
    """
    A closed date-time interval [start, end].

    A period with a missing boundary never matches anything, and neither
    does a moment whose UTC awareness differs from the boundaries.
    """
    start: Optional[datetime]
    end: Optional[datetime]

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None

    def contains(self, moment: Optional[datetime]) -> bool:
        if moment is None or not self.is_bounded:
            return False
        aware = {d.tzinfo is not None for d in (self.start, self.end, moment)}
        if len(aware) > 1:
            return False
        return self.start <= moment <= self.end


@dataclass(frozen=True)
class FixedPeriod(Period):
    """Replaces the remnant of every matching transaction with ``fixed``."""
    fixed: Decimal = Decimal("0")


@dataclass(frozen=True)
class ExtraPeriod(Period):
    """Adds ``extra`` to the remnant of every matching transaction."""
    extra: Decimal = Decimal("0")


@dataclass(frozen=True)
class BucketPeriod(Period):
    """Groups transactions for aggregation; carries no payload."""


@dataclass(frozen=True)
class ValidTransaction:
    """An accepted transaction, flagged with evaluation bucket membership."""
    date: datetime
    amount: Decimal
    ceiling: Decimal
    remnant: Decimal
    in_bucket: bool = False


@dataclass(frozen=True)
class InvalidTransaction:
    """A rejected transaction and the reason it was rejected."""
    date: Optional[datetime]
    amount: Optional[Decimal]
    message: str


@dataclass
class ValidationOutcome:
    """
    Partition of a batch into accepted and rejected transactions.

    Both lists keep the input order.
    """
    valid_transactions: List[ValidTransaction] = field(default_factory=list)
    invalid_transactions: List[InvalidTransaction] = field(default_factory=list)


@dataclass(frozen=True)
class Saving:
    """
    Projection for a single bucket period.

    Attributes:
        period: The bucket the figures belong to
        amount: Summed remnants after Q/P rules (the invested principal)
        profit: Inflation-adjusted gain over the principal
        tax_benefit: Tax saved through the NPS deduction (0 for index funds)
    """
    period: BucketPeriod
    amount: Decimal
    profit: Decimal
    tax_benefit: Decimal


@dataclass
class ReturnsProjection:
    """
    Result of a returns projection.

    Attributes:
        total_transaction_amount: Sum of all non-negative expense amounts
        total_ceiling: Sum of their ceilings
        savings_by_dates: One entry per bucket period, in input order
    """
    total_transaction_amount: Decimal
    total_ceiling: Decimal
    savings_by_dates: List[Saving] = field(default_factory=list)
