"""Data transfer objects for transaction operations."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from src.service.savings import (
    BucketPeriod,
    EnrichedTransaction,
    RawTransaction,
)


@dataclass(frozen=True)
class ValidatorRequest:
    """Input for validating already enriched transactions against a wage."""
    wage: Optional[Decimal]
    transactions: List[EnrichedTransaction] = field(default_factory=list)

    @property
    def effective_wage(self) -> Decimal:
        """A missing wage counts as zero."""
        return self.wage if self.wage is not None else Decimal("0")


@dataclass(frozen=True)
class FilterRequest:
    """
    Input for validating raw transactions and tagging K-period membership.

    Q and P rules only shape projections, so filtering takes K periods alone.
    """
    wage: Optional[Decimal]
    transactions: List[RawTransaction] = field(default_factory=list)
    k: List[BucketPeriod] = field(default_factory=list)

    @property
    def effective_wage(self) -> Decimal:
        """A missing wage counts as zero."""
        return self.wage if self.wage is not None else Decimal("0")
