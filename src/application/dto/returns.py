"""Data transfer objects for returns projection operations."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from src.service.savings import (
    BucketPeriod,
    ExtraPeriod,
    FixedPeriod,
    RawTransaction,
)


@dataclass(frozen=True)
class ReturnsRequest:
    """Input for projecting returns of the invested remnants."""
    age: int
    wage: Decimal
    inflation: Decimal
    q: List[FixedPeriod] = field(default_factory=list)
    p: List[ExtraPeriod] = field(default_factory=list)
    k: List[BucketPeriod] = field(default_factory=list)
    transactions: List[RawTransaction] = field(default_factory=list)
