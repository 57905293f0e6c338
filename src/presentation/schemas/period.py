"""Period-related Pydantic schemas (Q, P and K periods)."""

from decimal import Decimal
from typing import Optional

from pydantic import Field

from src.service.savings import BucketPeriod, ExtraPeriod, FixedPeriod
from .common import CamelModel, Timestamp


class PeriodSchema(CamelModel):
    """Closed date-time interval shared by all period kinds."""

    start: Optional[Timestamp] = Field(
        None,
        description="Start of the period, inclusive (yyyy-MM-dd HH:mm:ss)",
        examples=["2023-07-01 00:00:00"],
    )
    end: Optional[Timestamp] = Field(
        None,
        description="End of the period, inclusive (yyyy-MM-dd HH:mm:ss)",
        examples=["2023-07-31 23:59:59"],
    )


class QPeriodSchema(PeriodSchema):
    """Schema for a fixed-override (Q) period."""

    fixed: Decimal = Field(
        ...,
        description="Amount that replaces the remnant of matching transactions",
        examples=[0],
    )

    def to_domain(self) -> FixedPeriod:
        return FixedPeriod(start=self.start, end=self.end, fixed=self.fixed)


class PPeriodSchema(PeriodSchema):
    """Schema for an additive (P) period."""

    extra: Decimal = Field(
        ...,
        description="Amount added to the remnant of matching transactions",
        examples=[25],
    )

    def to_domain(self) -> ExtraPeriod:
        return ExtraPeriod(start=self.start, end=self.end, extra=self.extra)


class KPeriodSchema(PeriodSchema):
    """Schema for an evaluation (K) period."""

    def to_domain(self) -> BucketPeriod:
        return BucketPeriod(start=self.start, end=self.end)
