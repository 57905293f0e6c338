"""Returns-related Pydantic schemas."""

from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from src.application.dto import ReturnsRequest
from src.service.savings import ReturnsProjection, Saving
from .common import CamelModel, Timestamp
from .period import KPeriodSchema, PPeriodSchema, QPeriodSchema
from .transaction import TransactionInputSchema


class ReturnsRequestSchema(CamelModel):
    """Schema for POST /returns/{instrument} request body."""

    age: int = Field(
        ...,
        ge=0,
        description="Investor's age in years",
        examples=[29],
    )
    wage: Decimal = Field(
        ...,
        description="Monthly wage",
        examples=[50000],
    )
    inflation: Decimal = Field(
        ...,
        description="Annual inflation in percent",
        examples=[5.5],
    )
    q: Optional[List[QPeriodSchema]] = None
    p: Optional[List[PPeriodSchema]] = None
    k: Optional[List[KPeriodSchema]] = None
    transactions: Optional[List[TransactionInputSchema]] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "age": 29,
                    "wage": 50000,
                    "inflation": 5.5,
                    "q": [{"fixed": 0, "start": "2023-07-01 00:00:00", "end": "2023-07-31 23:59:59"}],
                    "p": [{"extra": 25, "start": "2023-10-01 08:00:00", "end": "2023-12-31 19:59:59"}],
                    "k": [
                        {"start": "2023-01-01 00:00:00", "end": "2023-12-31 23:59:59"},
                        {"start": "2023-03-01 00:00:00", "end": "2023-11-30 23:59:59"},
                    ],
                    "transactions": [
                        {"date": "2023-02-28 15:49:20", "amount": 375},
                        {"date": "2023-07-01 21:59:00", "amount": 620},
                        {"date": "2023-10-12 20:15:30", "amount": 250},
                        {"date": "2023-12-17 08:09:45", "amount": 480},
                        {"date": "2023-12-18 08:09:45", "amount": -10},
                    ],
                }
            ]
        }
    }

    def to_dto(self) -> ReturnsRequest:
        return ReturnsRequest(
            age=self.age,
            wage=self.wage,
            inflation=self.inflation,
            q=[period.to_domain() for period in self.q or []],
            p=[period.to_domain() for period in self.p or []],
            k=[period.to_domain() for period in self.k or []],
            transactions=[t.to_domain() for t in self.transactions or []],
        )


class SavingSchema(CamelModel):
    """Schema for the projection of one K period."""

    start: Optional[Timestamp] = None
    end: Optional[Timestamp] = None
    amount: float = Field(
        ...,
        description="Invested principal: remnants in the period after Q/P rules",
        examples=[145.0],
    )
    profit: float = Field(
        ...,
        description="Inflation-adjusted gain over the principal",
        examples=[86.88],
    )
    tax_benefit: float = Field(
        ...,
        description="Tax saved through the NPS deduction (0 for index funds)",
        examples=[0.0],
    )

    @classmethod
    def from_domain(cls, saving: Saving) -> "SavingSchema":
        return cls(
            start=saving.period.start,
            end=saving.period.end,
            amount=float(saving.amount),
            profit=float(saving.profit),
            tax_benefit=float(saving.tax_benefit),
        )


class ReturnsResponseSchema(CamelModel):
    """Schema for POST /returns/{instrument} response body."""

    total_transaction_amount: float = Field(
        ...,
        description="Sum of all non-negative expense amounts",
        examples=[1725.0],
    )
    total_ceiling: float = Field(
        ...,
        description="Sum of their ceilings",
        examples=[1900.0],
    )
    savings_by_dates: List[SavingSchema] = Field(
        ...,
        description="One projection per K period, in request order",
    )

    @classmethod
    def from_domain(cls, projection: ReturnsProjection) -> "ReturnsResponseSchema":
        return cls(
            total_transaction_amount=float(projection.total_transaction_amount),
            total_ceiling=float(projection.total_ceiling),
            savings_by_dates=[SavingSchema.from_domain(s) for s in projection.savings_by_dates],
        )
