"""Transaction-related Pydantic schemas."""

from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from src.application.dto import FilterRequest, ValidatorRequest
from src.service.savings import (
    EnrichedTransaction,
    InvalidTransaction,
    RawTransaction,
    ValidationOutcome,
    ValidTransaction,
)
from .common import CamelModel, Timestamp
from .period import KPeriodSchema, PPeriodSchema, QPeriodSchema


def _to_float(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


class TransactionInputSchema(CamelModel):
    """Schema for a raw expense."""

    date: Optional[Timestamp] = Field(
        None,
        description="When the expense happened (yyyy-MM-dd HH:mm:ss)",
        examples=["2023-02-28 15:49:20"],
    )
    amount: Optional[Decimal] = Field(
        None,
        description="Expense amount",
        examples=[375],
    )

    def to_domain(self) -> RawTransaction:
        return RawTransaction(date=self.date, amount=self.amount)


class EnrichedTransactionInputSchema(TransactionInputSchema):
    """Schema for an expense whose round-up data the caller already computed."""

    ceiling: Optional[Decimal] = Field(
        None,
        description="Amount rounded up to the next multiple of 100",
        examples=[400],
    )
    remnant: Optional[Decimal] = Field(
        None,
        description="ceiling - amount",
        examples=[25],
    )

    def to_domain(self) -> EnrichedTransaction:
        return EnrichedTransaction(
            date=self.date,
            amount=self.amount,
            ceiling=self.ceiling,
            remnant=self.remnant,
        )


class EnrichedTransactionSchema(CamelModel):
    """Response schema for an expense with its round-up data."""

    date: Optional[Timestamp] = Field(
        None,
        description="When the expense happened (yyyy-MM-dd HH:mm:ss)",
        examples=["2023-02-28 15:49:20"],
    )
    amount: Optional[float] = Field(
        None,
        description="Expense amount",
        examples=[375],
    )
    ceiling: Optional[float] = Field(
        None,
        description="Amount rounded up to the next multiple of 100",
        examples=[400],
    )
    remnant: Optional[float] = Field(
        None,
        description="ceiling - amount",
        examples=[25],
    )

    @classmethod
    def from_domain(cls, txn: EnrichedTransaction) -> "EnrichedTransactionSchema":
        return cls(
            date=txn.date,
            amount=_to_float(txn.amount),
            ceiling=_to_float(txn.ceiling),
            remnant=_to_float(txn.remnant),
        )


class ValidTransactionSchema(CamelModel):
    """Schema for an accepted transaction."""

    date: Timestamp
    amount: float
    ceiling: float
    remnant: float
    in_k_period: bool = Field(
        False,
        description="Whether the transaction falls inside any K period",
    )

    @classmethod
    def from_domain(cls, txn: ValidTransaction) -> "ValidTransactionSchema":
        return cls(
            date=txn.date,
            amount=float(txn.amount),
            ceiling=float(txn.ceiling),
            remnant=float(txn.remnant),
            in_k_period=txn.in_bucket,
        )


class InvalidTransactionSchema(CamelModel):
    """Schema for a rejected transaction."""

    date: Optional[Timestamp] = None
    amount: Optional[float] = None
    message: str = Field(
        ...,
        description="Why the transaction was rejected",
        examples=["Duplicate transaction"],
    )

    @classmethod
    def from_domain(cls, txn: InvalidTransaction) -> "InvalidTransactionSchema":
        return cls(date=txn.date, amount=_to_float(txn.amount), message=txn.message)


class ValidatorRequestSchema(CamelModel):
    """Schema for POST /transactions/validator request body."""

    wage: Optional[Decimal] = Field(
        None,
        description="Monthly wage; caps the total of accepted transactions",
        examples=[50000],
    )
    transactions: Optional[List[EnrichedTransactionInputSchema]] = Field(
        None,
        description="Enriched transactions to validate",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "wage": 50000,
                    "transactions": [
                        {"date": "2023-02-28 15:49:20", "amount": 375, "ceiling": 400, "remnant": 25},
                        {"date": "2023-07-01 21:59:00", "amount": 620, "ceiling": 700, "remnant": 80},
                    ],
                }
            ]
        }
    }

    def to_dto(self) -> ValidatorRequest:
        return ValidatorRequest(
            wage=self.wage,
            transactions=[t.to_domain() for t in self.transactions or []],
        )


class FilterRequestSchema(CamelModel):
    """Schema for POST /transactions/filter request body."""

    # Accepted for wire compatibility; filtering ignores Q and P rules
    q: Optional[List[QPeriodSchema]] = None
    p: Optional[List[PPeriodSchema]] = None
    k: Optional[List[KPeriodSchema]] = None
    wage: Optional[Decimal] = Field(
        None,
        description="Monthly wage; caps the total of accepted transactions",
        examples=[50000],
    )
    transactions: Optional[List[TransactionInputSchema]] = Field(
        None,
        description="Raw expenses; ceiling and remnant are computed server side",
    )

    def to_dto(self) -> FilterRequest:
        return FilterRequest(
            wage=self.wage,
            transactions=[t.to_domain() for t in self.transactions or []],
            k=[period.to_domain() for period in self.k or []],
        )


class ValidationResultSchema(CamelModel):
    """Schema for validator and filter responses."""

    valid_transactions: List[ValidTransactionSchema]
    invalid_transactions: List[InvalidTransactionSchema]

    @classmethod
    def from_domain(cls, outcome: ValidationOutcome) -> "ValidationResultSchema":
        return cls(
            valid_transactions=[
                ValidTransactionSchema.from_domain(t) for t in outcome.valid_transactions
            ],
            invalid_transactions=[
                InvalidTransactionSchema.from_domain(t) for t in outcome.invalid_transactions
            ],
        )
