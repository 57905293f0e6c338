"""Pydantic schemas for API request/response validation."""

from .period import QPeriodSchema, PPeriodSchema, KPeriodSchema
from .transaction import (
    TransactionInputSchema,
    EnrichedTransactionSchema,
    EnrichedTransactionInputSchema,
    ValidatorRequestSchema,
    FilterRequestSchema,
    ValidationResultSchema,
)
from .returns import ReturnsRequestSchema, ReturnsResponseSchema, SavingSchema
from .performance import PerformanceReportSchema
from .error import ErrorResponseSchema

__all__ = [
    "QPeriodSchema",
    "PPeriodSchema",
    "KPeriodSchema",
    "TransactionInputSchema",
    "EnrichedTransactionSchema",
    "EnrichedTransactionInputSchema",
    "ValidatorRequestSchema",
    "FilterRequestSchema",
    "ValidationResultSchema",
    "ReturnsRequestSchema",
    "ReturnsResponseSchema",
    "SavingSchema",
    "PerformanceReportSchema",
    "ErrorResponseSchema",
]
