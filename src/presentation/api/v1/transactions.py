"""Transaction API endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends

from src.application.services import TransactionService
from src.core.dependencies import get_transaction_service
from src.presentation.schemas import (
    EnrichedTransactionSchema,
    ErrorResponseSchema,
    FilterRequestSchema,
    TransactionInputSchema,
    ValidationResultSchema,
    ValidatorRequestSchema,
)

transactions_router = APIRouter(
    prefix="/transactions",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)


@transactions_router.post(
    "/parse",
    response_model=List[EnrichedTransactionSchema],
    summary="Parse raw transactions",
    description="""Rounds each transaction amount up to the nearest 100 and returns the ceiling and remnant.""",
)
async def parse_transactions(
    transactions: List[TransactionInputSchema],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> List[EnrichedTransactionSchema]:
    enriched = transaction_service.parse_transactions(
        [t.to_domain() for t in transactions]
    )
    return [EnrichedTransactionSchema.from_domain(t) for t in enriched]


@transactions_router.post(
    "/validator",
    response_model=ValidationResultSchema,
    summary="Validate transactions against wage",
    description="""
    Checks for duplicates, negative amounts, ceiling/remnant accuracy, and the wage cap.

    Rejections are reported per transaction in `invalidTransactions`.
    """,
)
async def validate_transactions(
    request: ValidatorRequestSchema,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> ValidationResultSchema:
    outcome = transaction_service.validate_transactions(request.to_dto())
    return ValidationResultSchema.from_domain(outcome)


@transactions_router.post(
    "/filter",
    response_model=ValidationResultSchema,
    summary="Validate and filter with period rules",
    description="""Validates transactions and marks whether each falls within a K evaluation period.""",
)
async def filter_transactions(
    request: FilterRequestSchema,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> ValidationResultSchema:
    outcome = transaction_service.filter_transactions(request.to_dto())
    return ValidationResultSchema.from_domain(outcome)
