"""Returns API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from src.application.services import ReturnsService
from src.core.dependencies import get_returns_service
from src.presentation.schemas import (
    ErrorResponseSchema,
    ReturnsRequestSchema,
    ReturnsResponseSchema,
)

returns_router = APIRouter(
    prefix="/returns",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Instrument not found"},
    },
)


@returns_router.post(
    "/{instrument}",
    response_model=ReturnsResponseSchema,
    summary="Project investment returns",
    description="""
    Invests the remnant of every expense and projects the returns per K period.

    - `nps`: compounds at 7.11% annually with inflation adjustment and the
      NPS tax benefit.
    - `index`: compounds at 14.49% (NIFTY 50) annually with inflation
      adjustment. No tax benefit.
    """,
    responses={
        200: {"description": "Returns projected successfully"},
    },
)
async def calculate_returns(
    instrument: Annotated[
        str,
        Path(description="Investment instrument: nps or index"),
    ],
    request: ReturnsRequestSchema,
    returns_service: Annotated[ReturnsService, Depends(get_returns_service)],
) -> ReturnsResponseSchema:
    projection = returns_service.calculate_returns(request.to_dto(), instrument)
    return ReturnsResponseSchema.from_domain(projection)
