"""Performance report endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.core.dependencies import get_performance_probe
from src.domain.interfaces import PerformanceProbe
from src.presentation.schemas import PerformanceReportSchema

performance_router = APIRouter(prefix="/performance")


@performance_router.get(
    "",
    response_model=PerformanceReportSchema,
    summary="Performance report",
    description="Returns process uptime, memory usage (%), and live thread count.",
)
async def get_performance_report(
    probe: Annotated[PerformanceProbe, Depends(get_performance_probe)],
) -> PerformanceReportSchema:
    return PerformanceReportSchema.from_domain(probe.snapshot())
