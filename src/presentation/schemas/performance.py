"""Pydantic schema for the performance report."""

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer

from src.domain.entities import PerformanceSnapshot


class PerformanceReportSchema(BaseModel):
    """Schema for GET /performance response body."""

    time: datetime = Field(
        ...,
        description="Process uptime as an offset from the epoch (yyyy-MM-dd HH:mm:ss.SSS)",
        examples=["1970-01-01 00:11:54.135"],
    )
    memory: str = Field(
        ...,
        description="Resident memory as a percentage of system memory",
        examples=["25.11"],
    )
    threads: int = Field(
        ...,
        ge=0,
        description="Live threads in the process",
        examples=[16],
    )

    @field_serializer("time")
    def serialize_time(self, value: datetime) -> str:
        return value.strftime("%Y-%m-%d %H:%M:%S.") + f"{value.microsecond // 1000:03d}"

    @classmethod
    def from_domain(cls, snapshot: PerformanceSnapshot) -> "PerformanceReportSchema":
        return cls(
            time=snapshot.uptime,
            memory=snapshot.memory_display,
            threads=snapshot.threads,
        )
