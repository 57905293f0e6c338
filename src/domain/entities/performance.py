"""Performance snapshot of the running service process."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PerformanceSnapshot:
    """
    Point-in-time view of process health.

    Attributes:
        uptime: Time since process start, expressed as an offset from the epoch
        memory_percent: Resident memory as a percentage of system memory
        threads: Number of live threads in the process
    """

    uptime: datetime
    memory_percent: float
    threads: int

    @property
    def memory_display(self) -> str:
        """Memory usage formatted with two decimals."""
        return f"{self.memory_percent:.2f}"
