"""psutil implementation of PerformanceProbe."""

import time
from datetime import datetime, timezone

import psutil
import structlog

from src.domain.entities import PerformanceSnapshot
from src.domain.interfaces import PerformanceProbe

logger = structlog.get_logger(__name__)


class PsutilPerformanceProbe(PerformanceProbe):
    """
    Reads uptime, memory and thread count of the current process.

    Uptime is the elapsed time added to the Unix epoch, so one hour of
    uptime reads 1970-01-01 01:00:00.
    """

    def __init__(self, process: psutil.Process | None = None):
        self._process = process or psutil.Process()

    def snapshot(self) -> PerformanceSnapshot:
        with self._process.oneshot():
            uptime_seconds = max(0.0, time.time() - self._process.create_time())
            memory_percent = self._process.memory_percent()
            threads = self._process.num_threads()

        uptime = datetime.fromtimestamp(uptime_seconds, tz=timezone.utc).replace(tzinfo=None)

        logger.debug(
            "performance_snapshot",
            uptime_seconds=round(uptime_seconds, 3),
            memory_percent=round(memory_percent, 2),
            threads=threads,
        )

        return PerformanceSnapshot(
            uptime=uptime,
            memory_percent=memory_percent,
            threads=threads,
        )
