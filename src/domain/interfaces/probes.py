"""Process introspection interfaces."""

from abc import ABC, abstractmethod

from src.domain.entities import PerformanceSnapshot


class PerformanceProbe(ABC):
    """
    Abstract read-only probe of the running process.

    Kept outside the savings engine; only the performance endpoint uses it.
    """

    @abstractmethod
    def snapshot(self) -> PerformanceSnapshot:
        """
        Capture current uptime, memory usage and thread count.

        Returns:
            A PerformanceSnapshot taken at call time
        """
        ...
