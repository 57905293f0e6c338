"""Process introspection implementations."""

from .performance_probe import PsutilPerformanceProbe

__all__ = [
    "PsutilPerformanceProbe",
]
