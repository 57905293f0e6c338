"""Domain Entities - Core business objects."""

from .performance import PerformanceSnapshot

__all__ = [
    "PerformanceSnapshot",
]
