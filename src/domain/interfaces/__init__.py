"""
Domain Interfaces (Ports)
"""

from .probes import PerformanceProbe

__all__ = [
    "PerformanceProbe",
]
