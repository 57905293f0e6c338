"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .instrument import InstrumentNotFoundException

__all__ = [
    "DomainException",
    "InstrumentNotFoundException",
]
