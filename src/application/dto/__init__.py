"""Data Transfer Objects for application layer."""

from .transaction import ValidatorRequest, FilterRequest
from .returns import ReturnsRequest

__all__ = [
    "ValidatorRequest",
    "FilterRequest",
    "ReturnsRequest",
]
