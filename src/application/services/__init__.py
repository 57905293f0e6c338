"""Application services (use cases)."""

from .transaction_service import TransactionService
from .returns_service import ReturnsService

__all__ = [
    "TransactionService",
    "ReturnsService",
]
