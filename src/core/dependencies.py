"""Dependency injection for FastAPI."""

from src.application.services import ReturnsService, TransactionService
from src.domain.interfaces import PerformanceProbe
from src.infrastructure.system import PsutilPerformanceProbe


# Infrastructure dependencies
def get_performance_probe() -> PerformanceProbe:
    """Get a PerformanceProbe instance."""
    return PsutilPerformanceProbe()


# Service dependencies
def get_transaction_service() -> TransactionService:
    """Get a TransactionService instance."""
    return TransactionService()


def get_returns_service() -> ReturnsService:
    """Get a ReturnsService instance."""
    return ReturnsService()
