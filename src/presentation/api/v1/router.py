from fastapi import APIRouter

from .transactions import transactions_router
from .returns import returns_router
from .performance import performance_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(transactions_router, tags=["Transactions"])
router.include_router(returns_router, tags=["Returns"])
router.include_router(performance_router, tags=["Performance"])
