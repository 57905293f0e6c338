"""HTTP API routers."""

from fastapi import APIRouter

from src.core.config import settings
from .v1 import router as v1_router

api_router = APIRouter(prefix=settings.api_prefix)
api_router.include_router(v1_router)

__all__ = ["api_router"]
