"""API router aggregator."""
from fastapi import APIRouter

from accounts.api.routes import health, user_v1

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(user_v1.router)

__all__ = ["api_router"]
