"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import debug, grid, stats, users
from app.core.config import settings

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    grid.router, prefix="/grid", tags=["Grid"]
)
api_router.include_router(
    stats.router, prefix="/stats", tags=["Statistics"]
)
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)

if settings.DEBUG:
    api_router.include_router(
        debug.router, prefix="/debug", tags=["Debug"]
    )
