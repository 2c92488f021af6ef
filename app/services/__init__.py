"""Business logic services."""

from app.services.user_service import UserService
from app.services.grid_service import GridService
from app.services.stats_service import StatsService

__all__ = [
    "UserService",
    "GridService",
    "StatsService",
]
