"""SQLModel database models."""

from app.models.user import User
from app.models.sick_day import SickDay

__all__ = [
    "User",
    "SickDay",
]
