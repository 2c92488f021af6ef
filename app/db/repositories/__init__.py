"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.sick_day import SickDayRepository

__all__ = [
    "UserRepository",
    "SickDayRepository",
]
