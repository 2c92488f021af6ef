"""Pydantic schemas for request/response validation."""

from app.schemas.sick_day import (
    CalendarDay,
    CalendarResponse,
    GridResponse,
    MonthLabel,
    SickDayRecord,
    SickDayResponse,
    SickDayUpsert,
    SquareResponse,
)
from app.schemas.stats import StatsResponse, UserStats
from app.schemas.user import PublicProfileResponse, PublicUserResponse, UserResponse, UserUpdate

__all__ = [
    "CalendarDay",
    "CalendarResponse",
    "GridResponse",
    "MonthLabel",
    "SickDayRecord",
    "SickDayResponse",
    "SickDayUpsert",
    "SquareResponse",
    "StatsResponse",
    "UserStats",
    "PublicProfileResponse",
    "PublicUserResponse",
    "UserResponse",
    "UserUpdate",
]
