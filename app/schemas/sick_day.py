"""
Sick day (grid square) API schemas.

Pydantic models for square request/response validation and for the
records handed to the statistics engine.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MIN_INTENSITY = 0
MAX_INTENSITY = 4


# ---------------------------------------------------------------------------
# Engine input
# ---------------------------------------------------------------------------

class SickDayRecord(BaseModel):
    """One ``(date, intensity)`` pair, already scoped to a single user.

    The range of ``intensity`` is deliberately not constrained here: the
    write boundary validates it, and the engine rejects bad values itself.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    intensity: int


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class SickDayUpsert(BaseModel):
    """Schema for setting the intensity of one grid square."""

    date: datetime.date = Field(..., description="Calendar date of the square (YYYY-MM-DD)")
    intensity: int = Field(..., ge=MIN_INTENSITY, le=MAX_INTENSITY, description="0 (healthy) to 4 (worst)", )


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class SickDayResponse(BaseModel):
    """A stored grid square."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    user_id: int
    date: datetime.date
    intensity: int
    created_at: datetime.datetime
    updated_at: datetime.datetime


class GridResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    grid_data: list[SickDayResponse]


class SquareResponse(BaseModel):
    square: SickDayResponse


class CalendarDay(BaseModel):
    """One cell of the rendered calendar grid."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: datetime.date
    intensity: int = Field(0, ge=MIN_INTENSITY, le=MAX_INTENSITY)
    editable: bool = Field(..., description="False for future dates and dates outside the target window")
    in_window: bool = Field(..., description="Whether the date lies inside the real (unpadded) window")


class MonthLabel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    month: str
    week_index: int


class CalendarResponse(BaseModel):
    """Full calendar grid: complete weeks starting on Sunday."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    mode: str
    year: Optional[int] = None
    start_date: datetime.date
    end_date: datetime.date
    weeks: list[list[CalendarDay]]
    month_labels: list[MonthLabel]
