"""
User statistics schemas.

``UserStats`` is the result of the statistics engine.  Its JSON field
names are camelCase and must stay exactly as they are: the grid front-end
and other existing consumers read them verbatim.

Rounding: every float field is rounded to 2 decimals, half away from zero.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserStats(BaseModel):
    """Descriptive statistics over one window of sick-day records.

    Derived and immutable: recomputed on every request, never persisted.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    # Overall
    total_sick_days: int = Field(..., ge=0, description="Records with intensity > 0 in the window")
    percentage_of_year: float = Field(..., ge=0, description="Sick days / window length in days x 100")
    year_to_date_percentage: float = Field(..., ge=0, description="Same ratio from Jan 1 of the current year to today", )
    average_intensity: float = Field(..., ge=0, description="Mean intensity across sick days")

    # Pattern
    most_common_day: str = Field(..., description="Weekday with most sick days, or 'None'")
    recovery_rate: float = Field(..., ge=0, description="Mean number of healthy days between streaks")

    # Streaks
    current_streak: int = Field(..., ge=0, description="Streak ending today or yesterday, else 0")
    longest_streak: int = Field(..., ge=0, description="Longest streak in the window")
    average_sick_streak: float = Field(..., ge=0, description="Mean streak length")


class StatsResponse(BaseModel):
    """Stats payload returned by the stats endpoints."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    stats: UserStats
    start_date: datetime.date = Field(..., description="Window start (inclusive)")
    end_date: datetime.date = Field(..., description="Window end (inclusive)")
