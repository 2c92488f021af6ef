"""
Statistics endpoints: totals, patterns and streaks over a window.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_today, rate_limit
from app.db.session import get_db
from app.models.user import User
from app.schemas.stats import StatsResponse
from app.services.stats_service import StatsService

router = APIRouter(dependencies=[Depends(rate_limit)])


@router.get(
    "",
    summary="Get statistics for a date range or a calendar year.",
    response_model=StatsResponse,
)
def get_stats(
    start_date: Optional[datetime.date] = Query(
        None, alias="startDate", description="Range start (inclusive)"
    ),
    end_date: Optional[datetime.date] = Query(
        None, alias="endDate", description="Range end (inclusive)"
    ),
    year: Optional[int] = Query(
        None, ge=1, le=9999, description="Calendar year (legacy)"
    ),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    today: datetime.date = Depends(get_today),
):
    service = StatsService(db)

    if start_date and end_date:
        return service.get_range_stats(user.id, start_date, end_date, today)
    if year:
        return service.get_year_stats(user.id, year, today)

    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Either year or date range (startDate and endDate) is required",
    )


@router.get(
    "/rolling",
    summary="Get statistics for the last 12 months.",
    response_model=StatsResponse,
)
def get_rolling_stats(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    today: datetime.date = Depends(get_today),
):
    return StatsService(db).get_rolling_stats(user.id, today)
