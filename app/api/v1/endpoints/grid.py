"""
Grid endpoints.

Read stored squares, render the calendar grid and set a square's
intensity (date-based upsert).
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_today, rate_limit
from app.db.session import get_db
from app.models.user import User
from app.schemas.sick_day import CalendarResponse, GridResponse, SickDayResponse, SickDayUpsert, SquareResponse
from app.services.grid_service import GridService
from app.sicksquares.date_range import GridMode
from app.sicksquares.window import Window

router = APIRouter(dependencies=[Depends(rate_limit)])


@router.get("", summary="List stored squares for a year or a date range.", response_model=GridResponse, )
def list_squares(year: Optional[int] = Query(None, ge=1, le=9999, description="Calendar year"),
                 start_date: Optional[datetime.date] = Query(None, alias="startDate",
                                                             description="Range start (inclusive)"),
                 end_date: Optional[datetime.date] = Query(None, alias="endDate", description="Range end (inclusive)"),
                 db: Session = Depends(get_db), user: User = Depends(get_current_user),
                 today: datetime.date = Depends(get_today), ):
    """
    Filter precedence:
    - startDate + endDate: squares in that range
    - year: squares in that calendar year
    - no filters: squares in the current year
    """
    service = GridService(db)

    if start_date and end_date:
        entries = service.get_records(user.id, Window(start=start_date, end=end_date))
    else:
        entries = service.get_year_records(user.id, year or today.year)

    return GridResponse(grid_data=[SickDayResponse.model_validate(e) for e in entries])


@router.get("/calendar", summary="Calendar grid of complete weeks with stored intensities.",
            response_model=CalendarResponse, )
def get_calendar(mode: GridMode = Query(GridMode.ROLLING, description="'rolling' (last 12 months) or 'year'"),
                 year: Optional[int] = Query(None, ge=2, le=9998, description="Target year for 'year' mode"),
                 db: Session = Depends(get_db), user: User = Depends(get_current_user),
                 today: datetime.date = Depends(get_today), ):
    return GridService(db).get_calendar(user.id, mode, today, year)


@router.post("", summary="Set the intensity of one square.", response_model=SquareResponse, )
def upsert_square(data: SickDayUpsert, response: Response, db: Session = Depends(get_db),
                  user: User = Depends(get_current_user), today: datetime.date = Depends(get_today), ):
    """Upsert: creates the square if it doesn't exist, overwrites its intensity if it does."""
    entry, created = GridService(db).upsert_square(user.id, data.date, data.intensity, today)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return SquareResponse(square=SickDayResponse.model_validate(entry))
