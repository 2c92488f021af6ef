"""
Grid service.

Business logic for reading and writing grid squares, and for laying the
stored squares out on the calendar grid.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.sick_day import SickDayRepository
from app.models.sick_day import SickDay
from app.schemas.sick_day import CalendarDay, CalendarResponse, MonthLabel
from app.sicksquares import date_range
from app.sicksquares.date_range import GridMode
from app.sicksquares.window import Window

logger = logging.getLogger(__name__)


class GridService:
    """Service for grid squares."""

    def __init__(self, session: Session):
        self.repository = SickDayRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_records(self, user_id: int, window: Window) -> list[SickDay]:
        if window.is_reversed:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="endDate must not be before startDate",
            )
        return self.repository.get_by_user_date_range(user_id, window.start, window.end)

    def get_year_records(self, user_id: int, year: int) -> list[SickDay]:
        return self.repository.get_by_user_year(user_id, year)

    def get_calendar(
        self, user_id: int, mode: GridMode, today: datetime.date, year: Optional[int] = None,
    ) -> CalendarResponse:
        """Lay the user's squares out on complete calendar weeks.

        Dates without a stored square have intensity 0.  Padding days
        (after ``today``, or outside the target year in ``year`` mode) are
        marked non-editable.
        """
        dates = date_range.generate(mode, today, year)
        window = date_range.grid_window(mode, today, year)

        stored = {
            entry.date: entry.intensity
            for entry in self.repository.get_by_user_date_range(user_id, dates[0], dates[-1])
        }

        days = []
        for date in dates:
            in_window = window.contains(date)
            days.append(CalendarDay(
                date=date,
                intensity=stored.get(date, 0),
                editable=in_window and date <= today,
                in_window=in_window,
            ))

        return CalendarResponse(
            mode=mode.value,
            year=window.start.year if mode == GridMode.YEAR else None,
            start_date=dates[0],
            end_date=dates[-1],
            weeks=date_range.chunk_weeks(days),
            month_labels=[MonthLabel(month=m, week_index=w) for m, w in date_range.month_labels(dates)],
        )

    def upsert_square(
        self, user_id: int, date: datetime.date, intensity: int, today: datetime.date,
    ) -> tuple[SickDay, bool]:
        """Set the intensity of one square.

        Returns:
            Tuple of (entry, created) where created is True if new entry.

        Raises:
            HTTPException 400: If ``date`` is in the future.
        """
        if date > today:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Cannot set a future date ({date})",
            )

        entry, created = self.repository.upsert(user_id, date, intensity)
        logger.info("User %s set %s to intensity %s (%s)", user_id, date, intensity,
                    "created" if created else "updated")
        return entry, created
