"""
Stats service.

Fetches a user's squares from storage and hands them to the statistics
engine.  The engine's year-to-date figure always refers to the current
calendar year, so the fetched span covers both the requested window and
``[Jan 1, today]``.
"""

import datetime
import logging

from sqlmodel import Session

from app.db.repositories.sick_day import SickDayRepository
from app.schemas.sick_day import SickDayRecord
from app.schemas.stats import StatsResponse
from app.sicksquares.exceptions import InvalidWindowError
from app.sicksquares.statistics import compute_stats
from app.sicksquares.window import Window

logger = logging.getLogger(__name__)


class StatsService:
    """Service for user statistics."""

    def __init__(self, session: Session):
        self.repository = SickDayRepository(session)

    def get_year_stats(self, user_id: int, year: int, today: datetime.date) -> StatsResponse:
        return self.get_window_stats(user_id, Window.for_year(year), today)

    def get_range_stats(
        self, user_id: int, start: datetime.date, end: datetime.date, today: datetime.date,
    ) -> StatsResponse:
        return self.get_window_stats(user_id, Window(start=start, end=end), today)

    def get_rolling_stats(self, user_id: int, today: datetime.date) -> StatsResponse:
        return self.get_window_stats(user_id, Window.rolling_12_months(today), today)

    def get_window_stats(self, user_id: int, window: Window, today: datetime.date) -> StatsResponse:
        """Compute stats for ``window``.

        Raises:
            InvalidWindowError: If the window is reversed (before any query).
            InvalidIntensityError: If storage returned an out-of-range square.
        """
        if window.is_reversed:
            raise InvalidWindowError(window.start, window.end)

        span = window.span(Window.year_to_date(today))
        rows = self.repository.get_by_user_date_range(user_id, span.start, span.end)
        records = [SickDayRecord(date=row.date, intensity=row.intensity) for row in rows]

        stats = compute_stats(records, window, today)
        logger.debug("Stats for user %s over %s..%s: %s sick days", user_id, window.start, window.end,
                     stats.total_sick_days)
        return StatsResponse(stats=stats, start_date=window.start, end_date=window.end)
