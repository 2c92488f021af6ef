"""
Sick day repository.

Handles database operations for SickDay model.
"""

import datetime
import logging
from typing import Optional

from sqlalchemy import extract, func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.models.sick_day import SickDay

logger = logging.getLogger(__name__)


class SickDayRepository:
    """Repository for SickDay database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user_and_date(
        self, user_id: int, date: datetime.date,
    ) -> Optional[SickDay]:
        """Get the square for a user on a specific date."""
        statement = select(SickDay).where(
            SickDay.user_id == user_id,
            SickDay.date == date,
        )
        return self.session.exec(statement).first()

    def get_by_user_date_range(
        self, user_id: int, start: datetime.date, end: datetime.date,
    ) -> list[SickDay]:
        """Get squares for a user within a date range (inclusive)."""
        statement = (
            select(SickDay)
            .where(
                SickDay.user_id == user_id,
                SickDay.date >= start,
                SickDay.date <= end,
            )
            .order_by(SickDay.date)
        )
        return list(self.session.exec(statement).all())

    def get_by_user_year(self, user_id: int, year: int) -> list[SickDay]:
        """Get squares for a user within one calendar year."""
        statement = (
            select(SickDay)
            .where(
                SickDay.user_id == user_id,
                extract("year", SickDay.date) == year,
            )
            .order_by(SickDay.date)
        )
        return list(self.session.exec(statement).all())

    def get_latest_by_user(
        self, user_id: int, limit: int = 10,
    ) -> list[SickDay]:
        """Get the most recent squares for a user, ordered by date descending."""
        statement = (
            select(SickDay)
            .where(SickDay.user_id == user_id)
            .order_by(SickDay.date.desc())
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def count_by_user(self, user_id: int) -> int:
        statement = select(func.count()).select_from(SickDay).where(SickDay.user_id == user_id)
        return self.session.exec(statement).one()

    def upsert(
        self, user_id: int, date: datetime.date, intensity: int,
    ) -> tuple[SickDay, bool]:
        """Set the intensity of a square; last write wins.

        Returns:
            Tuple of (entry, created) where created is True if new entry.
        """
        existing = self.get_by_user_and_date(user_id, date)
        if existing:
            return self._update_intensity(existing, intensity), False

        entry = SickDay(user_id=user_id, date=date, intensity=intensity)
        self.session.add(entry)
        try:
            self.session.commit()
        except IntegrityError:
            # A concurrent request inserted the same (user, date) first.
            self.session.rollback()
            logger.debug("Concurrent insert for user %s on %s, updating instead", user_id, date)
            existing = self.get_by_user_and_date(user_id, date)
            if existing is None:
                raise
            return self._update_intensity(existing, intensity), False

        self.session.refresh(entry)
        return entry, True

    def _update_intensity(self, entry: SickDay, intensity: int) -> SickDay:
        entry.intensity = intensity
        entry.updated_at = datetime.datetime.now(datetime.timezone.utc)
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry
