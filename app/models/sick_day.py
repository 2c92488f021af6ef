"""
Sick day database model.

Defines the user_grids table: one square per user per calendar date.
"""

import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class SickDay(SQLModel, table=True):
    """
    Daily sick intensity entry.

    ``intensity`` goes from 0 (no symptoms) to 4.
    One entry per user per day (enforced by unique constraint).
    """
    __tablename__ = "user_grids"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_user_grids_user_date"),
        CheckConstraint("intensity >= 0 AND intensity <= 4", name="ck_user_grids_intensity"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(sa_column=Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
                                          index=True))
    date: datetime.date = Field(nullable=False, index=True)
    intensity: int = Field(default=0, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=_utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime.datetime = Field(default_factory=_utcnow, sa_type=DateTime(timezone=True))
