"""
Date windows over which statistics are computed.

A :class:`Window` is an inclusive ``[start, end]`` interval of calendar
dates.  No time-of-day or timezone is involved anywhere: "today" is
resolved to a plain :class:`datetime.date` by the caller.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict

# Rolling windows reach back this many days before ``today`` (inclusive),
# i.e. they span 366 calendar days.
ROLLING_WINDOW_DAYS = 365


class Window(BaseModel):
    """Inclusive date interval.

    A reversed window can be constructed; the statistics engine rejects it
    with :class:`~app.sicksquares.exceptions.InvalidWindowError`.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime.date
    end: datetime.date

    @classmethod
    def for_year(cls, year: int) -> Window:
        return cls(start=datetime.date(year, 1, 1), end=datetime.date(year, 12, 31))

    @classmethod
    def rolling_12_months(cls, today: datetime.date) -> Window:
        return cls(start=today - datetime.timedelta(days=ROLLING_WINDOW_DAYS), end=today)

    @classmethod
    def year_to_date(cls, today: datetime.date) -> Window:
        return cls(start=datetime.date(today.year, 1, 1), end=today)

    @property
    def is_reversed(self) -> bool:
        return self.end < self.start

    @property
    def length_days(self) -> int:
        """Inclusive number of calendar days in the window."""
        return (self.end - self.start).days + 1

    def contains(self, date: datetime.date) -> bool:
        return self.start <= date <= self.end

    def span(self, other: Window) -> Window:
        """Smallest window covering both ``self`` and ``other``."""
        return Window(start=min(self.start, other.start), end=max(self.end, other.end))
