"""
Calendar grid date ranges.

Produces the gap-free sequence of dates shown on the squares grid.  Every
sequence is made of complete weeks: it starts on a Sunday and ends on a
Saturday, so its length is always a multiple of 7.

Two modes exist:

- ``rolling``: the 12 months ending today.  The start (``today - 365``)
  is moved back to the Sunday on or before it; the end is moved forward
  past ``today`` to the following Saturday.  Those trailing days are
  grid padding only and are never editable.
- ``year`` (legacy): Jan 1 to Dec 31, padded the same way on both ends.

Generation is deterministic: only ``today``/``year`` influence the output.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional, TypeVar

from app.sicksquares.window import Window

DAY_NAMES: tuple[str, ...] = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",)

_MONTH_ABBR: tuple[str, ...] = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",)

_ONE_DAY = datetime.timedelta(days=1)

T = TypeVar("T")


class GridMode(str, Enum):
    ROLLING = "rolling"
    YEAR = "year"


def sunday_index(date: datetime.date) -> int:
    """Weekday index with 0=Sunday .. 6=Saturday."""
    return date.isoweekday() % 7


def _pad_to_weeks(start: datetime.date, end: datetime.date) -> list[datetime.date]:
    """All dates from the Sunday on/before ``start`` to the Saturday on/after ``end``."""
    first = start - datetime.timedelta(days=sunday_index(start))
    last = end + datetime.timedelta(days=6 - sunday_index(end))

    dates = []
    current = first
    while current <= last:
        dates.append(current)
        current += _ONE_DAY
    return dates


def generate_rolling_12_months(today: datetime.date) -> list[datetime.date]:
    window = Window.rolling_12_months(today)
    return _pad_to_weeks(window.start, window.end)


def generate_year(year: int) -> list[datetime.date]:
    window = Window.for_year(year)
    return _pad_to_weeks(window.start, window.end)


def generate(mode: GridMode, today: datetime.date, year: Optional[int] = None) -> list[datetime.date]:
    """Generate the grid dates for ``mode``.

    Args:
        mode: :class:`GridMode` value.
        today: Reference date (the local calendar date "now").
        year: Target year for ``year`` mode (defaults to ``today.year``).

    Returns:
        Ascending list of dates, length divisible by 7.
    """
    if mode == GridMode.ROLLING:
        return generate_rolling_12_months(today)
    return generate_year(year if year is not None else today.year)


def grid_window(mode: GridMode, today: datetime.date, year: Optional[int] = None) -> Window:
    """The real (unpadded) window a grid mode denotes."""
    if mode == GridMode.ROLLING:
        return Window.rolling_12_months(today)
    return Window.for_year(year if year is not None else today.year)


def chunk_weeks(items: list[T]) -> list[list[T]]:
    return [items[i:i + 7] for i in range(0, len(items), 7)]


def month_labels(dates: list[datetime.date]) -> list[tuple[str, int]]:
    """Month header labels for a generated grid.

    A label is emitted for a week whenever its first day (the Sunday)
    belongs to a different month than the previous labelled week.

    Returns:
        ``(abbreviated month name, week index)`` pairs.
    """
    labels: list[tuple[str, int]] = []
    current_month = None
    for week_index, week in enumerate(chunk_weeks(dates)):
        first = week[0]
        if first.month != current_month:
            current_month = first.month
            labels.append((_MONTH_ABBR[first.month - 1], week_index))
    return labels
