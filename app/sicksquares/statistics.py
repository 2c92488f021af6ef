"""
Sick-day statistics engine.

Turns a sparse set of ``(date, intensity)`` records into a single
:class:`~app.schemas.stats.UserStats`.  The engine is a pure function of
``(records, window, today)``: no I/O, no shared state, no clock access.
It is safe to call concurrently and returns identical output for
identical input.

Algorithm
---------

1. **Filter**: keep records with ``intensity > 0`` inside the window.
2. **Counts**: total sick days and the share of the window they cover.
3. **Year to date**: the same share over ``[Jan 1, today]`` of the
   *current* year, independent of the requested window.  It is computed
   from every supplied record, so callers must supply that range too.
4. **Most common weekday**: ties go to the lowest index (0=Sunday).
5. **Streaks**: runs of dates exactly one day apart.  Every other gap
   closes the running streak; a gap of ``g > 1`` days also yields a
   recovery period of ``g - 1`` healthy days.
6. **Current streak**: the last streak, only if it ends today or
   yesterday.
7. **Recovery rate**: mean recovery period.
8. **Average intensity**: mean over sick days.

Intensity-0 records ("no symptoms") never count: they break streaks
exactly like a missing day.

Validation is fail-fast: one record outside [0, 4] rejects the whole
input.  A silently clamped value would corrupt every statistic derived
from it.
"""

from __future__ import annotations

import datetime
import math
from typing import Iterable, Sequence

from app.schemas.sick_day import MAX_INTENSITY, MIN_INTENSITY, SickDayRecord
from app.schemas.stats import UserStats
from app.sicksquares.date_range import DAY_NAMES, sunday_index
from app.sicksquares.exceptions import InvalidIntensityError, InvalidWindowError
from app.sicksquares.window import Window

NO_DAY = "None"


# ======================================================================
# Helpers
# ======================================================================


def round2(value: float) -> float:
    """Round to 2 decimals, half away from zero.

    Matches ``Math.round(x * 100) / 100`` for the non-negative values the
    engine produces, including its float behaviour on ``x * 100``.
    """
    return math.copysign(math.floor(abs(value) * 100 + 0.5) / 100, value)


def _mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def _validate(records: Iterable[SickDayRecord]) -> list[SickDayRecord]:
    """Return the records as a list, or raise on a bad intensity."""
    validated = []
    for record in records:
        intensity = record.intensity
        if isinstance(intensity, bool) or not isinstance(intensity, int):
            raise InvalidIntensityError(record.date, intensity)
        if not MIN_INTENSITY <= intensity <= MAX_INTENSITY:
            raise InvalidIntensityError(record.date, intensity)
        validated.append(record)
    return validated


def _sick_days_in(records: Iterable[SickDayRecord], window: Window) -> list[SickDayRecord]:
    return [r for r in records if r.intensity > 0 and window.contains(r.date)]


# ======================================================================
# Pattern detection
# ======================================================================


def most_common_day(dates: Iterable[datetime.date]) -> str:
    """Name of the weekday holding the most dates, or ``"None"``."""
    counts = [0] * 7
    for date in dates:
        counts[sunday_index(date)] += 1

    best_index = None
    best_count = 0
    for index, count in enumerate(counts):
        if count > best_count:
            best_index, best_count = index, count

    return NO_DAY if best_index is None else DAY_NAMES[best_index]


def find_streaks(dates: Sequence[datetime.date]) -> tuple[list[int], list[int]]:
    """Split ascending ``dates`` into streaks.

    Args:
        dates: Sick-day dates sorted ascending.

    Returns:
        ``(streak_lengths, recovery_periods)``.  Streak lengths are in
        order; their sum equals ``len(dates)`` for unique dates.
    """
    streaks: list[int] = []
    recovery_periods: list[int] = []
    if not dates:
        return streaks, recovery_periods

    running = 1
    for previous, current in zip(dates, dates[1:]):
        gap = (current - previous).days
        if gap == 1:
            running += 1
            continue
        streaks.append(running)
        if gap > 1:
            recovery_periods.append(gap - 1)
        running = 1

    streaks.append(running)
    return streaks, recovery_periods


def current_streak(dates: Sequence[datetime.date], streaks: Sequence[int], today: datetime.date) -> int:
    """Length of the last streak if it ends today or yesterday, else 0.

    A last sick day after ``today`` is not "current" either.
    """
    if not dates:
        return 0
    if (today - dates[-1]).days in (0, 1):
        return streaks[-1]
    return 0


# ======================================================================
# Main entry points
# ======================================================================


def compute_stats(records: Iterable[SickDayRecord], window: Window, today: datetime.date) -> UserStats:
    """Compute :class:`UserStats` for ``records`` over ``window``.

    Args:
        records: A single user's records, sorted or not, at most one per
            date.  Not mutated.
        window: Inclusive date window.
        today: The local calendar date the computation is made on.

    Returns:
        :class:`UserStats`.

    Raises:
        InvalidWindowError: If ``window.end < window.start``.
        InvalidIntensityError: If any record has intensity outside [0, 4].
    """
    if window.is_reversed:
        raise InvalidWindowError(window.start, window.end)

    valid = _validate(records)

    # --- 1-2. Filter and counts ---
    sick_days = _sick_days_in(valid, window)
    total = len(sick_days)
    percentage = total / window.length_days * 100

    # --- 3. Year to date (always the current calendar year) ---
    ytd_window = Window.year_to_date(today)
    ytd_count = len(_sick_days_in(valid, ytd_window))
    ytd_percentage = ytd_count / ytd_window.length_days * 100

    # --- 4-7. Patterns and streaks ---
    dates = sorted(r.date for r in sick_days)
    streaks, recovery_periods = find_streaks(dates)

    # --- 8. Intensity ---
    average_intensity = _mean([r.intensity for r in sick_days])

    return UserStats(total_sick_days=total, percentage_of_year=round2(percentage),
                     year_to_date_percentage=round2(ytd_percentage), average_intensity=round2(average_intensity),
                     most_common_day=most_common_day(dates), recovery_rate=round2(_mean(recovery_periods)),
                     current_streak=current_streak(dates, streaks, today), longest_streak=max(streaks, default=0),
                     average_sick_streak=round2(_mean(streaks)), )


def compute_year_stats(records: Iterable[SickDayRecord], year: int, today: datetime.date) -> UserStats:
    """Statistics over the calendar year ``year`` (365 or 366 days)."""
    return compute_stats(records, Window.for_year(year), today)


def compute_range_stats(records: Iterable[SickDayRecord], start: datetime.date, end: datetime.date,
                        today: datetime.date, ) -> UserStats:
    """Statistics over the inclusive range ``[start, end]``."""
    return compute_stats(records, Window(start=start, end=end), today)
