"""
Errors raised by the statistics core.

The core performs no I/O, so none of these are transient: they are raised
synchronously to the caller and never retried.
"""

import datetime


class SickSquaresError(Exception):
    """Base class for every error raised by :mod:`app.sicksquares`."""


class InvalidWindowError(SickSquaresError):
    """The window ends before it starts."""

    def __init__(self, start: datetime.date, end: datetime.date):
        self.start = start
        self.end = end
        super().__init__(f"Window end {end} precedes start {start}")


class InvalidIntensityError(SickSquaresError):
    """A record with intensity outside [0, 4] reached the engine."""

    def __init__(self, date: datetime.date, intensity: object):
        self.date = date
        self.intensity = intensity
        super().__init__(f"Invalid intensity {intensity!r} on {date}: expected an integer in [0, 4]")
