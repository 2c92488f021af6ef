"""SickSquares core: calendar grid date ranges and the statistics engine."""

from app.sicksquares.date_range import GridMode, generate
from app.sicksquares.exceptions import InvalidIntensityError, InvalidWindowError, SickSquaresError
from app.sicksquares.statistics import compute_range_stats, compute_stats, compute_year_stats
from app.sicksquares.window import Window

__all__ = [
    "GridMode",
    "generate",
    "InvalidIntensityError",
    "InvalidWindowError",
    "SickSquaresError",
    "Window",
    "compute_range_stats",
    "compute_stats",
    "compute_year_stats",
]
