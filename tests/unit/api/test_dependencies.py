"""
Unit tests for the "today" dependency around midnight and zone boundaries.
"""

import datetime
import types

import pytest

from app.api import dependencies
from app.core.config import settings


def freeze_now(monkeypatch, instant: datetime.datetime) -> None:
    """Make ``datetime.datetime.now`` inside the dependencies module return ``instant``."""

    class FrozenDateTime(datetime.datetime):
        @classmethod
        def now(cls, tz=None):
            return instant.astimezone(tz) if tz is not None else instant

    monkeypatch.setattr(dependencies, "datetime", types.SimpleNamespace(datetime=FrozenDateTime, date=datetime.date))


class TestGetToday:

    @pytest.mark.parametrize("zone, expected", [
        ("UTC", datetime.date(2025, 3, 12)),
        ("Pacific/Kiritimati", datetime.date(2025, 3, 13)),
        ("America/Los_Angeles", datetime.date(2025, 3, 12)),
    ])
    def test_late_evening_utc(self, monkeypatch, zone, expected):
        freeze_now(monkeypatch, datetime.datetime(2025, 3, 12, 23, 30, tzinfo=datetime.timezone.utc))
        monkeypatch.setattr(settings, "APP_TIMEZONE", zone)

        assert dependencies.get_today() == expected

    @pytest.mark.parametrize("zone, expected", [
        ("UTC", datetime.date(2025, 1, 1)),
        ("America/New_York", datetime.date(2024, 12, 31)),
        ("Asia/Tokyo", datetime.date(2025, 1, 1)),
    ])
    def test_just_after_midnight_utc_crosses_year(self, monkeypatch, zone, expected):
        freeze_now(monkeypatch, datetime.datetime(2025, 1, 1, 0, 30, tzinfo=datetime.timezone.utc))
        monkeypatch.setattr(settings, "APP_TIMEZONE", zone)

        assert dependencies.get_today() == expected

    def test_returns_plain_date(self, monkeypatch):
        freeze_now(monkeypatch, datetime.datetime(2025, 3, 12, 12, 0, tzinfo=datetime.timezone.utc))
        monkeypatch.setattr(settings, "APP_TIMEZONE", "UTC")

        today = dependencies.get_today()
        assert type(today) is datetime.date
