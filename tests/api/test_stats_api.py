import datetime

from app.models.sick_day import SickDay
from app.db.repositories.sick_day import SickDayRepository

STATS = "/api/v1/stats"

STAT_FIELDS = {
    "totalSickDays",
    "percentageOfYear",
    "yearToDatePercentage",
    "averageIntensity",
    "mostCommonDay",
    "recoveryRate",
    "currentStreak",
    "longestStreak",
    "averageSickStreak",
}


def _set(client, headers, day: datetime.date, intensity: int):
    response = client.post("/api/v1/grid", json={"date": day.isoformat(), "intensity": intensity}, headers=headers)
    assert response.status_code in (200, 201)


def test_requires_auth(client):
    assert client.get(STATS, params={"year": 2025}).status_code == 401


def test_requires_year_or_range(client, auth_headers):
    response = client.get(STATS, headers=auth_headers)
    assert response.status_code == 400

    only_start = client.get(STATS, params={"startDate": "2025-01-01"}, headers=auth_headers)
    assert only_start.status_code == 400


def test_empty_stats(client, auth_headers):
    response = client.get(STATS, params={"year": 2025}, headers=auth_headers)
    assert response.status_code == 200

    body = response.json()
    assert set(body["stats"]) == STAT_FIELDS
    assert body["stats"]["totalSickDays"] == 0
    assert body["stats"]["mostCommonDay"] == "None"
    assert body["startDate"] == "2025-01-01"
    assert body["endDate"] == "2025-12-31"


def test_rolling_stats(client, auth_headers, today):
    _set(client, auth_headers, today - datetime.timedelta(days=6), 1)
    _set(client, auth_headers, today - datetime.timedelta(days=5), 1)
    _set(client, auth_headers, today - datetime.timedelta(days=1), 3)
    _set(client, auth_headers, today, 3)

    response = client.get(f"{STATS}/rolling", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    stats = body["stats"]

    assert body["startDate"] == "2024-03-12"
    assert body["endDate"] == today.isoformat()
    assert stats["totalSickDays"] == 4
    assert stats["currentStreak"] == 2
    assert stats["longestStreak"] == 2
    assert stats["averageSickStreak"] == 2
    assert stats["recoveryRate"] == 3
    assert stats["averageIntensity"] == 2
    # 4 / 366 and 4 / 71
    assert stats["percentageOfYear"] == 1.09
    assert stats["yearToDatePercentage"] == 5.63


def test_range_stats(client, auth_headers):
    for day in (1, 2, 3, 10):
        _set(client, auth_headers, datetime.date(2025, 1, day), 2)

    response = client.get(STATS, params={"startDate": "2025-01-01", "endDate": "2025-01-10"}, headers=auth_headers)
    stats = response.json()["stats"]

    assert stats["totalSickDays"] == 4
    assert stats["percentageOfYear"] == 40.0
    assert stats["longestStreak"] == 3
    assert stats["recoveryRate"] == 6
    assert stats["currentStreak"] == 0


def test_zero_intensity_not_counted(client, auth_headers, today):
    _set(client, auth_headers, today, 2)
    _set(client, auth_headers, today, 0)

    stats = client.get(f"{STATS}/rolling", headers=auth_headers).json()["stats"]
    assert stats["totalSickDays"] == 0
    assert stats["currentStreak"] == 0


def test_year_to_date_ignores_requested_window(client, auth_headers):
    _set(client, auth_headers, datetime.date(2024, 6, 1), 2)
    _set(client, auth_headers, datetime.date(2025, 2, 1), 2)

    stats = client.get(STATS, params={"year": 2024}, headers=auth_headers).json()["stats"]

    assert stats["totalSickDays"] == 1
    assert stats["yearToDatePercentage"] == 1.41


def test_reversed_range(client, auth_headers):
    response = client.get(STATS, params={"startDate": "2025-02-01", "endDate": "2025-01-01"}, headers=auth_headers)
    assert response.status_code == 400


def test_corrupt_row_is_computation_error(client, auth_headers, monkeypatch):
    corrupt = [SickDay(id=1, user_id=1, date=datetime.date(2025, 1, 1), intensity=7)]
    monkeypatch.setattr(SickDayRepository, "get_by_user_date_range", lambda self, user_id, start, end: corrupt)

    response = client.get(STATS, params={"year": 2025}, headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"detail": "Stats computation failed"}
