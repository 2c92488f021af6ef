import datetime

from app.core.ratelimit import RateLimiter
from app.main import app as fastapi_app

GRID = "/api/v1/grid"


def _iso(date: datetime.date) -> str:
    return date.isoformat()


def test_requires_auth(client):
    assert client.get(GRID).status_code == 401
    assert client.post(GRID, json={"date": "2025-03-01", "intensity": 1}).status_code == 401


def test_rejects_invalid_token(client):
    response = client.get(GRID, headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401


def test_create_then_update_square(client, auth_headers, today):
    day = _iso(today - datetime.timedelta(days=1))

    created = client.post(GRID, json={"date": day, "intensity": 2}, headers=auth_headers)
    assert created.status_code == 201
    square = created.json()["square"]
    assert square["date"] == day
    assert square["intensity"] == 2
    assert "userId" in square

    updated = client.post(GRID, json={"date": day, "intensity": 4}, headers=auth_headers)
    assert updated.status_code == 200
    assert updated.json()["square"]["id"] == square["id"]
    assert updated.json()["square"]["intensity"] == 4

    grid = client.get(GRID, params={"year": 2025}, headers=auth_headers).json()["gridData"]
    assert [(s["date"], s["intensity"]) for s in grid] == [(day, 4)]


def test_today_is_writable_future_is_not(client, auth_headers, today):
    ok = client.post(GRID, json={"date": _iso(today), "intensity": 1}, headers=auth_headers)
    assert ok.status_code == 201

    future = client.post(GRID, json={"date": _iso(today + datetime.timedelta(days=1)), "intensity": 1},
                         headers=auth_headers)
    assert future.status_code == 400


def test_intensity_out_of_range(client, auth_headers):
    for bad in (-1, 5):
        response = client.post(GRID, json={"date": "2025-03-01", "intensity": bad}, headers=auth_headers)
        assert response.status_code == 422


def test_setting_zero_keeps_row(client, auth_headers):
    client.post(GRID, json={"date": "2025-03-01", "intensity": 3}, headers=auth_headers)
    response = client.post(GRID, json={"date": "2025-03-01", "intensity": 0}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["square"]["intensity"] == 0


def test_list_by_range_and_default_year(client, auth_headers):
    for day in ("2024-12-30", "2025-01-02", "2025-02-01"):
        client.post(GRID, json={"date": day, "intensity": 1}, headers=auth_headers)

    ranged = client.get(GRID, params={"startDate": "2024-12-01", "endDate": "2025-01-31"}, headers=auth_headers)
    assert [s["date"] for s in ranged.json()["gridData"]] == ["2024-12-30", "2025-01-02"]

    current_year = client.get(GRID, headers=auth_headers)
    assert [s["date"] for s in current_year.json()["gridData"]] == ["2025-01-02", "2025-02-01"]


def test_list_reversed_range(client, auth_headers):
    response = client.get(GRID, params={"startDate": "2025-02-01", "endDate": "2025-01-01"}, headers=auth_headers)
    assert response.status_code == 400


def test_users_are_isolated(client, auth_headers, headers_for):
    client.post(GRID, json={"date": "2025-03-01", "intensity": 3}, headers=auth_headers)

    bob = client.get(GRID, headers=headers_for("bob@example.com"))
    assert bob.json()["gridData"] == []


def test_calendar_rolling(client, auth_headers, today):
    client.post(GRID, json={"date": _iso(today), "intensity": 3}, headers=auth_headers)

    response = client.get(f"{GRID}/calendar", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()

    assert body["mode"] == "rolling"
    assert body["startDate"] == "2024-03-10"
    assert body["endDate"] == "2025-03-15"
    assert len(body["weeks"]) == 53
    assert all(len(week) == 7 for week in body["weeks"])

    days = {d["date"]: d for week in body["weeks"] for d in week}
    assert days[_iso(today)]["intensity"] == 3
    assert days[_iso(today)]["editable"] is True
    assert days["2025-03-13"]["editable"] is False
    assert days["2025-03-13"]["inWindow"] is False
    # padding before the real window start (2024-03-12)
    assert days["2024-03-11"]["inWindow"] is False
    assert days["2024-03-12"]["editable"] is True
    assert body["monthLabels"][0] == {"month": "Mar", "weekIndex": 0}


def test_calendar_year_mode(client, auth_headers):
    response = client.get(f"{GRID}/calendar", params={"mode": "year", "year": 2024}, headers=auth_headers)
    body = response.json()

    assert body["year"] == 2024
    days = {d["date"]: d for week in body["weeks"] for d in week}
    assert days["2023-12-31"]["editable"] is False
    assert days["2024-12-31"]["editable"] is True
    assert days["2024-02-29"]["inWindow"] is True


def test_rate_limited(client, auth_headers):
    fastapi_app.state.rate_limiter = RateLimiter(max_requests=2, window_seconds=60)

    assert client.get(GRID, headers=auth_headers).status_code == 200
    assert client.get(GRID, headers=auth_headers).status_code == 200
    limited = client.get(GRID, headers=auth_headers)
    assert limited.status_code == 429
    assert int(limited.headers["Retry-After"]) > 0
