from __future__ import annotations

from fastapi.testclient import TestClient

from calendar_shift.api.app import create_app


def test_create_offset_returns_clamped_month_end(client: TestClient) -> None:
    response = client.post(
        "/v1/offsets",
        json={
            "magnitude": 1,
            "unit": "months",
            "base": "2023-01-31T12:00:00+00:00",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["formatted"] == "2023-02-28 12:00:00"
    assert body["utc_offset"] == "+00:00"
    assert body["timestamp"] == 1677585600
    assert set(body.keys()) == {
        "result",
        "timezone",
        "utc_offset",
        "formatted",
        "timestamp",
    }


def test_create_offset_in_past_direction(client: TestClient) -> None:
    response = client.post(
        "/v1/offsets",
        json={
            "magnitude": 2,
            "unit": "months",
            "direction": "past",
            "base": "2023-03-15T12:00:00+00:00",
        },
    )

    assert response.status_code == 200
    assert response.json()["formatted"] == "2023-01-15 12:00:00"


def test_create_offset_defaults_base_to_clock(client: TestClient) -> None:
    response = client.post(
        "/v1/offsets",
        json={"magnitude": 1, "unit": "months", "timezone": "UTC"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["formatted"] == "2026-02-28 12:00:00"
    assert body["timezone"] == "UTC"


def test_create_offset_resolves_ambiguous_time_by_policy(client: TestClient) -> None:
    payload = {
        "magnitude": 1,
        "unit": "months",
        "base": "2024-10-03T01:30:00",
        "timezone": "America/New_York",
    }

    earlier = client.post("/v1/offsets", json=payload)
    later = client.post(
        "/v1/offsets", json={**payload, "ambiguity_policy": "later"}
    )

    assert earlier.status_code == 200
    assert later.status_code == 200
    assert earlier.json()["timezone"] == "America/New_York"
    assert earlier.json()["formatted"] == "2024-11-03 01:30:00"
    assert earlier.json()["utc_offset"] == "-04:00"
    assert later.json()["utc_offset"] == "-05:00"
    assert later.json()["timestamp"] - earlier.json()["timestamp"] == 3600


def test_create_offset_returns_422_for_nonexistent_local_time(
    client: TestClient,
) -> None:
    response = client.post(
        "/v1/offsets",
        json={
            "magnitude": 2,
            "unit": "months",
            "base": "2024-01-31T02:30:00",
            "timezone": "Europe/Berlin",
        },
    )

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "NONEXISTENT_LOCAL_TIME"
    assert body["details"] == {
        "local_time": "2024-03-31T02:30:00",
        "timezone": "Europe/Berlin",
    }


def test_create_offset_returns_422_for_overflow(client: TestClient) -> None:
    response = client.post(
        "/v1/offsets",
        json={
            "magnitude": 1,
            "unit": "millenniums",
            "base": "9500-01-01T00:00:00+00:00",
        },
    )

    assert response.status_code == 422
    assert response.json()["code"] == "CALENDAR_OVERFLOW"


def test_create_offset_returns_400_for_unknown_timezone(client: TestClient) -> None:
    response = client.post(
        "/v1/offsets",
        json={"magnitude": 1, "unit": "days", "timezone": "Nowhere/City"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "UNKNOWN_TIMEZONE"


def test_create_offset_returns_400_for_invalid_payload(client: TestClient) -> None:
    invalid_unit = client.post(
        "/v1/offsets", json={"magnitude": 1, "unit": "fortnights"}
    )
    out_of_range = client.post(
        "/v1/offsets", json={"magnitude": 2**63, "unit": "days"}
    )

    assert invalid_unit.status_code == 400
    assert invalid_unit.json()["code"] == "INVALID_REQUEST"
    assert out_of_range.status_code == 400
    assert out_of_range.json()["code"] == "INVALID_REQUEST"


def test_openapi_contains_offsets_path() -> None:
    schema = create_app().openapi()
    post_operation = schema["paths"]["/v1/offsets"]["post"]

    assert "200" in set(post_operation["responses"].keys())
