from __future__ import annotations

from fastapi.testclient import TestClient


def test_get_month_info_for_leap_february(client: TestClient) -> None:
    response = client.get("/v1/calendar/2024/2")

    assert response.status_code == 200
    assert response.json() == {
        "year": 2024,
        "month": 2,
        "days": 29,
        "is_leap_year": True,
    }


def test_get_month_info_for_century_year(client: TestClient) -> None:
    response = client.get("/v1/calendar/1900/2")

    assert response.status_code == 200
    assert response.json()["days"] == 28
    assert response.json()["is_leap_year"] is False


def test_get_month_info_returns_400_for_invalid_month(client: TestClient) -> None:
    response = client.get("/v1/calendar/2023/13")

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"
