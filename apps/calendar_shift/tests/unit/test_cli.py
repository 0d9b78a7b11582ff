from __future__ import annotations

import pytest
from typer.testing import CliRunner

from calendar_shift.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def utc_output(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CALENDAR_SHIFT_TIMEZONE", "UTC")
    monkeypatch.delenv("CALENDAR_SHIFT_OUTPUT_FORMAT", raising=False)


def test_healthcheck() -> None:
    result = runner.invoke(app, ["healthcheck"])

    assert result.exit_code == 0
    assert "calendar-shift is ready" in result.stdout


def test_shift_months_clamps_day() -> None:
    result = runner.invoke(
        app, ["shift", "1", "months", "--base", "2023-01-31T12:00:00+00:00"]
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "2023-02-28 12:00:00"


def test_shift_past_years_with_offset_suffix() -> None:
    result = runner.invoke(
        app,
        [
            "shift",
            "1",
            "years",
            "--past",
            "--base",
            "2024-02-29T08:00:00",
            "--tz",
            "America/Sao_Paulo",
            "--show-offset",
        ],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "2023-02-28 08:00:00 -03:00"


def test_shift_prints_timestamp() -> None:
    result = runner.invoke(
        app,
        ["shift", "1", "days", "--base", "1970-01-01T00:00:00+00:00", "--timestamp"],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "86400"


def test_shift_uses_custom_format() -> None:
    result = runner.invoke(
        app,
        [
            "shift",
            "2",
            "decades",
            "--base",
            "2004-02-29T00:00:00+00:00",
            "--format",
            "%d/%m/%Y",
        ],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "29/02/2024"


def test_shift_into_gap_fails_with_domain_code() -> None:
    result = runner.invoke(
        app,
        [
            "shift",
            "2",
            "months",
            "--base",
            "2024-01-31T02:30:00",
            "--tz",
            "Europe/Berlin",
        ],
    )

    assert result.exit_code == 1
    assert "NONEXISTENT_LOCAL_TIME" in result.output


def test_shift_rejects_unknown_timezone() -> None:
    result = runner.invoke(app, ["shift", "1", "days", "--tz", "Nowhere/City"])

    assert result.exit_code == 1
    assert "UNKNOWN_TIMEZONE" in result.output


def test_shift_rejects_invalid_base() -> None:
    result = runner.invoke(app, ["shift", "1", "days", "--base", "yesterday"])

    assert result.exit_code == 2


def test_days_in_month_reports_leap_february() -> None:
    leap = runner.invoke(app, ["days-in-month", "2024", "2"])
    common = runner.invoke(app, ["days-in-month", "2023", "4"])

    assert leap.stdout.strip() == "2024-02: 29 days (leap year)"
    assert common.stdout.strip() == "2023-04: 30 days"
