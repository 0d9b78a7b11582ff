"""Rendering helpers for shifted datetimes."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_utc_offset(offset: timedelta | None) -> str:
    """Render a UTC offset as ``+HH:MM``, with seconds only when present."""

    total_seconds = int((offset or timedelta(0)).total_seconds())
    sign = "-" if total_seconds < 0 else "+"
    hours, remainder = divmod(abs(total_seconds), 3600)
    minutes, seconds = divmod(remainder, 60)
    if seconds:
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_datetime(
    value: datetime,
    fmt: str = DEFAULT_DATE_FORMAT,
    *,
    show_offset: bool = False,
) -> str:
    """Format value with a strftime layout, optionally suffixed by its offset."""

    rendered = value.strftime(fmt)
    if show_offset:
        return f"{rendered} {format_utc_offset(value.utcoffset())}"
    return rendered


def to_timestamp(value: datetime) -> int:
    """Return whole Unix seconds, rounding toward negative infinity."""

    return (value - _EPOCH) // timedelta(seconds=1)


def to_date(value: datetime) -> str:
    return value.strftime(DATE_FORMAT)


def to_time(value: datetime) -> str:
    return value.strftime(TIME_FORMAT)
