"""Calendar month and year offsets with day clamping.

Months and years are not fixed-length durations: the offset is applied to the
wall-clock fields of the base datetime in its own zone, the day of month is
clamped to the length of the target month, and the result is composed back
into the same zone.
"""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, datetime

from calendar_shift.domain.errors import CalendarOverflowError
from calendar_shift.domain.zones import (
    DEFAULT_AMBIGUITY_POLICY,
    AmbiguityPolicy,
    Zone,
    zone_of,
)

MONTHS_PER_YEAR = 12
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return whether year is a leap year in the proleptic Gregorian calendar."""

    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days of month (1-12) in year."""

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def add_months(
    base: datetime,
    months: int,
    *,
    policy: AmbiguityPolicy = DEFAULT_AMBIGUITY_POLICY,
) -> datetime:
    """Return base shifted by a signed number of calendar months.

    The day of month is clamped to the last day of the target month, so
    2023-01-31 plus one month is 2023-02-28. Ambiguous results are resolved
    by ``policy``; results inside a daylight-saving gap raise
    ``NonexistentLocalTimeError``.
    """

    zone = zone_of(base)
    wall = zone.decompose(base)
    total_months = wall.year * MONTHS_PER_YEAR + (wall.month - 1) + months
    # divmod floors, so negative totals still give a month index in 0..11.
    target_year, month_index = divmod(total_months, MONTHS_PER_YEAR)
    return _compose_clamped(
        base,
        zone,
        wall,
        year=target_year,
        month=month_index + 1,
        policy=policy,
    )


def add_years(
    base: datetime,
    years: int,
    *,
    policy: AmbiguityPolicy = DEFAULT_AMBIGUITY_POLICY,
) -> datetime:
    """Return base shifted by a signed number of calendar years.

    February 29 maps to February 28 when the target year is not a leap year.
    """

    zone = zone_of(base)
    wall = zone.decompose(base)
    return _compose_clamped(
        base,
        zone,
        wall,
        year=wall.year + years,
        month=wall.month,
        policy=policy,
    )


def _compose_clamped(
    base: datetime,
    zone: Zone,
    wall: datetime,
    *,
    year: int,
    month: int,
    policy: AmbiguityPolicy,
) -> datetime:
    if year < MINYEAR or year > MAXYEAR:
        raise CalendarOverflowError(
            details={"base": base.isoformat(), "target_year": year}
        )

    day = min(wall.day, days_in_month(year, month))
    target = wall.replace(year=year, month=month, day=day)
    if target == wall:
        # Same wall time: keep the base instant, including its fold.
        return base
    return zone.compose(target, policy)
