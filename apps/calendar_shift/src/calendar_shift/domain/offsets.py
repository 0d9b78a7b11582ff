"""Dispatch of offset requests onto duration or calendar arithmetic."""

from __future__ import annotations

from datetime import datetime, timezone

from calendar_shift.domain.calendar_offsets import add_months, add_years
from calendar_shift.domain.errors import CalendarOverflowError
from calendar_shift.domain.units import (
    FIXED_UNIT_DURATIONS,
    YEAR_MULTIPLIERS,
    OffsetRequest,
    TimeUnit,
    is_fixed_unit,
)
from calendar_shift.domain.zones import (
    DEFAULT_AMBIGUITY_POLICY,
    AmbiguityPolicy,
    zone_of,
)


def add_duration(base: datetime, magnitude: int, unit: TimeUnit) -> datetime:
    """Return base shifted by an exact elapsed duration of a fixed unit.

    The addition happens in UTC, so one day across a daylight-saving change
    is still 24 elapsed hours.
    """

    zone = zone_of(base)
    if magnitude == 0:
        return base
    try:
        delta = FIXED_UNIT_DURATIONS[unit] * magnitude
        shifted = base.astimezone(timezone.utc) + delta
        return shifted.astimezone(zone.tzinfo)
    except OverflowError as exc:
        raise CalendarOverflowError(
            details={
                "base": base.isoformat(),
                "magnitude": str(magnitude),
                "unit": unit.value,
            }
        ) from exc


def apply_offset(
    base: datetime,
    request: OffsetRequest,
    *,
    policy: AmbiguityPolicy = DEFAULT_AMBIGUITY_POLICY,
) -> datetime:
    """Apply a signed offset request to base."""

    if is_fixed_unit(request.unit):
        return add_duration(base, request.magnitude, request.unit)
    if request.unit is TimeUnit.MONTHS:
        return add_months(base, request.magnitude, policy=policy)
    years = request.magnitude * YEAR_MULTIPLIERS[request.unit]
    return add_years(base, years, policy=policy)
