"""Schemas for offset and calendar info endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from calendar_shift.domain.formatting import (
    format_datetime,
    format_utc_offset,
    to_timestamp,
)
from calendar_shift.domain.units import INT64_MAX, INT64_MIN, Direction, TimeUnit
from calendar_shift.domain.zones import AmbiguityPolicy


class OffsetRequestBody(BaseModel):
    """Offset to apply to an explicit base or to the current time."""

    magnitude: int = Field(ge=INT64_MIN, le=INT64_MAX)
    unit: TimeUnit
    direction: Direction = Direction.FUTURE
    base: datetime | None = None
    timezone: str | None = Field(default=None, min_length=1)
    ambiguity_policy: AmbiguityPolicy | None = None


class OffsetResponse(BaseModel):
    """Shifted datetime in several renderings."""

    result: datetime
    timezone: str
    utc_offset: str = Field(pattern=r"^[+-][0-9]{2}:[0-9]{2}(:[0-9]{2})?$")
    formatted: str
    timestamp: int

    @classmethod
    def from_values(
        cls,
        *,
        result: datetime,
        timezone: str,
        output_format: str,
    ) -> OffsetResponse:
        return cls(
            result=result,
            timezone=timezone,
            utc_offset=format_utc_offset(result.utcoffset()),
            formatted=format_datetime(result, output_format),
            timestamp=to_timestamp(result),
        )


class MonthInfoResponse(BaseModel):
    """Length of a calendar month."""

    year: int
    month: int = Field(ge=1, le=12)
    days: int = Field(ge=28, le=31)
    is_leap_year: bool
