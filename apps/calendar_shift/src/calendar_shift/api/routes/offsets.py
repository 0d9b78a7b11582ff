"""Offset and calendar info routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from calendar_shift.api.dependencies import get_clock
from calendar_shift.api.schemas.offsets import (
    MonthInfoResponse,
    OffsetRequestBody,
    OffsetResponse,
)
from calendar_shift.core.settings import Settings, get_settings
from calendar_shift.domain.calendar_offsets import days_in_month, is_leap_year
from calendar_shift.domain.clock import Clock
from calendar_shift.domain.units import OffsetRequest
from calendar_shift.domain.zones import zone_of
from calendar_shift.services.offset_service import OffsetService

router = APIRouter(tags=["Offsets"])


@router.post("/offsets", response_model=OffsetResponse)
def create_offset(
    body: OffsetRequestBody,
    settings: Annotated[Settings, Depends(get_settings)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> OffsetResponse:
    """Shift the given base, or now, by a signed unit offset."""

    service = OffsetService.from_settings(
        settings,
        timezone_name=body.timezone,
        clock=clock,
        ambiguity_policy=body.ambiguity_policy,
    )
    base = body.base
    if base is not None and body.timezone is not None:
        base = service.express_in_zone(base)

    request = OffsetRequest.toward(body.magnitude, body.unit, body.direction)
    result = service.shift(request, base=base)
    return OffsetResponse.from_values(
        result=result,
        timezone=zone_of(result).name,
        output_format=settings.output_format,
    )


@router.get("/calendar/{year}/{month}", response_model=MonthInfoResponse)
def get_month_info(
    year: Annotated[int, Path(ge=1, le=9999)],
    month: Annotated[int, Path(ge=1, le=12)],
) -> MonthInfoResponse:
    """Return the number of days in a month of the Gregorian calendar."""

    return MonthInfoResponse(
        year=year,
        month=month,
        days=days_in_month(year, month),
        is_leap_year=is_leap_year(year),
    )
