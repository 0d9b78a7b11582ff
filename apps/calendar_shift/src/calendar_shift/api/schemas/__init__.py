"""API request and response schemas."""

from calendar_shift.api.schemas.offsets import (
    MonthInfoResponse,
    OffsetRequestBody,
    OffsetResponse,
)

__all__ = [
    "MonthInfoResponse",
    "OffsetRequestBody",
    "OffsetResponse",
]
