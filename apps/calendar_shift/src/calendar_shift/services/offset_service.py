"""Business service applying time offsets to explicit or current base times."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from calendar_shift.core.settings import Settings
from calendar_shift.domain.clock import Clock, SystemClock
from calendar_shift.domain.errors import DomainError
from calendar_shift.domain.offsets import apply_offset
from calendar_shift.domain.units import Direction, OffsetRequest, TimeUnit
from calendar_shift.domain.zones import (
    DEFAULT_AMBIGUITY_POLICY,
    AmbiguityPolicy,
    Zone,
    resolve_zone,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class OffsetService:
    """Shifts datetimes by signed unit offsets.

    ``zone`` is used for the default "now" base and for naive base values;
    aware bases keep their own zone.
    """

    zone: Zone
    clock: Clock = field(default_factory=SystemClock)
    ambiguity_policy: AmbiguityPolicy = DEFAULT_AMBIGUITY_POLICY

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        timezone_name: str | None = None,
        clock: Clock | None = None,
        ambiguity_policy: AmbiguityPolicy | None = None,
    ) -> OffsetService:
        return cls(
            zone=resolve_zone(timezone_name or settings.default_timezone),
            clock=clock or SystemClock(),
            ambiguity_policy=ambiguity_policy or settings.ambiguity_policy,
        )

    def resolve_base(self, base: datetime | None) -> datetime:
        """Return an aware base time, sampling the clock when absent."""

        if base is None:
            return self.clock.now(self.zone)
        if base.tzinfo is None:
            return self.zone.compose(base, self.ambiguity_policy)
        return base

    def express_in_zone(self, base: datetime) -> datetime:
        """Return base as wall-clock time of the service zone."""

        if base.tzinfo is None:
            return self.zone.compose(base, self.ambiguity_policy)
        return base.astimezone(self.zone.tzinfo)

    def shift(
        self,
        request: OffsetRequest,
        *,
        base: datetime | None = None,
    ) -> datetime:
        resolved = self.resolve_base(base)
        try:
            result = apply_offset(resolved, request, policy=self.ambiguity_policy)
        except DomainError as exc:
            logger.warning(
                "offset_rejected",
                extra={
                    "base": resolved.isoformat(),
                    "magnitude": str(request.magnitude),
                    "unit": request.unit.value,
                    "error_code": exc.code,
                },
            )
            raise

        logger.info(
            "offset_applied",
            extra={
                "base": resolved.isoformat(),
                "magnitude": str(request.magnitude),
                "unit": request.unit.value,
                "result": result.isoformat(),
            },
        )
        return result

    def in_future(
        self,
        magnitude: int,
        unit: TimeUnit,
        base: datetime | None = None,
    ) -> datetime:
        """Return base (or now) moved forward by magnitude units."""

        request = OffsetRequest.toward(magnitude, unit, Direction.FUTURE)
        return self.shift(request, base=base)

    def in_past(
        self,
        magnitude: int,
        unit: TimeUnit,
        base: datetime | None = None,
    ) -> datetime:
        """Return base (or now) moved backward by magnitude units."""

        request = OffsetRequest.toward(magnitude, unit, Direction.PAST)
        return self.shift(request, base=base)
