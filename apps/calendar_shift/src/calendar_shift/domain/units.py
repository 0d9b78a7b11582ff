"""Time units, offset directions and offset requests."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import timedelta

from calendar_shift.domain.errors import InvalidRequestError, compose_error_message

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class TimeUnit(enum.StrEnum):
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    MONTHS = "months"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"
    MILLENNIUMS = "millenniums"


class Direction(enum.StrEnum):
    FUTURE = "future"
    PAST = "past"


FIXED_UNIT_DURATIONS: dict[TimeUnit, timedelta] = {
    TimeUnit.SECONDS: timedelta(seconds=1),
    TimeUnit.MINUTES: timedelta(minutes=1),
    TimeUnit.HOURS: timedelta(hours=1),
    TimeUnit.DAYS: timedelta(days=1),
}

YEAR_MULTIPLIERS: dict[TimeUnit, int] = {
    TimeUnit.YEARS: 1,
    TimeUnit.DECADES: 10,
    TimeUnit.CENTURIES: 100,
    TimeUnit.MILLENNIUMS: 1000,
}


def is_fixed_unit(unit: TimeUnit) -> bool:
    """Return whether unit has a fixed elapsed length."""

    return unit in FIXED_UNIT_DURATIONS


@dataclass(frozen=True, slots=True)
class OffsetRequest:
    """Signed magnitude of a time unit to apply to a base datetime."""

    magnitude: int
    unit: TimeUnit

    def __post_init__(self) -> None:
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise InvalidRequestError(
                message=compose_error_message(
                    cause="Offset magnitude must be an integer.",
                    action="Send a whole number of units.",
                ),
                details={"magnitude": repr(self.magnitude)},
            )
        if not INT64_MIN <= self.magnitude <= INT64_MAX:
            raise InvalidRequestError(
                message=compose_error_message(
                    cause="Offset magnitude does not fit in a signed 64-bit integer.",
                    action="Use a smaller magnitude.",
                ),
                details={"magnitude": str(self.magnitude)},
            )

    @classmethod
    def toward(
        cls, magnitude: int, unit: TimeUnit, direction: Direction
    ) -> OffsetRequest:
        """Build a request whose sign follows the given direction."""

        if direction is Direction.PAST:
            return cls(magnitude=-magnitude, unit=unit)
        return cls(magnitude=magnitude, unit=unit)
