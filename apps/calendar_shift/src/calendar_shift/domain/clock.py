"""Clock capability used by callers to obtain a default base time."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from calendar_shift.domain.zones import Zone


class Clock(Protocol):
    def now(self, zone: Zone) -> datetime: ...


class SystemClock:
    """Reads the current instant from the operating system."""

    def now(self, zone: Zone) -> datetime:
        return datetime.now(tz=zone.tzinfo)


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Always returns the same instant, expressed in the requested zone."""

    instant: datetime

    def now(self, zone: Zone) -> datetime:
        return self.instant.astimezone(zone.tzinfo)
