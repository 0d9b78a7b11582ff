"""Zone capability: decompose, classify and compose local wall-clock times.

A zone turns an aware datetime into its wall-clock fields and turns wall-clock
fields back into an aware datetime. Composition is where timezone transitions
matter:

* unique wall times map to exactly one instant and are used directly;
* ambiguous wall times (fall-back overlap) are resolved by an
  ``AmbiguityPolicy``; the default ``EARLIER`` picks the first occurrence;
* nonexistent wall times (spring-forward gap) raise
  ``NonexistentLocalTimeError`` and are never shifted.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz

from calendar_shift.domain.errors import (
    CalendarOverflowError,
    InvalidRequestError,
    NonexistentLocalTimeError,
    UnknownTimezoneError,
    compose_error_message,
)

logger = logging.getLogger(__name__)

LOCAL_ZONE_NAME = "local"
UTC_ZONE_NAME = "UTC"


class LocalTimeKind(enum.StrEnum):
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"
    NONEXISTENT = "nonexistent"


class AmbiguityPolicy(enum.StrEnum):
    """Which instant an ambiguous wall-clock time resolves to."""

    EARLIER = "earlier"
    LATER = "later"


DEFAULT_AMBIGUITY_POLICY = AmbiguityPolicy.EARLIER


class Zone(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def tzinfo(self) -> tzinfo: ...

    def decompose(self, value: datetime) -> datetime: ...

    def classify(self, wall: datetime) -> LocalTimeKind: ...

    def compose(
        self,
        wall: datetime,
        policy: AmbiguityPolicy = DEFAULT_AMBIGUITY_POLICY,
    ) -> datetime: ...


@dataclass(frozen=True, slots=True)
class TzinfoZone:
    """Zone backed by any PEP 495 aware ``tzinfo`` implementation."""

    tzinfo: tzinfo
    name: str

    def decompose(self, value: datetime) -> datetime:
        """Return the naive wall-clock fields of value in this zone."""

        if value.tzinfo is None:
            raise _naive_datetime_error()
        return value.astimezone(self.tzinfo).replace(tzinfo=None)

    def classify(self, wall: datetime) -> LocalTimeKind:
        naive = wall.replace(tzinfo=None, fold=0)
        try:
            if not tz.datetime_exists(naive, tz=self.tzinfo):
                return LocalTimeKind.NONEXISTENT
        except OverflowError as exc:
            raise _overflow_error(naive) from exc
        if tz.datetime_ambiguous(naive, tz=self.tzinfo):
            return LocalTimeKind.AMBIGUOUS
        return LocalTimeKind.UNIQUE

    def compose(
        self,
        wall: datetime,
        policy: AmbiguityPolicy = DEFAULT_AMBIGUITY_POLICY,
    ) -> datetime:
        """Attach this zone to a naive wall time, resolving transitions."""

        naive = wall.replace(tzinfo=None, fold=0)
        kind = self.classify(naive)
        if kind is LocalTimeKind.NONEXISTENT:
            raise NonexistentLocalTimeError(
                details={"local_time": naive.isoformat(), "timezone": self.name}
            )
        if kind is LocalTimeKind.AMBIGUOUS:
            fold = 0 if policy is AmbiguityPolicy.EARLIER else 1
            logger.debug(
                "ambiguous_local_time_resolved",
                extra={
                    "local_time": naive.isoformat(),
                    "timezone": self.name,
                    "policy": policy.value,
                },
            )
            return naive.replace(tzinfo=self.tzinfo, fold=fold)
        return naive.replace(tzinfo=self.tzinfo)


def _naive_datetime_error() -> InvalidRequestError:
    return InvalidRequestError(
        message=compose_error_message(
            cause="Datetime has no timezone information.",
            action="Pass a timezone-aware datetime.",
        )
    )


def _overflow_error(naive: datetime) -> CalendarOverflowError:
    return CalendarOverflowError(details={"local_time": naive.isoformat()})


def utc_zone() -> TzinfoZone:
    return TzinfoZone(tzinfo=timezone.utc, name=UTC_ZONE_NAME)


def local_zone() -> TzinfoZone:
    """Return the system local zone, following its DST rules."""

    return TzinfoZone(tzinfo=tz.tzlocal(), name=LOCAL_ZONE_NAME)


def named_zone(key: str) -> TzinfoZone:
    """Return an IANA zone such as ``Europe/Berlin``."""

    try:
        zone_info = ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise UnknownTimezoneError(details={"timezone": key}) from exc
    return TzinfoZone(tzinfo=zone_info, name=key)


def resolve_zone(name: str) -> TzinfoZone:
    """Resolve ``local``, ``UTC`` or an IANA key into a zone."""

    normalized = name.strip()
    if normalized.lower() == LOCAL_ZONE_NAME:
        return local_zone()
    if normalized.upper() in {UTC_ZONE_NAME, "Z"}:
        return utc_zone()
    return named_zone(normalized)


def zone_of(value: datetime) -> TzinfoZone:
    """Return the zone an aware datetime is expressed in."""

    if value.tzinfo is None:
        raise _naive_datetime_error()
    key = getattr(value.tzinfo, "key", None)
    if key:
        return TzinfoZone(tzinfo=value.tzinfo, name=key)
    if isinstance(value.tzinfo, tz.tzlocal):
        return TzinfoZone(tzinfo=value.tzinfo, name=LOCAL_ZONE_NAME)
    return TzinfoZone(tzinfo=value.tzinfo, name=value.tzname() or str(value.tzinfo))
