"""API dependency providers."""

from __future__ import annotations

from calendar_shift.domain.clock import Clock, SystemClock


def get_clock() -> Clock:
    """Provide the clock used when a request omits its base time."""

    return SystemClock()
