"""Domain exceptions used across engine, services, CLI and API."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a user-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


@dataclass(slots=True)
class DomainError(Exception):
    """Base exception for predictable calendar failures."""

    code: str
    message: str
    status_code: int
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class InvalidRequestError(DomainError):
    """Raised when caller input cannot describe a valid offset."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_REQUEST",
            message=message
            or compose_error_message(
                cause="Request data violates calendar rules.",
                action="Adjust the input fields and try again.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )


class UnknownTimezoneError(DomainError):
    """Raised when a timezone name cannot be resolved."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="UNKNOWN_TIMEZONE",
            message=message
            or compose_error_message(
                cause="Timezone name is not a known IANA key.",
                action="Use 'local', 'UTC' or a key such as 'Europe/Berlin'.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )


class NonexistentLocalTimeError(DomainError):
    """Raised when a wall-clock time falls inside a spring-forward gap."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="NONEXISTENT_LOCAL_TIME",
            message=message
            or compose_error_message(
                cause="The resulting local time does not exist in the timezone.",
                action="Pick a base time outside the daylight-saving gap.",
            ),
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details=details or {},
        )


class CalendarOverflowError(DomainError):
    """Raised when an offset leaves the representable year range."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="CALENDAR_OVERFLOW",
            message=message
            or compose_error_message(
                cause="The resulting date is outside years 1 to 9999.",
                action="Reduce the offset magnitude.",
            ),
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details=details or {},
        )
