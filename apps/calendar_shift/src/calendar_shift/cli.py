"""CLI bootstrap for calendar-shift."""

import logging
from datetime import datetime

import typer

from calendar_shift.core.settings import get_settings
from calendar_shift.domain.calendar_offsets import days_in_month, is_leap_year
from calendar_shift.domain.errors import DomainError
from calendar_shift.domain.formatting import format_datetime, to_timestamp
from calendar_shift.domain.units import Direction, OffsetRequest, TimeUnit
from calendar_shift.domain.zones import AmbiguityPolicy
from calendar_shift.services.offset_service import OffsetService

app = typer.Typer(help="CLI for calendar-aware date offsets.")

MAGNITUDE_ARGUMENT = typer.Argument(..., min=0, help="Number of units to shift.")
UNIT_ARGUMENT = typer.Argument(..., help="Unit of the offset.")
PAST_OPTION = typer.Option(False, "--past", help="Shift backward instead of forward.")
BASE_OPTION = typer.Option(
    None, "--base", help="ISO 8601 base time. Defaults to the current time."
)
TIMEZONE_OPTION = typer.Option(
    None, "--tz", help="Timezone: 'local', 'UTC' or an IANA key."
)
FORMAT_OPTION = typer.Option(None, "--format", help="strftime output layout.")
SHOW_OFFSET_OPTION = typer.Option(
    False, "--show-offset", help="Append the UTC offset to the output."
)
TIMESTAMP_OPTION = typer.Option(
    False, "--timestamp", help="Print Unix seconds instead of a formatted date."
)
LATER_OPTION = typer.Option(
    False, "--later", help="Resolve ambiguous local times to the later instant."
)
YEAR_ARGUMENT = typer.Argument(..., min=1, max=9999)
MONTH_ARGUMENT = typer.Argument(..., min=1, max=12)


@app.callback()
def configure() -> None:
    """Configure logging from settings before running a command."""
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@app.command("healthcheck")
def healthcheck() -> None:
    """Verify that the CLI entrypoint is available."""
    typer.echo("calendar-shift is ready")


@app.command("shift")
def shift(
    magnitude: int = MAGNITUDE_ARGUMENT,
    unit: TimeUnit = UNIT_ARGUMENT,
    past: bool = PAST_OPTION,
    base: str | None = BASE_OPTION,
    timezone_name: str | None = TIMEZONE_OPTION,
    output_format: str | None = FORMAT_OPTION,
    show_offset: bool = SHOW_OFFSET_OPTION,
    timestamp: bool = TIMESTAMP_OPTION,
    later: bool = LATER_OPTION,
) -> None:
    """Shift a base time, or now, by MAGNITUDE units."""
    settings = get_settings()
    base_value = _parse_base(base)
    try:
        service = OffsetService.from_settings(
            settings,
            timezone_name=timezone_name,
            ambiguity_policy=AmbiguityPolicy.LATER if later else None,
        )
        if base_value is not None and timezone_name is not None:
            base_value = service.express_in_zone(base_value)
        direction = Direction.PAST if past else Direction.FUTURE
        result = service.shift(
            OffsetRequest.toward(magnitude, unit, direction),
            base=base_value,
        )
    except DomainError as exc:
        typer.echo(f"{exc.code}: {exc.message}", err=True)
        raise typer.Exit(code=1) from exc

    if timestamp:
        typer.echo(str(to_timestamp(result)))
        return
    typer.echo(
        format_datetime(
            result,
            output_format or settings.output_format,
            show_offset=show_offset,
        )
    )


@app.command("days-in-month")
def days_in_month_command(
    year: int = YEAR_ARGUMENT,
    month: int = MONTH_ARGUMENT,
) -> None:
    """Print the number of days in a month."""
    days = days_in_month(year, month)
    suffix = " (leap year)" if month == 2 and is_leap_year(year) else ""
    typer.echo(f"{year:04d}-{month:02d}: {days} days{suffix}")


def _parse_base(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(
            f"'{value}' is not an ISO 8601 datetime.", param_hint="--base"
        ) from exc


def main() -> None:
    """Run the calendar-shift CLI application."""
    app()


if __name__ == "__main__":
    main()
