"""FastAPI app bootstrap for calendar_shift."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, status

from calendar_shift.api.error_handlers import register_error_handlers
from calendar_shift.api.routes import v1_router
from calendar_shift.core.settings import Settings, get_settings
from calendar_shift.domain.errors import UnknownTimezoneError
from calendar_shift.domain.zones import resolve_zone


def create_app() -> FastAPI:
    """Create and configure FastAPI application instance."""

    app = FastAPI(
        title="Calendar Shift API",
        version="0.1.0",
    )

    @app.get("/health/live", include_in_schema=False)
    def health_live() -> dict[str, str]:
        return {"status": "alive"}

    @app.get("/health/ready", include_in_schema=False)
    def health_ready(
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> dict[str, str]:
        try:
            resolve_zone(settings.default_timezone)
        except UnknownTimezoneError as exc:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Default timezone is not available",
            ) from exc
        return {"status": "ready"}

    register_error_handlers(app)
    app.include_router(v1_router)
    return app


app = create_app()
