"""API v1 router registration."""

from fastapi import APIRouter

from calendar_shift.api.routes import offsets

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(offsets.router)
