from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from calendar_shift.api.app import create_app
from calendar_shift.api.dependencies import get_clock
from calendar_shift.core.settings import get_settings
from calendar_shift.domain.clock import FixedClock

FIXED_NOW = datetime(2026, 1, 31, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(instant=FIXED_NOW)


@pytest.fixture
def client(fixed_clock: FixedClock) -> Generator[TestClient, None, None]:
    app = create_app()
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    with TestClient(app) as test_client:
        yield test_client
