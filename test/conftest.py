"""
Test Configuration and Fixtures

This module provides:
- Test environment variables, set before any application module is imported
- A fixed clock so date validation never depends on the wall clock
- Room, movie and projection fixtures
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ['SERVICE_NAME'] = 'cinema-test'
    os.environ['DISPLAY_TIMEZONE'] = 'Europe/Rome'


_early_setup_test_environment()

from collections.abc import Callable  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402

from src.service.cinema.domain.entity.movie_entity import Movie  # noqa: E402
from src.service.cinema.domain.entity.room_entity import Room  # noqa: E402
from src.service.projection.domain.aggregate.projection_aggregate import Projection  # noqa: E402
from src.service.shared_kernel.app.interface.i_clock import IClock  # noqa: E402


# Sunday 18 October 2026, 12:00 UTC
NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


class FixedClock(IClock):
    def __init__(self, now: datetime) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        self._now += delta


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def room() -> Room:
    return Room.create(number=1, rows=5, cols=8)


@pytest.fixture
def movie() -> Movie:
    return Movie(title='Il Postino', director='Michael Radford', duration_minutes=108, id=1)


@pytest.fixture
def make_projection(clock: FixedClock, movie: Movie, room: Room) -> Callable[..., Projection]:
    """Build projections with sane defaults; keyword overrides replace them"""

    def _make(**overrides: Any) -> Projection:
        kwargs: dict[str, Any] = {
            'id': 1,
            'movie': movie,
            'date_time': NOW + timedelta(days=1),
            'price': 8.5,
            'room': room,
            'clock': clock,
        }
        kwargs.update(overrides)
        return Projection(**kwargs)

    return _make


@pytest.fixture
def projection(make_projection: Callable[..., Projection]) -> Projection:
    return make_projection()
