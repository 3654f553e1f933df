"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from booking_api.services.slots import Blocker, BookingConfig, TimeWindow


@pytest.fixture
def config() -> BookingConfig:
    """Default policy: Pacific/Auckland, 10am-6pm, 2h notice, 14 days ahead."""
    return BookingConfig()


@pytest.fixture
def hourly_config() -> BookingConfig:
    """Windows from 9am to 6pm on the hour."""
    windows = tuple(
        TimeWindow(_hour_name(hour), _hour_name(hour), hour, hour + 1)
        for hour in range(9, 19)
    )
    return BookingConfig(time_windows=windows)


@pytest.fixture
def afternoon_booking() -> Blocker:
    """Booking 4pm-5pm NZDT on Wed 2026-02-25 with 15 minute buffers."""
    return Blocker(
        id="existing",
        start_utc=datetime(2026, 2, 25, 3, 0, tzinfo=timezone.utc),
        end_utc=datetime(2026, 2, 25, 4, 0, tzinfo=timezone.utc),
        buffer_before_min=15,
        buffer_after_min=15,
    )


@pytest.fixture
def tuesday_1pm() -> datetime:
    """1pm NZDT on Tue 2026-02-24."""
    return datetime(2026, 2, 24, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def monday_late() -> datetime:
    """11pm NZDT on Mon 2026-02-23, past every cutoff."""
    return datetime(2026, 2, 23, 10, 0, tzinfo=timezone.utc)


def _hour_name(hour: int) -> str:
    if hour == 12:
        return "12pm"
    if hour > 12:
        return f"{hour - 12}pm"
    return f"{hour}am"
