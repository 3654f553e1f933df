# backend/booking_api/services/slots/calculator.py
"""
Bookable day catalog.

Produces, for every local day from today to today + max_advance_days, the
availability of each configured time window for a short and a long job.

Contains:
✓ same-day cutoff (today dropped entirely)
✓ minimum notice
✓ next-day early cutoff
✓ closing hour
✓ bookings and calendar busy blocks, with their buffers

Does NOT contain:
✗ Loading bookings or calendar events (caller passes blockers)
✗ Reading the clock (caller passes now)
"""

import logging
from datetime import date, datetime, timedelta
from typing import Sequence

from .config import BookingConfig, JobDuration, TimeWindow, get_booking_config
from .conflicts import Blocker
from .models import BookableDay, WindowAvailability
from .rules import BookingClock, evaluate_slot

logger = logging.getLogger(__name__)

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
SHORT_DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def build_available_days(
    now: datetime,
    blockers: Sequence[Blocker],
    config: BookingConfig | None = None,
) -> list[BookableDay]:
    """
    Build the bookable day catalog.

    Args:
        now: current instant (aware; naive is taken as UTC)
        blockers: bookings and calendar events merged into one list
        config: scheduling policy, defaults to get_booking_config()

    Returns:
        Days in ascending order. Fully booked days are kept so the picker
        can show them greyed out; today is left out once it is past the
        same-day cutoff or has nothing left to offer.
    """
    config = config or get_booking_config()
    clock = BookingClock.at(now, config)
    blockers = tuple(blockers)

    days: list[BookableDay] = []

    for offset in range(config.max_advance_days + 1):
        day = clock.today + timedelta(days=offset)
        is_today = offset == 0

        # Step 1: Same-day cutoff
        if is_today and clock.is_past_same_day_cutoff(config):
            continue

        # Step 2: Evaluate every window for both durations
        windows = tuple(_evaluate_window(clock, day, window, blockers, config)
                        for window in config.time_windows)

        bookable = _make_day(day, is_today, windows)

        if is_today and not bookable.has_any_slots:
            continue

        days.append(bookable)

    logger.debug(
        "Built %d bookable days from %s (%d blockers)",
        len(days), clock.today.isoformat(), len(blockers),
    )
    return days


# ── Helpers ──────────────────────────────────────────────────────────────


def _evaluate_window(
    clock: BookingClock,
    day: date,
    window: TimeWindow,
    blockers: Sequence[Blocker],
    config: BookingConfig,
) -> WindowAvailability:
    short_min = config.duration_minutes(JobDuration.SHORT)
    long_min = config.duration_minutes(JobDuration.LONG)

    return WindowAvailability(
        value=window.name,
        label=window.label,
        available_short=evaluate_slot(clock, day, window, short_min, blockers, config) is None,
        available_long=evaluate_slot(clock, day, window, long_min, blockers, config) is None,
    )


def _make_day(
    day: date,
    is_today: bool,
    windows: tuple[WindowAvailability, ...],
) -> BookableDay:
    weekday = day.weekday()  # 0 = Monday, 6 = Sunday
    month = MONTH_NAMES[day.month - 1]

    return BookableDay(
        date_key=day.isoformat(),
        day_label=f"{SHORT_DAY_NAMES[weekday]} {day.day} {month}",
        full_label=f"{DAY_NAMES[weekday]}, {month} {day.day}",
        is_today=is_today,
        is_weekend=weekday >= 5,
        time_windows=windows,
    )
