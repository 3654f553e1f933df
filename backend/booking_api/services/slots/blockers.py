# backend/booking_api/services/slots/blockers.py
"""
Normalization of blocker sources.

Converts the caller's bookings and external calendar events into `Blocker`
instances with aware UTC datetimes. Works on any objects exposing the
expected attributes (ORM rows, pydantic models, simple namespaces).
"""

import logging
from datetime import date, datetime
from typing import Iterable

from .config import BookingConfig
from .conflicts import BOOKING_SOURCE, CALENDAR_SOURCE, Blocker
from .localtime import to_utc

logger = logging.getLogger(__name__)

BLOCKING_STATUSES = ("held", "confirmed")


def blockers_from_bookings(
    bookings: Iterable,
    now: datetime,
    config: BookingConfig,
) -> list[Blocker]:
    """
    Blockers for bookings that still occupy the calendar.

    Only "held" and "confirmed" bookings ending after `now` count. A booking
    without its own buffers gets no lead-in and `config.buffer_min` after it.
    """
    now_utc = to_utc(now)
    result = []

    for booking in bookings:
        status = getattr(booking, "status", "confirmed")
        if status not in BLOCKING_STATUSES:
            continue

        end_utc = to_utc(booking.end_utc)
        if end_utc <= now_utc:
            continue

        before = getattr(booking, "buffer_before_min", None)
        after = getattr(booking, "buffer_after_min", None)

        result.append(Blocker(
            id=str(booking.id),
            start_utc=to_utc(booking.start_utc),
            end_utc=end_utc,
            buffer_before_min=0 if before is None else before,
            buffer_after_min=config.buffer_min if after is None else after,
            source=BOOKING_SOURCE,
        ))

    return result


def blockers_from_events(events: Iterable, config: BookingConfig) -> list[Blocker]:
    """
    Blockers for external calendar busy blocks.

    All-day events (plain dates, no time of day) are skipped, matching what
    the calendar integration treats as non-blocking. A malformed start
    or end raises ValueError rather than being dropped.
    """
    result = []

    for event in events:
        start = _parse_instant(event.start)
        end = _parse_instant(event.end)
        if start is None or end is None:
            logger.debug("Skipping all-day calendar event %s", event.id)
            continue

        result.append(Blocker(
            id=str(event.id),
            start_utc=start,
            end_utc=end,
            buffer_before_min=config.event_buffer_min,
            buffer_after_min=config.event_buffer_min,
            source=CALENDAR_SOURCE,
        ))

    return result


def merge_blockers(*groups: Iterable[Blocker]) -> list[Blocker]:
    """Merge blocker lists into one, ordered by start."""
    merged = [b for group in groups for b in group]
    merged.sort(key=lambda b: b.start_utc)
    return merged


def _parse_instant(value) -> datetime | None:
    """
    Aware UTC datetime from a datetime or ISO string; None for all-day dates.

    Raises ValueError for a string that is neither an ISO date nor date-time.
    """
    if isinstance(value, datetime):
        return to_utc(value)
    if isinstance(value, date):
        return None
    if "T" not in value:
        date.fromisoformat(value)
        return None
    return to_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
