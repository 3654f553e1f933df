# backend/booking_api/services/slots/validator.py
"""
Submission-time re-check of a single slot.

The booking form is rendered from the day catalog, but another request may
take the slot in between. This re-derives availability for the submitted
(date, time of day, duration) with the same rules as the catalog.
"""

import logging
from datetime import datetime, timedelta
from typing import Sequence

from .config import BookingConfig, JobDuration, get_booking_config
from .conflicts import Blocker, find_conflicts
from .localtime import parse_date_key, utc_instant_for
from .models import RejectionReason, ValidationResult
from .rules import BookingClock, evaluate_slot

logger = logging.getLogger(__name__)


def validate_booking_request(
    date_key: str,
    time_of_day: str,
    duration: JobDuration | str,
    blockers: Sequence[Blocker],
    now: datetime,
    config: BookingConfig | None = None,
) -> ValidationResult:
    """
    Validate a booking request.

    Args:
        date_key: selected local date, "YYYY-MM-DD"
        time_of_day: time window name, e.g. "10am"
        duration: "short" or "long"
        blockers: bookings and calendar events merged into one list
        now: current instant
        config: scheduling policy, defaults to get_booking_config()

    Returns:
        ValidationResult with at most one rejection reason.
    """
    config = config or get_booking_config()
    params = {
        "max_advance_days": config.max_advance_days,
        "min_notice_hours": config.min_notice_hours,
    }

    # Step 1: Malformed input
    try:
        day = parse_date_key(date_key)
    except ValueError:
        return ValidationResult.reject(RejectionReason.INVALID_DATE, **params)

    window = config.get_window(time_of_day)
    if window is None:
        return ValidationResult.reject(RejectionReason.INVALID_TIME, **params)

    try:
        duration_minutes = config.duration_minutes(JobDuration(duration))
    except (ValueError, KeyError):
        return ValidationResult.reject(RejectionReason.INVALID_DURATION, **params)

    # Step 2: Bookable horizon
    clock = BookingClock.at(now, config)
    if day < clock.today:
        return ValidationResult.reject(RejectionReason.DATE_IN_PAST, **params)
    if day > clock.last_bookable_day(config):
        return ValidationResult.reject(RejectionReason.TOO_FAR_IN_ADVANCE, **params)

    # Step 3-6: Same rules as the catalog
    reason = evaluate_slot(clock, day, window, duration_minutes, blockers, config)
    if reason is None:
        return ValidationResult.ok()

    if reason == RejectionReason.SLOT_UNAVAILABLE:
        slot_start = utc_instant_for(day, window.start_hour, config.time_zone)
        slot_end = slot_start + timedelta(minutes=duration_minutes)
        conflicts = find_conflicts(slot_start, slot_end, blockers)
        logger.info(
            "Slot %s %s no longer available, blocked by %s",
            date_key, time_of_day, [b.id for b in conflicts],
        )
    else:
        logger.info("Rejected slot %s %s: %s", date_key, time_of_day, reason.value)

    return ValidationResult.reject(reason, **params)
