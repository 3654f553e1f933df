"""
Slots availability module.

Pure computation over (now, blockers, config):
- build_available_days: day/time picker catalog
- validate_booking_request: submission-time re-check of one slot
"""

from .config import (
    BookingConfig,
    DurationOption,
    JobDuration,
    TimeWindow,
    get_booking_config,
)
from .conflicts import Blocker, conflicts_with, is_slot_free
from .blockers import blockers_from_bookings, blockers_from_events, merge_blockers
from .models import BookableDay, RejectionReason, ValidationResult, WindowAvailability
from .calculator import build_available_days
from .validator import validate_booking_request

__all__ = [
    "BookingConfig",
    "DurationOption",
    "JobDuration",
    "TimeWindow",
    "get_booking_config",
    "Blocker",
    "conflicts_with",
    "is_slot_free",
    "blockers_from_bookings",
    "blockers_from_events",
    "merge_blockers",
    "BookableDay",
    "RejectionReason",
    "ValidationResult",
    "WindowAvailability",
    "build_available_days",
    "validate_booking_request",
]
