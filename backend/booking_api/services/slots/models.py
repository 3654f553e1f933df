# backend/booking_api/services/slots/models.py
"""
Result types returned by the availability engine.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class WindowAvailability:
    """One time window of a day, evaluated for both job durations."""
    value: str
    label: str
    available_short: bool
    available_long: bool

    @property
    def is_available(self) -> bool:
        return self.available_short or self.available_long


@dataclass(frozen=True)
class BookableDay:
    date_key: str
    day_label: str   # "Tue 24 Feb"
    full_label: str  # "Tuesday, Feb 24"
    is_today: bool
    is_weekend: bool
    time_windows: tuple[WindowAvailability, ...]

    @property
    def has_any_slots(self) -> bool:
        return any(w.is_available for w in self.time_windows)


class RejectionReason(str, Enum):
    INVALID_DATE = "invalid_date"
    INVALID_TIME = "invalid_time"
    INVALID_DURATION = "invalid_duration"
    DATE_IN_PAST = "date_in_past"
    TOO_FAR_IN_ADVANCE = "too_far_in_advance"
    SAME_DAY_CUTOFF = "same_day_cutoff"
    INSUFFICIENT_NOTICE = "insufficient_notice"
    NEXT_DAY_CUTOFF = "next_day_cutoff"
    OUTSIDE_OPERATING_HOURS = "outside_operating_hours"
    SLOT_UNAVAILABLE = "slot_unavailable"

    @property
    def is_input_error(self) -> bool:
        """Malformed request, as opposed to a business-rule rejection."""
        return self in (
            RejectionReason.INVALID_DATE,
            RejectionReason.INVALID_TIME,
            RejectionReason.INVALID_DURATION,
        )


REJECTION_MESSAGES = {
    RejectionReason.INVALID_DATE: "Invalid date format",
    RejectionReason.INVALID_TIME: "Invalid time slot",
    RejectionReason.INVALID_DURATION: "Invalid job duration",
    RejectionReason.DATE_IN_PAST: "Cannot book dates in the past",
    RejectionReason.TOO_FAR_IN_ADVANCE: "Cannot book more than {max_advance_days} days in advance",
    RejectionReason.SAME_DAY_CUTOFF: "Same-day bookings are closed for today",
    RejectionReason.INSUFFICIENT_NOTICE: "Bookings need at least {min_notice_hours} hours notice",
    RejectionReason.NEXT_DAY_CUTOFF: "Early slots for tomorrow are no longer available",
    RejectionReason.OUTSIDE_OPERATING_HOURS: "This job would run past closing time",
    RejectionReason.SLOT_UNAVAILABLE: "This time slot is no longer available",
}


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: RejectionReason | None = None
    error: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def reject(cls, reason: RejectionReason, **params) -> "ValidationResult":
        return cls(
            valid=False,
            reason=reason,
            error=REJECTION_MESSAGES[reason].format(**params),
        )
