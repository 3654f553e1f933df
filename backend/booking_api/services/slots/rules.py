# backend/booking_api/services/slots/rules.py
"""
Slot rules shared by the catalog builder and the single-slot validator.

Rules are applied in a fixed order and the first failing one wins:
same-day cutoff → minimum notice → next-day early cutoff →
operating hours → conflicts.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Sequence

from .config import BookingConfig, TimeWindow
from .conflicts import Blocker, is_slot_free
from .localtime import local_date, local_hour, to_utc, utc_instant_for
from .models import RejectionReason


@dataclass(frozen=True)
class BookingClock:
    """`now` as seen by the business rules: UTC instant plus local date/hour."""
    now_utc: datetime
    today: date
    hour: int

    @classmethod
    def at(cls, now: datetime, config: BookingConfig) -> "BookingClock":
        return cls(
            now_utc=to_utc(now),
            today=local_date(now, config.time_zone),
            hour=local_hour(now, config.time_zone),
        )

    @property
    def tomorrow(self) -> date:
        return self.today + timedelta(days=1)

    def last_bookable_day(self, config: BookingConfig) -> date:
        return self.today + timedelta(days=config.max_advance_days)

    def is_past_same_day_cutoff(self, config: BookingConfig) -> bool:
        return self.hour >= config.same_day_cutoff_hour

    def is_past_next_day_cutoff(self, config: BookingConfig) -> bool:
        return self.hour >= config.next_day_cutoff_hour


def evaluate_slot(
    clock: BookingClock,
    day: date,
    window: TimeWindow,
    duration_minutes: int,
    blockers: Sequence[Blocker],
    config: BookingConfig,
) -> RejectionReason | None:
    """
    Check one (day, window, duration) candidate.

    Returns:
        None when the slot is bookable, otherwise the first failing rule.
    """
    if day == clock.today and clock.is_past_same_day_cutoff(config):
        return RejectionReason.SAME_DAY_CUTOFF

    slot_start = utc_instant_for(day, window.start_hour, config.time_zone)
    slot_end = slot_start + timedelta(minutes=duration_minutes)

    # Only bites on today, or on tomorrow for windows close to midnight
    if slot_start - clock.now_utc < timedelta(hours=config.min_notice_hours):
        return RejectionReason.INSUFFICIENT_NOTICE

    if (
        day == clock.tomorrow
        and clock.is_past_next_day_cutoff(config)
        and window.start_hour < config.next_day_earliest_hour
    ):
        return RejectionReason.NEXT_DAY_CUTOFF

    if slot_end > utc_instant_for(day, config.closing_hour, config.time_zone):
        return RejectionReason.OUTSIDE_OPERATING_HOURS

    if not is_slot_free(slot_start, slot_end, blockers):
        return RejectionReason.SLOT_UNAVAILABLE

    return None
