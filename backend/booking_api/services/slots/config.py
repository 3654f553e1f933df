# backend/booking_api/services/slots/config.py
"""
Booking configuration for slots calculation.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

import pytz


class JobDuration(str, Enum):
    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True)
class TimeWindow:
    """Named candidate start time on the local clock, e.g. "10am"."""
    name: str
    label: str
    start_hour: int
    end_hour: int


@dataclass(frozen=True)
class DurationOption:
    value: JobDuration
    label: str
    description: str
    minutes: int


DEFAULT_TIME_WINDOWS: tuple[TimeWindow, ...] = (
    TimeWindow("10am", "10am", 10, 11),
    TimeWindow("11am", "11am", 11, 12),
    TimeWindow("12pm", "12pm", 12, 13),
    TimeWindow("1pm", "1pm", 13, 14),
    TimeWindow("2pm", "2pm", 14, 15),
    TimeWindow("3pm", "3pm", 15, 16),
    TimeWindow("4pm", "4pm", 16, 17),
    TimeWindow("5pm", "5pm", 17, 18),
    TimeWindow("6pm", "6pm", 18, 19),
)

DEFAULT_DURATIONS: tuple[DurationOption, ...] = (
    DurationOption(
        JobDuration.SHORT,
        "Standard (1 hour)",
        "Most common appointment length",
        60,
    ),
    DurationOption(
        JobDuration.LONG,
        "Extended (2 hours)",
        "For complex issues or multiple tasks",
        120,
    ),
)


@dataclass(frozen=True)
class BookingConfig:
    """
    Scheduling policy for the booking form.

    Attributes:
        time_zone: IANA zone all business rules are evaluated in
        time_windows: candidate start times, in display order
        durations: supported job lengths (short / long)
        buffer_min: minutes blocked after an internal booking that carries no
            buffers of its own (none before it)
        event_buffer_min: minutes blocked around external calendar events
        max_advance_days: last bookable day is today + max_advance_days
        same_day_cutoff_hour: from this local hour on, today is not offered
        next_day_cutoff_hour: from this local hour on, tomorrow's early
            windows are not offered
        next_day_earliest_hour: first start hour still offered for tomorrow
            once next_day_cutoff_hour has passed
        min_notice_hours: minimum lead time between now and a slot start
        closing_hour: no slot may end after this local hour
    """
    time_zone: str = "Pacific/Auckland"
    time_windows: tuple[TimeWindow, ...] = DEFAULT_TIME_WINDOWS
    durations: tuple[DurationOption, ...] = DEFAULT_DURATIONS
    buffer_min: int = 15
    event_buffer_min: int = 0
    max_advance_days: int = 14
    same_day_cutoff_hour: int = 18
    next_day_cutoff_hour: int = 20
    next_day_earliest_hour: int = 12
    min_notice_hours: int = 2
    closing_hour: int = 20

    def __post_init__(self):
        """Validate configuration."""
        try:
            pytz.timezone(self.time_zone)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown time zone: {self.time_zone!r}") from None

        if not self.time_windows:
            raise ValueError("At least one time window is required")

        names = [w.name for w in self.time_windows]
        if len(set(names)) != len(names):
            raise ValueError(f"Time window names must be unique, got {names}")

        for window in self.time_windows:
            if not 0 <= window.start_hour < window.end_hour <= 24:
                raise ValueError(
                    f"Time window {window.name!r} has invalid hours "
                    f"{window.start_hour}-{window.end_hour}"
                )

        values = {d.value for d in self.durations}
        if values != set(JobDuration):
            raise ValueError("Durations must define exactly one short and one long option")
        if self.duration_minutes(JobDuration.SHORT) > self.duration_minutes(JobDuration.LONG):
            raise ValueError("Short duration cannot be longer than long duration")

        for name in ("buffer_min", "event_buffer_min", "max_advance_days", "min_notice_hours"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

        for name in (
            "same_day_cutoff_hour",
            "next_day_cutoff_hour",
            "next_day_earliest_hour",
            "closing_hour",
        ):
            if not 0 <= getattr(self, name) <= 24:
                raise ValueError(f"{name} must be between 0 and 24")

    def get_window(self, name: str) -> TimeWindow | None:
        """Look up a time window by its name ("10am")."""
        for window in self.time_windows:
            if window.name == name:
                return window
        return None

    def duration_minutes(self, duration: JobDuration) -> int:
        for option in self.durations:
            if option.value == duration:
                return option.minutes
        raise KeyError(duration)


@lru_cache
def get_booking_config() -> BookingConfig:
    """
    Get booking configuration (singleton).

    Scalar policy values come from the environment (BOOKING_*); windows and
    durations are fixed.
    """
    from ...config import settings

    return BookingConfig(
        time_zone=settings.time_zone,
        buffer_min=settings.buffer_min,
        event_buffer_min=settings.event_buffer_min,
        max_advance_days=settings.max_advance_days,
        same_day_cutoff_hour=settings.same_day_cutoff_hour,
        next_day_cutoff_hour=settings.next_day_cutoff_hour,
        next_day_earliest_hour=settings.next_day_earliest_hour,
        min_notice_hours=settings.min_notice_hours,
        closing_hour=settings.closing_hour,
    )
