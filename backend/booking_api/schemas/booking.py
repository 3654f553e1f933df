# backend/booking_api/schemas/booking.py
"""
Pydantic schemas for the booking availability API.
"""

from datetime import date, datetime
from pydantic import AliasChoices, BaseModel, Field, field_validator

from ..services.slots import JobDuration, RejectionReason


class BookingIn(BaseModel):
    """Existing booking as stored by the caller."""
    id: str
    start_utc: datetime
    end_utc: datetime
    status: str = "confirmed"  # held / confirmed / cancelled
    buffer_before_min: int | None = Field(default=None, ge=0)
    buffer_after_min: int | None = Field(default=None, ge=0)

    model_config = {"from_attributes": True}


class CalendarEventIn(BaseModel):
    """Busy block from the external calendar (ISO dateTime, or date for all-day)."""
    id: str
    start: datetime | date
    end: datetime | date

    @field_validator("start", "end", mode="before")
    @classmethod
    def parse_all_day(cls, v):
        """Plain YYYY-MM-DD strings are all-day dates, not midnight."""
        if isinstance(v, str) and "T" not in v:
            return date.fromisoformat(v)
        return v

    model_config = {"from_attributes": True}


class TimeWindowOut(BaseModel):
    value: str = Field(validation_alias=AliasChoices("value", "name"))
    label: str
    start_hour: int
    end_hour: int

    model_config = {"from_attributes": True}


class DurationOptionOut(BaseModel):
    value: JobDuration
    label: str
    description: str
    duration_minutes: int = Field(validation_alias=AliasChoices("duration_minutes", "minutes"))

    model_config = {"from_attributes": True}


class BookingOptionsResponse(BaseModel):
    """Static form options: windows, durations and horizon."""
    time_zone: str
    max_advance_days: int
    min_notice_hours: int
    time_windows: list[TimeWindowOut]
    durations: list[DurationOptionOut]

    model_config = {"from_attributes": True}


class WindowAvailabilityOut(BaseModel):
    value: str
    label: str
    available_short: bool
    available_long: bool

    model_config = {"from_attributes": True}


class BookableDayOut(BaseModel):
    date_key: str
    day_label: str
    full_label: str
    is_today: bool
    is_weekend: bool
    time_windows: list[WindowAvailabilityOut]
    has_any_slots: bool

    model_config = {"from_attributes": True}


class AvailableDaysRequest(BaseModel):
    """Blockers gathered by the caller from its database and calendar."""
    bookings: list[BookingIn] = []
    calendar_events: list[CalendarEventIn] = []


class AvailableDaysResponse(BaseModel):
    days: list[BookableDayOut]
    time_zone: str


class ValidateSlotRequest(BaseModel):
    date: str = Field(description="Local date, YYYY-MM-DD")
    time_of_day: str = Field(description="Time window name, e.g. 10am")
    duration: str = Field(description="short / long")
    bookings: list[BookingIn] = []
    calendar_events: list[CalendarEventIn] = []


class ValidateSlotResponse(BaseModel):
    valid: bool
    reason: RejectionReason | None = None
    error: str | None = None

    model_config = {"from_attributes": True}
