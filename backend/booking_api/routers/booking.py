# backend/booking_api/routers/booking.py
"""
Booking availability API endpoints.

GET  /booking/options  - Time windows and durations for the booking form
POST /booking/days     - Catalog of bookable days for the day/time picker
POST /booking/validate - Re-check of one slot at submission time

The caller (website) loads its bookings and calendar busy blocks and posts
them here; this service never touches a database or calendar itself.
"""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException

from ..schemas.booking import (
    AvailableDaysRequest,
    AvailableDaysResponse,
    BookableDayOut,
    BookingOptionsResponse,
    DurationOptionOut,
    TimeWindowOut,
    ValidateSlotRequest,
    ValidateSlotResponse,
)
from ..services.slots import (
    BookingConfig,
    blockers_from_bookings,
    blockers_from_events,
    build_available_days,
    get_booking_config,
    merge_blockers,
    validate_booking_request,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/booking", tags=["booking"])


def get_now() -> datetime:
    return datetime.now(timezone.utc)


@router.get("/options", response_model=BookingOptionsResponse)
def get_booking_options(config: BookingConfig = Depends(get_booking_config)):
    return BookingOptionsResponse(
        time_zone=config.time_zone,
        max_advance_days=config.max_advance_days,
        min_notice_hours=config.min_notice_hours,
        time_windows=[TimeWindowOut.model_validate(w) for w in config.time_windows],
        durations=[DurationOptionOut.model_validate(d) for d in config.durations],
    )


@router.post("/days", response_model=AvailableDaysResponse)
def get_available_days(
    data: AvailableDaysRequest,
    now: datetime = Depends(get_now),
    config: BookingConfig = Depends(get_booking_config),
):
    """Bookable days, blocking both database bookings and calendar events."""
    try:
        blockers = merge_blockers(
            blockers_from_bookings(data.bookings, now, config),
            blockers_from_events(data.calendar_events, config),
        )
        logger.info(
            "Building days with %d bookings and %d calendar events (%d blocking)",
            len(data.bookings), len(data.calendar_events), len(blockers),
        )

        days = build_available_days(now, blockers, config)
    except Exception:
        logger.exception("Failed to build available days")
        raise HTTPException(status_code=500, detail="Failed to build available days")

    return AvailableDaysResponse(
        days=[BookableDayOut.model_validate(d) for d in days],
        time_zone=config.time_zone,
    )


@router.post("/validate", response_model=ValidateSlotResponse)
def validate_slot(
    data: ValidateSlotRequest,
    now: datetime = Depends(get_now),
    config: BookingConfig = Depends(get_booking_config),
):
    """Validate a booking request right before it is persisted."""
    try:
        blockers = merge_blockers(
            blockers_from_bookings(data.bookings, now, config),
            blockers_from_events(data.calendar_events, config),
        )

        result = validate_booking_request(
            data.date,
            data.time_of_day,
            data.duration,
            blockers,
            now,
            config,
        )
    except Exception:
        logger.exception("Failed to validate booking request")
        raise HTTPException(status_code=500, detail="Failed to validate booking request")

    return ValidateSlotResponse.model_validate(result)
