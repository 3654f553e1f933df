"""
Tests for services/slots/validator.py
"""

from datetime import datetime, timezone

import pytest

from booking_api.services.slots import (
    Blocker,
    BookingConfig,
    JobDuration,
    RejectionReason,
    build_available_days,
    validate_booking_request,
)


def test_accepts_slot_tomorrow(config, tuesday_1pm):
    result = validate_booking_request("2026-02-25", "10am", "short", [], tuesday_1pm, config)

    assert result.valid
    assert result.reason is None
    assert result.error is None


def test_accepts_last_day_of_horizon(config, tuesday_1pm):
    result = validate_booking_request("2026-03-10", "10am", JobDuration.SHORT, [], tuesday_1pm, config)
    assert result.valid


def test_rejects_dates_in_the_past(config, tuesday_1pm):
    result = validate_booking_request("2026-02-23", "10am", "short", [], tuesday_1pm, config)

    assert not result.valid
    assert result.reason == RejectionReason.DATE_IN_PAST
    assert "past" in result.error


def test_rejects_too_far_in_advance(config, tuesday_1pm):
    result = validate_booking_request("2026-03-17", "10am", "short", [], tuesday_1pm, config)

    assert not result.valid
    assert result.reason == RejectionReason.TOO_FAR_IN_ADVANCE
    assert "14 days" in result.error


@pytest.mark.parametrize("date_key", ["not-a-date", "2026-02-30", "26-02-25", ""])
def test_rejects_malformed_dates(config, tuesday_1pm, date_key):
    result = validate_booking_request(date_key, "10am", "short", [], tuesday_1pm, config)

    assert result.reason == RejectionReason.INVALID_DATE
    assert result.error == "Invalid date format"
    assert result.reason.is_input_error


def test_rejects_unknown_time_window(config, tuesday_1pm):
    result = validate_booking_request("2026-02-25", "midnight", "short", [], tuesday_1pm, config)

    assert result.reason == RejectionReason.INVALID_TIME
    assert "Invalid time slot" in result.error


def test_rejects_unknown_duration(config, tuesday_1pm):
    result = validate_booking_request("2026-02-25", "10am", "medium", [], tuesday_1pm, config)
    assert result.reason == RejectionReason.INVALID_DURATION


def test_malformed_date_reported_first(config, tuesday_1pm):
    result = validate_booking_request("yesterday", "midnight", "medium", [], tuesday_1pm, config)
    assert result.reason == RejectionReason.INVALID_DATE


def test_rejects_today_after_same_day_cutoff(config):
    now = datetime(2026, 2, 24, 5, 30, tzinfo=timezone.utc)  # 6:30pm

    result = validate_booking_request("2026-02-24", "6pm", "short", [], now, config)

    assert result.reason == RejectionReason.SAME_DAY_CUTOFF
    assert not result.reason.is_input_error


def test_rejects_short_notice(config, tuesday_1pm):
    result = validate_booking_request("2026-02-24", "2pm", "short", [], tuesday_1pm, config)

    assert result.reason == RejectionReason.INSUFFICIENT_NOTICE
    assert "2 hours" in result.error


def test_accepts_exactly_minimum_notice(config, tuesday_1pm):
    assert validate_booking_request("2026-02-24", "3pm", "long", [], tuesday_1pm, config).valid


def test_rejects_early_slot_tomorrow_after_evening_cutoff(config):
    now = datetime(2026, 2, 24, 7, 30, tzinfo=timezone.utc)  # 8:30pm

    early = validate_booking_request("2026-02-25", "11am", "short", [], now, config)
    noon = validate_booking_request("2026-02-25", "12pm", "short", [], now, config)

    assert early.reason == RejectionReason.NEXT_DAY_CUTOFF
    assert noon.valid


def test_rejects_job_running_past_closing(monday_late):
    config = BookingConfig(closing_hour=19)

    result = validate_booking_request("2026-02-25", "6pm", "long", [], monday_late, config)

    assert result.reason == RejectionReason.OUTSIDE_OPERATING_HOURS


def test_rejects_long_job_overlapping_buffer(config, tuesday_1pm, afternoon_booking):
    result = validate_booking_request(
        "2026-02-25", "3pm", "long", [afternoon_booking], tuesday_1pm, config,
    )

    assert result.reason == RejectionReason.SLOT_UNAVAILABLE
    assert "no longer available" in result.error


def test_short_job_before_buffer_still_fits(config, tuesday_1pm, afternoon_booking):
    result = validate_booking_request(
        "2026-02-25", "2pm", "short", [afternoon_booking], tuesday_1pm, config,
    )
    assert result.valid


@pytest.mark.parametrize("now,date_key,start,end", [
    # NZDT (UTC+13)
    (
        datetime(2026, 2, 24, 0, 0, tzinfo=timezone.utc),
        "2026-02-25",
        datetime(2026, 2, 24, 21, 0, tzinfo=timezone.utc),
        datetime(2026, 2, 24, 22, 0, tzinfo=timezone.utc),
    ),
    # NZST (UTC+12)
    (
        datetime(2026, 6, 14, 0, 0, tzinfo=timezone.utc),
        "2026-06-15",
        datetime(2026, 6, 14, 22, 0, tzinfo=timezone.utc),
        datetime(2026, 6, 14, 23, 0, tzinfo=timezone.utc),
    ),
])
def test_conflict_found_in_both_seasons(config, now, date_key, start, end):
    booking = Blocker("b1", start, end)

    result = validate_booking_request(date_key, "10am", "short", [booking], now, config)

    assert result.reason == RejectionReason.SLOT_UNAVAILABLE


def test_agrees_with_catalog(config, tuesday_1pm, afternoon_booking):
    blockers = [afternoon_booking]
    days = build_available_days(tuesday_1pm, blockers, config)

    for day in days:
        for window in day.time_windows:
            short = validate_booking_request(
                day.date_key, window.value, "short", blockers, tuesday_1pm, config,
            )
            long = validate_booking_request(
                day.date_key, window.value, "long", blockers, tuesday_1pm, config,
            )
            assert short.valid == window.available_short
            assert long.valid == window.available_long
