# backend/booking_api/services/slots/localtime.py
"""
Wall-clock helpers for the business time zone.

Instants are stored and compared in UTC; business rules (day keys, hours,
cutoffs) are evaluated on the local clock of the configured zone. The UTC
offset is resolved for every date/hour separately, so DST transitions are
handled without a fixed offset.
"""

import re
from datetime import date, datetime, time, timedelta

import pytz

DATE_KEY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def to_utc(instant: datetime) -> datetime:
    """Return an aware UTC datetime. Naive input is taken to be UTC."""
    if instant.tzinfo is None:
        return pytz.utc.localize(instant)
    return instant.astimezone(pytz.utc)


def to_local(instant: datetime, tz_name: str) -> datetime:
    return to_utc(instant).astimezone(pytz.timezone(tz_name))


def local_date(instant: datetime, tz_name: str) -> date:
    return to_local(instant, tz_name).date()


def local_date_key(instant: datetime, tz_name: str) -> str:
    """Local calendar date of a UTC instant, as "YYYY-MM-DD"."""
    return local_date(instant, tz_name).isoformat()


def local_hour(instant: datetime, tz_name: str) -> int:
    return to_local(instant, tz_name).hour


def utc_instant_for(day: date | str, hour: int, tz_name: str) -> datetime:
    """
    UTC instant of local `hour`:00 on `day`.

    `hour` may be 24, meaning midnight at the end of `day`. Wall times that
    do not exist (spring-forward gap) are shifted forward by pytz.normalize;
    ambiguous ones (fall-back overlap) resolve to standard time.
    """
    if isinstance(day, str):
        day = parse_date_key(day)

    tz = pytz.timezone(tz_name)
    naive = datetime.combine(day, time()) + timedelta(hours=hour)
    local = tz.normalize(tz.localize(naive, is_dst=False))
    return local.astimezone(pytz.utc)


def parse_date_key(value: str) -> date:
    """
    Parse a "YYYY-MM-DD" day key.

    Raises:
        ValueError: not in that form, or not a real calendar date
    """
    if not isinstance(value, str) or not DATE_KEY_RE.fullmatch(value):
        raise ValueError(f"Invalid date key: {value!r}")
    return date.fromisoformat(value)
