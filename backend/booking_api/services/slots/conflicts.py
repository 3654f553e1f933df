# backend/booking_api/services/slots/conflicts.py
"""
Conflict detection between a candidate slot and existing blockers.

A blocker is anything that occupies the calendar: an internal booking
(held or confirmed) or a busy block from the external calendar. Both are
normalized into `Blocker` before they get here (see blockers.py), so there
is a single overlap rule for every source.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable

from .localtime import to_utc

BOOKING_SOURCE = "booking"
CALENDAR_SOURCE = "calendar"


@dataclass(frozen=True)
class Blocker:
    id: str
    start_utc: datetime
    end_utc: datetime
    buffer_before_min: int = 0
    buffer_after_min: int = 0
    source: str = BOOKING_SOURCE

    def __post_init__(self):
        # Naive instants are taken to be UTC
        object.__setattr__(self, "start_utc", to_utc(self.start_utc))
        object.__setattr__(self, "end_utc", to_utc(self.end_utc))

    @property
    def effective_start(self) -> datetime:
        return self.start_utc - timedelta(minutes=self.buffer_before_min)

    @property
    def effective_end(self) -> datetime:
        return self.end_utc + timedelta(minutes=self.buffer_after_min)


def conflicts_with(slot_start: datetime, slot_end: datetime, blocker: Blocker) -> bool:
    """
    True if [slot_start, slot_end) overlaps the blocker's buffered interval.

    Touching edges do not overlap: a slot starting exactly at the end of the
    buffered interval is free.
    """
    return slot_start < blocker.effective_end and slot_end > blocker.effective_start


def find_conflicts(
    slot_start: datetime,
    slot_end: datetime,
    blockers: Iterable[Blocker],
) -> list[Blocker]:
    return [b for b in blockers if conflicts_with(slot_start, slot_end, b)]


def is_slot_free(
    slot_start: datetime,
    slot_end: datetime,
    blockers: Iterable[Blocker],
) -> bool:
    return not any(conflicts_with(slot_start, slot_end, b) for b in blockers)
