# venues/services/overlap.py
"""
Event window conflict check.

Two windows conflict when any endpoint of one lies within the other, all
boundaries inclusive: an event ending at 11:00 conflicts with one starting
at 11:00.
"""

from datetime import datetime
from typing import Iterable


def _within(instant: datetime, start: datetime, end: datetime) -> bool:
    return start <= instant <= end


def is_event_overlapping(events: Iterable, date_start: datetime, date_end: datetime) -> bool:
    """True on the first existing event whose [date_start, date_end] touches the candidate window."""
    for event in events:
        if (
            _within(date_start, event.date_start, event.date_end)
            or _within(date_end, event.date_start, event.date_end)
            or _within(event.date_start, date_start, date_end)
            or _within(event.date_end, date_start, date_end)
        ):
            return True
    return False
