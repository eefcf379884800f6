# venues/services/admission.py
"""
Event admission pipeline.

A new event is persisted only after every step of ADMISSION_STEPS passes, in
this order (each step raises its own DomainError):

  1. parse_dates        dateStart / dateEnd are ISO-8601        INVALID_DATE
  2. not_in_past        dateStart is not before now             PAST_START
  3. ordered_window     dateStart is not after dateEnd          INVERTED_RANGE
  4. place_exists       the parent place exists                 NOT_FOUND
  5. no_overlap         no event at the place touches the window CONFLICT
  6. unique_name        no event anywhere has the same name     CONFLICT

Steps 4-6 and the insert run in one transaction, with the place row locked
(SELECT ... FOR UPDATE, ignored by SQLite), so two admissions at the same place
cannot both pass the overlap check against the same snapshot.

Event names are unique across ALL places, not per place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.orm import Session

from venues.errors import (
    ConflictError,
    DomainError,
    InvalidDateError,
    InvertedRangeError,
    NotFoundError,
    PastStartError,
)
from venues.models.event import Event
from venues.models.place import Place
from venues.services.overlap import is_event_overlapping
from venues.utils.clock import to_naive_utc, utcnow
from venues.utils.logger import get_logger

logger = get_logger(__name__)

OVERLAP_MESSAGE = "An event already exists at this place in this time window"
DUPLICATE_NAME_MESSAGE = "Event name must be unique"


def parse_instant(value, field: str) -> datetime:
    """Parse an ISO-8601 string (or datetime) into naive UTC."""
    if isinstance(value, datetime):
        return to_naive_utc(value)
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(field)
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        raise InvalidDateError(field)
    return to_naive_utc(parsed)


def events_at_place(db: Session, place_id: int) -> list[Event]:
    return db.query(Event).filter(Event.place_id == place_id).all()


def event_name_exists(db: Session, name: str) -> bool:
    return db.query(Event.id).filter(Event.event == name).first() is not None


@dataclass
class EventCandidate:
    db: Session
    payload: dict
    now: datetime
    date_start: Optional[datetime] = None
    date_end: Optional[datetime] = None
    place: Optional[Place] = None


def parse_dates(candidate: EventCandidate) -> None:
    candidate.date_start = parse_instant(candidate.payload.get("date_start"), "date_start")
    candidate.date_end = parse_instant(candidate.payload.get("date_end"), "date_end")


def not_in_past(candidate: EventCandidate) -> None:
    if candidate.date_start < candidate.now:
        raise PastStartError()


def ordered_window(candidate: EventCandidate) -> None:
    if candidate.date_start > candidate.date_end:
        raise InvertedRangeError()


def place_exists(candidate: EventCandidate) -> None:
    place_id = candidate.payload.get("place_id")
    candidate.place = (
        candidate.db.query(Place).filter(Place.id == place_id).with_for_update().first()
    )
    if candidate.place is None:
        raise NotFoundError("Place", place_id)


def no_overlap(candidate: EventCandidate) -> None:
    existing = events_at_place(candidate.db, candidate.place.id)
    if is_event_overlapping(existing, candidate.date_start, candidate.date_end):
        raise ConflictError(OVERLAP_MESSAGE)


def unique_name(candidate: EventCandidate) -> None:
    if event_name_exists(candidate.db, candidate.payload.get("event")):
        raise ConflictError(DUPLICATE_NAME_MESSAGE)


ADMISSION_STEPS: tuple[Callable[[EventCandidate], None], ...] = (
    parse_dates,
    not_in_past,
    ordered_window,
    place_exists,
    no_overlap,
    unique_name,
)


def run_admission_steps(candidate: EventCandidate, steps=ADMISSION_STEPS) -> EventCandidate:
    for step in steps:
        try:
            step(candidate)
        except DomainError as exc:
            logger.warning(f"Event admission rejected at {step.__name__}: {exc}")
            raise
    return candidate


def admit_event(db: Session, payload: dict, now: Optional[datetime] = None) -> Event:
    """Validate a new event against ADMISSION_STEPS, then insert and commit it."""
    candidate = EventCandidate(db=db, payload=payload, now=now or utcnow())
    try:
        run_admission_steps(candidate)
        event = Event(
            place_id=candidate.place.id,
            event=payload["event"],
            type=payload["type"],
            email=payload["email"],
            phone=payload["phone"],
            date_start=candidate.date_start,
            date_end=candidate.date_end,
        )
        db.add(event)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(event)
    logger.info(f"Admitted event {event.id} '{event.event}' at place {event.place_id}")
    return event


def check_update_window(event: Event, changes: dict, now: Optional[datetime] = None) -> tuple[datetime, datetime]:
    """
    Date rules for a partial update. Returns the merged (date_start, date_end).

    A provided dateStart must not be in the past; ordering is checked on the
    merged window (provided value, else the stored one), so moving only the
    end before the stored start is rejected. Events that already started can
    still have their other fields edited.
    """
    now = now or utcnow()
    date_start = event.date_start
    date_end = event.date_end
    if changes.get("date_start") is not None:
        date_start = parse_instant(changes["date_start"], "date_start")
        if date_start < now:
            raise PastStartError()
    if changes.get("date_end") is not None:
        date_end = parse_instant(changes["date_end"], "date_end")
    if date_start > date_end:
        raise InvertedRangeError()
    return date_start, date_end
