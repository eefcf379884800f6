# venues/services/event_service.py
"""
Event operations used by the /events router.
Creation goes through the admission pipeline (services/admission.py);
updates re-check dates only, see update_event.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, selectinload

from venues.config import settings
from venues.errors import NotFoundError
from venues.models.event import Event
from venues.models.place import Place
from venues.services.admission import (
    admit_event,
    check_update_window,
    events_at_place,
    parse_instant,
)
from venues.services.listing import apply_order, apply_search, paginate
from venues.utils.logger import get_logger

logger = get_logger(__name__)

UPDATABLE_FIELDS = ("place_id", "event", "type", "email", "phone")


def _load(db: Session, event_id: int) -> Optional[Event]:
    return (
        db.query(Event)
        .options(
            selectinload(Event.place).selectinload(Place.gates),
            selectinload(Event.place).selectinload(Place.turnstiles),
        )
        .filter(Event.id == event_id)
        .first()
    )


def get_event(db: Session, event_id: int) -> Event:
    """Event with its place (and the place's gates/turnstiles) attached."""
    logger.info(f"Find event with ID {event_id}")
    event = _load(db, event_id)
    if not event:
        raise NotFoundError("Event", event_id)
    return event


def list_events_by_place(db: Session, place_id: int) -> list[Event]:
    return events_at_place(db, place_id)


def list_events(
    db: Session,
    place_id: Optional[int] = None,
    event: Optional[str] = None,
    type: Optional[str] = None,
    date_start: Optional[str] = None,
    date_end: Optional[str] = None,
    search: Optional[str] = None,
    order: Optional[str] = None,
    page: Optional[int] = None,
    limit: Optional[int] = None,
) -> dict:
    """
    Paginated event list. placeId/event/type match exactly; dateStart keeps
    events starting at or after it, dateEnd events ending at or before it.
    """
    logger.info(f"Listing events search={search!r} order={order!r} page={page} limit={limit}")
    q = db.query(Event)
    if place_id is not None:
        q = q.filter(Event.place_id == place_id)
    if event:
        q = q.filter(Event.event == event)
    if type:
        q = q.filter(Event.type == type)
    if date_start:
        q = q.filter(Event.date_start >= parse_instant(date_start, "date_start"))
    if date_end:
        q = q.filter(Event.date_end <= parse_instant(date_end, "date_end"))
    q = apply_search(q, Event, search)
    q = apply_order(q, Event, order, default=Event.event.asc())
    return paginate(q, page, limit, settings.DEFAULT_PAGE_LIMIT)


def create_event(db: Session, data: dict, now: Optional[datetime] = None) -> Event:
    logger.info(f"Creating event with data: {data}")
    return admit_event(db, data, now=now)


def update_event(db: Session, event_id: int, changes: dict, now: Optional[datetime] = None) -> Event:
    """
    Partial update: provided fields override, omitted ones keep their stored value.

    Dates are re-validated (see admission.check_update_window) but the overlap
    and name-uniqueness checks are NOT re-run, so an update can move an event
    onto another one at the same place or reuse an existing name.
    """
    logger.info(f"Updating event {event_id} with data: {changes}")
    event = db.query(Event).filter(Event.id == event_id).first()
    if not event:
        raise NotFoundError("Event", event_id)

    date_start, date_end = check_update_window(event, changes, now=now)
    place_id = changes.get("place_id")
    if place_id is not None and db.query(Place.id).filter(Place.id == place_id).first() is None:
        raise NotFoundError("Place", place_id)

    for key in UPDATABLE_FIELDS:
        if changes.get(key) is not None:
            setattr(event, key, changes[key])
    event.date_start = date_start
    event.date_end = date_end
    db.commit()
    db.refresh(event)
    return event


def delete_event(db: Session, event_id: int) -> Event:
    logger.info(f"Deleting event with ID {event_id}")
    event = db.query(Event).filter(Event.id == event_id).first()
    if not event:
        raise NotFoundError("Event", event_id)
    db.delete(event)
    db.commit()
    return event
