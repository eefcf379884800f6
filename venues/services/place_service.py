# venues/services/place_service.py
"""
Place aggregate: a place plus its gates and turnstiles.

- Place names are unique across all places.
- Submitted gates/turnstiles lists are reconciled (services/reconciler.py).
- A place hosting any event cannot be deleted; otherwise its gates and
  turnstiles are deleted first, then the place itself.

Each operation commits once at the end, so a failure part-way leaves the
place and its children untouched.
"""

from typing import Optional

from sqlalchemy.orm import Session, selectinload

from venues.config import settings
from venues.errors import ConflictError, NotFoundError
from venues.models.place import Place
from venues.services.event_service import list_events_by_place
from venues.services.listing import apply_order, apply_search, paginate
from venues.services.reconciler import reconcile_children
from venues.services.repository import gate_repository, turnstile_repository
from venues.utils.logger import get_logger

logger = get_logger(__name__)

DUPLICATE_NAME_MESSAGE = "A place with this name already exists"
HAS_EVENTS_MESSAGE = "An event exists at this place, cannot delete"
SCALAR_FIELDS = ("name", "address", "city", "state")


def _with_children(q):
    return q.options(selectinload(Place.gates), selectinload(Place.turnstiles))


def _find_by_name(db: Session, name: str) -> Optional[Place]:
    return db.query(Place).filter(Place.name == name).first()


def _reconcile(db: Session, place_id: int, gates, turnstiles) -> None:
    if gates is not None:
        reconcile_children(gate_repository(db), place_id, gates)
    if turnstiles is not None:
        reconcile_children(turnstile_repository(db), place_id, turnstiles)


def get_place(db: Session, place_id: int) -> Place:
    logger.info(f"Find place with ID {place_id}")
    place = _with_children(db.query(Place)).filter(Place.id == place_id).first()
    if not place:
        raise NotFoundError("Place", place_id)
    return place


def list_places(
    db: Session,
    search: Optional[str] = None,
    order: Optional[str] = None,
    page: Optional[int] = None,
    limit: Optional[int] = None,
) -> dict:
    logger.info(f"Listing places search={search!r} order={order!r} page={page} limit={limit}")
    q = _with_children(db.query(Place))
    q = apply_search(q, Place, search)
    q = apply_order(q, Place, order, default=Place.name.asc())
    return paginate(q, page, limit, settings.PLACES_PAGE_LIMIT)


def create_place(db: Session, data: dict) -> Place:
    logger.info(f"Creating place with data: {data}")
    if _find_by_name(db, data["name"]):
        raise ConflictError(DUPLICATE_NAME_MESSAGE)

    try:
        place = Place(**{key: data[key] for key in SCALAR_FIELDS})
        db.add(place)
        db.flush()
        _reconcile(db, place.id, data.get("gates"), data.get("turnstiles"))
        db.commit()
    except Exception:
        db.rollback()
        raise
    return get_place(db, place.id)


def update_place(db: Session, place_id: int, changes: dict) -> Place:
    """Partial update. Submitted child lists replace the current ones (see reconciler)."""
    logger.info(f"Updating place {place_id} with data: {changes}")
    place = db.query(Place).filter(Place.id == place_id).first()
    if not place:
        raise NotFoundError("Place", place_id)

    name = changes.get("name")
    if name is not None:
        existing = _find_by_name(db, name)
        if existing and existing.id != place.id:
            raise ConflictError(DUPLICATE_NAME_MESSAGE)

    try:
        _reconcile(db, place.id, changes.get("gates"), changes.get("turnstiles"))
        for key in SCALAR_FIELDS:
            if changes.get(key) is not None:
                setattr(place, key, changes[key])
        db.commit()
    except Exception:
        db.rollback()
        raise
    return get_place(db, place.id)


def delete_place(db: Session, place_id: int) -> Place:
    logger.info(f"Deleting place with ID {place_id}")
    place = get_place(db, place_id)

    events = list_events_by_place(db, place_id)
    if events:
        logger.warning(f"Place {place_id} still hosts {len(events)} event(s), delete refused")
        raise ConflictError(HAS_EVENTS_MESSAGE)

    try:
        gate_repository(db).delete_by_parent(place_id)
        turnstile_repository(db).delete_by_parent(place_id)
        db.delete(place)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return place
