# venues/routers/events.py
"""
Event CRUD.
POST   /events       — create through the admission pipeline (201, 400, 404, 409)
PUT    /events/{id}  — partial update, dates re-validated
GET    /events/{id}  — event with its place embedded
GET    /events       — filtered, sorted, paginated list
DELETE /events/{id}  — delete, returns the deleted event
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from venues.database import get_db
from venues.errors import NotFoundError
from venues.routers.common import lookup_error
from venues.schemas.event import EventCreate, EventDetailOut, EventOut, EventUpdate
from venues.schemas.pagination import Page
from venues.services import event_service

router = APIRouter()


@router.get("/events/{event_id}", response_model=EventDetailOut, summary="Find event by ID")
def find_event(event_id: int, db: Session = Depends(get_db)):
    try:
        return event_service.get_event(db, event_id)
    except NotFoundError as exc:
        raise lookup_error(exc)


@router.post("/events", response_model=EventOut, status_code=status.HTTP_201_CREATED,
             summary="Create a new event")
def create_event(body: EventCreate, db: Session = Depends(get_db)):
    return event_service.create_event(db, body.model_dump())


@router.put("/events/{event_id}", response_model=EventOut, summary="Update an event")
def update_event(event_id: int, body: EventUpdate, db: Session = Depends(get_db)):
    return event_service.update_event(db, event_id, body.model_dump(exclude_unset=True))


@router.get("/events", response_model=Page[EventOut], summary="List events")
def list_events(
    place_id: Optional[int] = Query(None, alias="placeId"),
    event: Optional[str] = None,
    type: Optional[str] = None,
    date_start: Optional[str] = Query(None, alias="dateStart"),
    date_end: Optional[str] = Query(None, alias="dateEnd"),
    order: Optional[str] = Query(None, description="'field asc' or 'field desc'"),
    search: Optional[str] = Query(None, description="'field:term', case-insensitive substring"),
    page: Optional[int] = None,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return event_service.list_events(
        db, place_id=place_id, event=event, type=type,
        date_start=date_start, date_end=date_end,
        search=search, order=order, page=page, limit=limit,
    )


@router.delete("/events/{event_id}", response_model=EventOut, summary="Delete an event")
def delete_event(event_id: int, db: Session = Depends(get_db)):
    return event_service.delete_event(db, event_id)
