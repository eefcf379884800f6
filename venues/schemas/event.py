# venues/schemas/event.py
"""
Event payloads. dateStart / dateEnd arrive as raw strings: parsing them is the
first admission step so a malformed date is reported as INVALID_DATE (400)
rather than a schema error.
"""

from datetime import datetime
from typing import Optional

from venues.schemas.base import CamelModel
from venues.schemas.place import PlaceOut


class EventCreate(CamelModel):
    place_id: int
    event: str
    email: str
    phone: str
    type: str
    date_start: str
    date_end: str


class EventUpdate(CamelModel):
    place_id: Optional[int] = None
    event: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    type: Optional[str] = None
    date_start: Optional[str] = None
    date_end: Optional[str] = None


class EventOut(CamelModel):
    id: int
    place_id: int
    event: str
    email: str
    phone: str
    type: str
    date_start: datetime
    date_end: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventDetailOut(EventOut):
    place: PlaceOut
