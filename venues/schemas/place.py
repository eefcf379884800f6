# venues/schemas/place.py
from datetime import datetime
from typing import Optional

from venues.schemas.base import CamelModel
from venues.schemas.child import ChildItem, ChildOut


class PlaceCreate(CamelModel):
    name: str
    address: str
    city: str
    state: str
    gates: Optional[list[ChildItem]] = None
    turnstiles: Optional[list[ChildItem]] = None


class PlaceUpdate(CamelModel):
    """Partial update. gates/turnstiles, when present, are the full desired list:
    entries keep their id to be kept, omitted ids are deleted."""

    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    gates: Optional[list[ChildItem]] = None
    turnstiles: Optional[list[ChildItem]] = None


class PlaceOut(CamelModel):
    id: int
    name: str
    address: str
    city: str
    state: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    gates: list[ChildOut] = []
    turnstiles: list[ChildOut] = []
