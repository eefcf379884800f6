# venues/schemas/child.py
"""Gate and turnstile payloads. Both kinds share one shape."""

from datetime import datetime
from typing import Optional

from venues.schemas.base import CamelModel


class ChildCreate(CamelModel):
    name: str
    place_id: int


class ChildUpdate(CamelModel):
    name: Optional[str] = None
    place_id: Optional[int] = None


class ChildItem(CamelModel):
    """One entry of a place's desired gates/turnstiles list. Entries without id are created."""

    id: Optional[int] = None
    name: Optional[str] = None


class ChildOut(CamelModel):
    id: int
    name: str
    place_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Per-entity names used by the routers
GateCreate = TurnstileCreate = ChildCreate
GateUpdate = TurnstileUpdate = ChildUpdate
GateOut = TurnstileOut = ChildOut
