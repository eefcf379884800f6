# venues/routers/places.py
"""
Place CRUD. Create/update bodies may carry nested gates[] / turnstiles[]:
on update each list is the full desired set (keep ids for entries to keep).
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from venues.database import get_db
from venues.errors import NotFoundError
from venues.routers.common import lookup_error
from venues.schemas.pagination import Page
from venues.schemas.place import PlaceCreate, PlaceOut, PlaceUpdate
from venues.services import place_service

router = APIRouter()


@router.get("/places/{place_id}", response_model=PlaceOut, summary="Find place by ID")
def find_place(place_id: int, db: Session = Depends(get_db)):
    try:
        return place_service.get_place(db, place_id)
    except NotFoundError as exc:
        raise lookup_error(exc)


@router.post("/places", response_model=PlaceOut, status_code=status.HTTP_201_CREATED,
             summary="Create a place with its gates and turnstiles")
def create_place(body: PlaceCreate, db: Session = Depends(get_db)):
    return place_service.create_place(db, body.model_dump(exclude_unset=True))


@router.put("/places/{place_id}", response_model=PlaceOut, summary="Update a place")
def update_place(place_id: int, body: PlaceUpdate, db: Session = Depends(get_db)):
    return place_service.update_place(db, place_id, body.model_dump(exclude_unset=True))


@router.get("/places", response_model=Page[PlaceOut], summary="List places")
def list_places(
    order: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[int] = None,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return place_service.list_places(db, search=search, order=order, page=page, limit=limit)


@router.delete("/places/{place_id}", response_model=PlaceOut,
               summary="Delete a place (refused while it hosts events)")
def delete_place(place_id: int, db: Session = Depends(get_db)):
    return place_service.delete_place(db, place_id)
