# venues/routers/turnstiles.py
"""Turnstile CRUD by id. Bulk changes go through PUT /places/{id} instead."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from venues.database import get_db
from venues.errors import NotFoundError
from venues.routers.common import lookup_error
from venues.schemas.child import TurnstileCreate, TurnstileOut, TurnstileUpdate
from venues.services import child_service
from venues.services.repository import turnstile_repository

router = APIRouter()


@router.get("/turnstiles/{turnstile_id}", response_model=TurnstileOut, summary="Find turnstile by ID")
def find_turnstile(turnstile_id: int, db: Session = Depends(get_db)):
    try:
        return child_service.find_child(turnstile_repository(db), turnstile_id)
    except NotFoundError as exc:
        raise lookup_error(exc)


@router.post("/turnstiles", response_model=TurnstileOut, status_code=status.HTTP_201_CREATED,
             summary="Create a turnstile")
def create_turnstile(body: TurnstileCreate, db: Session = Depends(get_db)):
    return child_service.create_child(db, turnstile_repository(db), body.model_dump())


@router.put("/turnstiles/{turnstile_id}", response_model=TurnstileOut, summary="Update a turnstile")
def update_turnstile(turnstile_id: int, body: TurnstileUpdate, db: Session = Depends(get_db)):
    return child_service.update_child(
        db, turnstile_repository(db), turnstile_id, body.model_dump(exclude_unset=True)
    )


@router.get("/turnstiles", response_model=list[TurnstileOut], summary="List all turnstiles")
def list_turnstiles(db: Session = Depends(get_db)):
    return child_service.list_children(turnstile_repository(db))


@router.delete("/turnstiles/{turnstile_id}", response_model=TurnstileOut, summary="Delete a turnstile")
def delete_turnstile(turnstile_id: int, db: Session = Depends(get_db)):
    return child_service.delete_child(db, turnstile_repository(db), turnstile_id)
