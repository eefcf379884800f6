# venues/routers/gates.py
"""Gate CRUD by id. Bulk changes go through PUT /places/{id} instead."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from venues.database import get_db
from venues.errors import NotFoundError
from venues.routers.common import lookup_error
from venues.schemas.child import GateCreate, GateOut, GateUpdate
from venues.services import child_service
from venues.services.repository import gate_repository

router = APIRouter()


@router.get("/gates/{gate_id}", response_model=GateOut, summary="Find gate by ID")
def find_gate(gate_id: int, db: Session = Depends(get_db)):
    try:
        return child_service.find_child(gate_repository(db), gate_id)
    except NotFoundError as exc:
        raise lookup_error(exc)


@router.post("/gates", response_model=GateOut, status_code=status.HTTP_201_CREATED,
             summary="Create a gate")
def create_gate(body: GateCreate, db: Session = Depends(get_db)):
    return child_service.create_child(db, gate_repository(db), body.model_dump())


@router.put("/gates/{gate_id}", response_model=GateOut, summary="Update a gate")
def update_gate(gate_id: int, body: GateUpdate, db: Session = Depends(get_db)):
    return child_service.update_child(
        db, gate_repository(db), gate_id, body.model_dump(exclude_unset=True)
    )


@router.get("/gates", response_model=list[GateOut], summary="List all gates")
def list_gates(db: Session = Depends(get_db)):
    return child_service.list_children(gate_repository(db))


@router.delete("/gates/{gate_id}", response_model=GateOut, summary="Delete a gate")
def delete_gate(gate_id: int, db: Session = Depends(get_db)):
    return child_service.delete_child(db, gate_repository(db), gate_id)
