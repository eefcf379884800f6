# venues/services/child_service.py
"""
Direct CRUD on gates and turnstiles by id (/gates, /turnstiles).
Both kinds go through a ChildRepository, so one set of functions serves both.
"""

from sqlalchemy.orm import Session

from venues.errors import InvalidInputError, NotFoundError
from venues.models.place import Place
from venues.services.repository import ChildRepository
from venues.utils.logger import get_logger

logger = get_logger(__name__)


def _require_place(db: Session, place_id: int) -> None:
    if db.query(Place.id).filter(Place.id == place_id).first() is None:
        raise NotFoundError("Place", place_id)


def find_child(repo: ChildRepository, child_id: int):
    logger.info(f"Find {repo.kind.lower()} with ID {child_id}")
    record = repo.get(child_id)
    if record is None:
        raise NotFoundError(repo.kind, child_id)
    return record


def list_children(repo: ChildRepository) -> list:
    logger.info(f"Listing all {repo.kind.lower()}s")
    return repo.list_all()


def create_child(db: Session, repo: ChildRepository, data: dict):
    logger.info(f"Creating {repo.kind.lower()} with data: {data}")
    if not data.get("name"):
        raise InvalidInputError("name is required")
    _require_place(db, data["place_id"])
    record = repo.create(data["place_id"], data)
    db.commit()
    db.refresh(record)
    return record


def update_child(db: Session, repo: ChildRepository, child_id: int, changes: dict):
    logger.info(f"Updating {repo.kind.lower()} {child_id} with data: {changes}")
    if "name" in changes and not changes["name"]:
        raise InvalidInputError("name must not be empty")
    if changes.get("place_id") is not None:
        _require_place(db, changes["place_id"])
    record = repo.update(child_id, changes)
    if record is None:
        raise NotFoundError(repo.kind, child_id)
    db.commit()
    db.refresh(record)
    return record


def delete_child(db: Session, repo: ChildRepository, child_id: int):
    logger.info(f"Deleting {repo.kind.lower()} with ID {child_id}")
    record = repo.delete_by_id(child_id)
    if record is None:
        raise NotFoundError(repo.kind, child_id)
    db.commit()
    return record
