# venues/services/repository.py
"""
Persistence capability for child collections (gates, turnstiles).

The reconciler and the direct CRUD endpoints only talk to ChildRepository, so
the same code serves both entity kinds. Writes flush but never commit: the
calling service owns the transaction.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from sqlalchemy.orm import Session

from venues.models.gate import Gate
from venues.models.turnstile import Turnstile
from venues.utils.logger import get_logger

logger = get_logger(__name__)


class ChildRepository(ABC):
    """Entity-kind capability over records shaped {id, name, place_id}."""

    kind: str = "Child"

    @abstractmethod
    def list_by_parent(self, parent_id: int) -> list:
        """Return all children of a parent, ordered by id."""
        ...

    @abstractmethod
    def list_all(self) -> list:
        ...

    @abstractmethod
    def get(self, child_id: int):
        """Return a child by id, or None if not found."""
        ...

    @abstractmethod
    def create(self, parent_id: int, fields: dict):
        ...

    @abstractmethod
    def update(self, child_id: int, fields: dict):
        """Apply the given fields, keep the rest. Returns the record, or None if absent."""
        ...

    @abstractmethod
    def delete_by_id(self, child_id: int):
        """Delete one child. Returns the deleted record, or None if absent."""
        ...

    @abstractmethod
    def delete_many_by_ids(self, child_ids: Iterable[int]) -> int:
        ...

    @abstractmethod
    def delete_by_parent(self, parent_id: int) -> int:
        ...


class SqlChildRepository(ChildRepository):
    """SQLAlchemy-backed repository for any model with name + place_id columns."""

    WRITABLE_FIELDS = ("name", "place_id")

    def __init__(self, db: Session, model) -> None:
        self.db = db
        self.model = model
        self.kind = model.__name__

    def list_by_parent(self, parent_id: int) -> list:
        return (
            self.db.query(self.model)
            .filter(self.model.place_id == parent_id)
            .order_by(self.model.id)
            .all()
        )

    def list_all(self) -> list:
        return self.db.query(self.model).order_by(self.model.id).all()

    def get(self, child_id: int):
        return self.db.query(self.model).filter(self.model.id == child_id).first()

    def create(self, parent_id: int, fields: dict):
        record = self.model(name=fields.get("name"), place_id=parent_id)
        self.db.add(record)
        self.db.flush()
        logger.debug(f"Created {self.kind} {record.id} for place {parent_id}")
        return record

    def update(self, child_id: int, fields: dict):
        record = self.get(child_id)
        if record is None:
            return None
        for key in self.WRITABLE_FIELDS:
            if fields.get(key) is not None:
                setattr(record, key, fields[key])
        self.db.flush()
        return record

    def delete_by_id(self, child_id: int):
        record = self.get(child_id)
        if record is None:
            return None
        self.db.delete(record)
        self.db.flush()
        return record

    def delete_many_by_ids(self, child_ids: Iterable[int]) -> int:
        ids = list(child_ids)
        if not ids:
            return 0
        count = (
            self.db.query(self.model)
            .filter(self.model.id.in_(ids))
            .delete(synchronize_session="fetch")
        )
        self.db.flush()
        return count

    def delete_by_parent(self, parent_id: int) -> int:
        count = (
            self.db.query(self.model)
            .filter(self.model.place_id == parent_id)
            .delete(synchronize_session="fetch")
        )
        self.db.flush()
        logger.info(f"Deleted {count} {self.kind.lower()}(s) of place {parent_id}")
        return count


def gate_repository(db: Session) -> SqlChildRepository:
    return SqlChildRepository(db, Gate)


def turnstile_repository(db: Session) -> SqlChildRepository:
    return SqlChildRepository(db, Turnstile)
