# venues/services/reconciler.py
"""
Child collection reconciliation.

Brings a place's gates (or turnstiles) in line with a submitted desired list
in one pass:
  - current ids missing from the desired list  → deleted
  - desired entries carrying an id             → updated in place
  - desired entries without an id              → created under the parent

Deletes run first, then updates, then creates, all on the caller's session.
Nothing is committed here.

Entries without an id ALWAYS create. Re-submitting a list without the ids
returned by a previous call replaces every child with a new row, and sending a
returned id next to an id-less copy of the same entry duplicates it. Callers
must round-trip ids for the records they want to keep.
"""

from dataclasses import dataclass, field
from typing import Iterable

from venues.errors import InvalidInputError, NotFoundError
from venues.services.repository import ChildRepository
from venues.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ReconcileResult:
    created: list[int] = field(default_factory=list)
    updated: list[int] = field(default_factory=list)
    deleted: list[int] = field(default_factory=list)


def _as_fields(item) -> dict:
    if hasattr(item, "model_dump"):
        return item.model_dump(exclude_unset=True)
    return dict(item)


def plan_reconciliation(current_ids: Iterable[int], desired: list[dict]) -> tuple[list[int], list[dict], list[dict]]:
    """Split a desired list against the current ids into (to_delete, to_update, to_create).

    Raises:
        NotFoundError: a desired id is not one of the parent's current children.
        InvalidInputError: a new entry has no name, or an update blanks it.
    """
    current = list(current_ids)
    current_set = set(current)
    desired_ids = {d["id"] for d in desired if d.get("id") is not None}

    to_update, to_create = [], []
    for entry in desired:
        if entry.get("id") is not None:
            if entry["id"] not in current_set:
                raise NotFoundError("Child record", entry["id"])
            if "name" in entry and not entry["name"]:
                raise InvalidInputError("name must not be empty")
            to_update.append(entry)
        else:
            if not entry.get("name"):
                raise InvalidInputError("New entries require a name")
            to_create.append(entry)

    to_delete = [cid for cid in current if cid not in desired_ids]
    return to_delete, to_update, to_create


def reconcile_children(repo: ChildRepository, parent_id: int, desired) -> ReconcileResult:
    """Synchronize the parent's children in `repo` with the `desired` list."""
    desired = [_as_fields(item) for item in desired]
    current_ids = [child.id for child in repo.list_by_parent(parent_id)]
    to_delete, to_update, to_create = plan_reconciliation(current_ids, desired)

    result = ReconcileResult()
    if to_delete:
        repo.delete_many_by_ids(to_delete)
        result.deleted = to_delete

    for entry in to_update:
        fields = {k: v for k, v in entry.items() if k != "id"}
        fields["place_id"] = parent_id
        repo.update(entry["id"], fields)
        result.updated.append(entry["id"])

    for entry in to_create:
        result.created.append(repo.create(parent_id, entry).id)

    logger.info(
        f"Reconciled {repo.kind.lower()}s of place {parent_id}: "
        f"{len(result.created)} created, {len(result.updated)} updated, {len(result.deleted)} deleted"
    )
    return result
