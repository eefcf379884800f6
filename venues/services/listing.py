# venues/services/listing.py
"""
Shared list helpers: `search=field:term`, `order=field direction` and page/limit.

Field names are checked against the model's columns (camelCase or snake_case),
so a query string can never reach an arbitrary attribute.
"""

import math
from typing import Optional

from pydantic.alias_generators import to_camel
from sqlalchemy import String
from sqlalchemy.orm import Query

from venues.errors import InvalidInputError


def column_map(model) -> dict:
    columns = {}
    for column in model.__table__.columns:
        columns[column.key] = column
        columns[to_camel(column.key)] = column
    return columns


def apply_search(query: Query, model, search: Optional[str]) -> Query:
    """Case-insensitive substring filter from a `field:term` descriptor. An empty term is ignored."""
    if not search:
        return query
    field, sep, term = search.partition(":")
    if not sep:
        raise InvalidInputError("search must look like field:term")
    column = column_map(model).get(field.strip())
    if column is None or not isinstance(column.type, String):
        raise InvalidInputError(f"Cannot search on field '{field}'")
    if not term:
        return query
    return query.filter(column.icontains(term, autoescape=True))


def apply_order(query: Query, model, order: Optional[str], default) -> Query:
    """Sort from a `field direction` descriptor; direction is asc (default) or desc."""
    if not order or not order.strip():
        return query.order_by(default)
    parts = order.split()
    field = parts[0]
    direction = parts[1].lower() if len(parts) > 1 else "asc"
    column = column_map(model).get(field)
    if column is None:
        raise InvalidInputError(f"Cannot order by field '{field}'")
    if len(parts) > 2 or direction not in ("asc", "desc"):
        raise InvalidInputError("order must look like 'field asc' or 'field desc'")
    return query.order_by(column.desc() if direction == "desc" else column.asc())


def paginate(query: Query, page: Optional[int], limit: Optional[int], default_limit: int) -> dict:
    """Slice a query and wrap it in the {data, total, page, limit, totalPages} envelope."""
    page = 1 if page is None else page
    limit = default_limit if limit is None else limit
    if page < 1 or limit < 1:
        raise InvalidInputError("page and limit must be positive integers")

    total = query.order_by(None).count()
    data = query.offset((page - 1) * limit).limit(limit).all()
    return {
        "data": data,
        "total": total,
        "page": page,
        "limit": limit,
        "total_pages": math.ceil(total / limit),
    }
