# venues/schemas/pagination.py
from typing import Generic, TypeVar

from venues.schemas.base import CamelModel

T = TypeVar("T")


class Page(CamelModel, Generic[T]):
    data: list[T]
    total: int
    page: int
    limit: int
    total_pages: int
