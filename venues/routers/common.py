# venues/routers/common.py
from fastapi import HTTPException

from venues.config import settings
from venues.errors import NotFoundError


def lookup_error(exc: NotFoundError) -> HTTPException:
    """GET-by-id answers a missing record with LOOKUP_NOT_FOUND_STATUS (400 unless configured)."""
    return HTTPException(
        status_code=settings.LOOKUP_NOT_FOUND_STATUS,
        detail=exc.message,
    )
