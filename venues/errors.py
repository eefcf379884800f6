# venues/errors.py
"""Domain error codes. Services raise these; venues.main maps them to HTTP responses."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_DATE = "INVALID_DATE"
    PAST_START = "PAST_START"
    INVERTED_RANGE = "INVERTED_RANGE"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


HTTP_STATUS = {
    ErrorCode.INVALID_INPUT: 400,
    ErrorCode.INVALID_DATE: 400,
    ErrorCode.PAST_START: 400,
    ErrorCode.INVERTED_RANGE: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 409,
}


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    @property
    def status_code(self) -> int:
        return HTTP_STATUS[self.code]


class InvalidInputError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class InvalidDateError(DomainError):
    """Raised when dateStart or dateEnd cannot be parsed."""

    def __init__(self, field: str) -> None:
        label = "start" if field == "date_start" else "end"
        super().__init__(code=ErrorCode.INVALID_DATE, message=f"Invalid {label} date")
        self.field = field


class PastStartError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.PAST_START, message="Event date cannot be in the past")


class InvertedRangeError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVERTED_RANGE,
            message="Start date must be before the end date",
        )


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, entity_id) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.CONFLICT, message=message)
