"""Domain error codes for the sportsevents module.

Every service operation either returns a value or raises exactly one of
ValidationError, NotFoundError, StoreError or AuthError.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_FOUND = "NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    AUTH_FAILED = "AUTH_FAILED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when input is missing or malformed.

    ``fields`` maps each offending field name to a user-facing message.
    """

    def __init__(self, fields: dict[str, str], message: str = "Invalid input") -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)
        self.fields = dict(fields)

    @classmethod
    def for_field(cls, name: str, reason: str) -> "ValidationError":
        return cls({name: reason})


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=f"{kind} not found")
        self.kind = kind
        self.entity_id = entity_id


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__("Event", event_id)
        self.code = ErrorCode.EVENT_NOT_FOUND

    @property
    def event_id(self) -> str:
        return self.entity_id


class StoreError(DomainError):
    """Raised when the document store fails to read or write."""

    def __init__(self, operation: str, collection: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="The operation did not take effect, please try again",
        )
        self.operation = operation
        self.collection = collection


class AuthError(DomainError):
    """Raised when the identity provider rejects or fails a request."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.AUTH_FAILED, message=message)
