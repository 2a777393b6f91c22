"""Error hierarchy for recoverable domain and storage failures."""

from typing import Optional


class BookishError(Exception):
    """Base class for every error a store action may report."""


class EntityNotFoundError(BookishError, LookupError):
    """Raised when an action addresses an id that is not in the collection."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateEntityError(BookishError):
    """Raised when an insert would break a uniqueness rule."""

    def __init__(self, entity: str, entity_id: str, detail: Optional[str] = None) -> None:
        message = f"{entity} already exists: {entity_id}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id


class InvariantViolationError(BookishError):
    """Raised when an action would drive a counter or flag into an invalid state."""


class InvalidActionError(BookishError, ValueError):
    """Raised for malformed action arguments (negative pages, bad ratings, ...)."""


class StorageError(BookishError):
    """Raised by key-value storage adapters when a read or write fails."""
