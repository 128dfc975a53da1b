"""
Domain and persistence exceptions.

Every failure raised by entities and repositories derives from CheckoutError,
so callers can catch the whole family or a single kind.
"""
from typing import Optional


class CheckoutError(Exception):
    """Base class for all checkout errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CheckoutError):
    """Raised when an entity is constructed or mutated into an invalid state."""

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.field_name = field_name


class DuplicateKeyError(CheckoutError):
    """Raised when creating an entity whose id is already stored."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} already exists: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class NotFoundError(CheckoutError):
    """Raised when an operation targets an id that is not stored."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class StorageError(CheckoutError):
    """
    Raised when the underlying store fails.

    The originating database exception is always chained as __cause__.
    """
    pass
