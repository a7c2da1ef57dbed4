"""
Custom Exceptions

This module defines the exception hierarchy used across the service.

Two layers are kept apart:
- Store errors: raised by the link store, describe what the database did
- Service errors: raised by the link service, describe the domain outcome
  and carry the message that is shown to API consumers

Store errors never reach the HTTP layer. The link service catches them
once and re-raises the matching service error.
"""

from typing import Optional


class ShortLinksException(Exception):
    """Base exception for the short links service."""
    pass


class StoreError(ShortLinksException):
    """Base class for errors raised by the link store."""
    pass


class DuplicateNameError(StoreError):
    """Raised when a write would violate the unique constraint on link names."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Link name '{name}' already exists")


class RecordNotFoundError(StoreError):
    """Raised when no stored link matches the lookup key."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"No link with {field}={value!r}")


class StoreUnavailableError(StoreError):
    """Raised when database operations fail for any unclassified reason."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(f"Database error: {message}")


class ServiceError(ShortLinksException):
    """Base class for domain errors surfaced to API consumers."""

    default_message = "Service error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConflictError(ServiceError):
    """Raised when a short name is already taken."""
    default_message = "Short name already exists"


class NotFoundError(ServiceError):
    """Raised when an id or name does not resolve to a link."""
    default_message = "Not Found"


class InternalError(ServiceError):
    """Raised when persistence fails unexpectedly."""
    default_message = "Internal Server Error"
