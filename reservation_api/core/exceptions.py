"""
Error taxonomy for the user store.

Every error raised by validation, hashing or persistence derives from
UserStoreError. The core only raises typed errors; turning them into
HTTP responses is the job of the API layer.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserStoreError(Exception):
    """Base exception for all user store errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldError:
    """A single failed field rule."""
    field: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


class ValidationError(UserStoreError):
    """Raised when input is malformed. Always raised before any I/O."""

    def __init__(self, errors: List[FieldError]):
        if not errors:
            raise ValueError("ValidationError requires at least one field error")
        super().__init__(
            "; ".join(str(error) for error in errors),
            details={"errors": [{"field": e.field, "reason": e.reason} for e in errors]},
        )
        self.errors = list(errors)

    @classmethod
    def for_field(cls, field: str, reason: str) -> "ValidationError":
        return cls([FieldError(field, reason)])

    @property
    def field(self) -> str:
        return self.errors[0].field

    @property
    def reason(self) -> str:
        return self.errors[0].reason


# -----------------------------------------------------------------------------
# Credentials
# -----------------------------------------------------------------------------


class HashError(UserStoreError):
    """Raised when a password cannot be hashed. Aborts the enclosing write."""
    pass


# -----------------------------------------------------------------------------
# Lookup / identity
# -----------------------------------------------------------------------------


class NotFoundError(UserStoreError):
    """Raised when no user exists for the given identifier."""

    def __init__(self, user_id: str):
        super().__init__(f"user not found: {user_id}", details={"id": user_id})
        self.user_id = user_id


class ConflictError(UserStoreError):
    """Raised on a duplicate-identity violation reported by the backend."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message, details={"operation": operation})
        self.operation = operation


# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------


class StoreError(UserStoreError):
    """Raised on I/O, connection or driver failures."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        identifier: Optional[str] = None,
        retryable: bool = False,
    ):
        super().__init__(
            message,
            details={"operation": operation, "identifier": identifier},
        )
        self.operation = operation
        self.identifier = identifier
        self.retryable = retryable


class StoreConnectionError(StoreError):
    """Raised when the database cannot be reached."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, retryable=True, **kwargs)


class StoreTimeoutError(StoreError):
    """Raised when a store operation exceeds its deadline."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, retryable=True, **kwargs)
