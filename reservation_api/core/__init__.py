from .config import Settings, get_settings
from .security import hash_password, verify_password
from .exceptions import (
    UserStoreError,
    FieldError,
    ValidationError,
    HashError,
    NotFoundError,
    ConflictError,
    StoreError,
    StoreConnectionError,
    StoreTimeoutError,
)

__all__ = [
    "Settings",
    "get_settings",
    "hash_password",
    "verify_password",
    "UserStoreError",
    "FieldError",
    "ValidationError",
    "HashError",
    "NotFoundError",
    "ConflictError",
    "StoreError",
    "StoreConnectionError",
    "StoreTimeoutError",
]
