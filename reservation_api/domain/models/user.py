# Standard library imports
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.

    `id` is None until the store assigns one on insert. `encrypted_password`
    holds the bcrypt hash and is kept out of repr so it never ends up in logs.
    """
    id: Optional[str]
    first_name: str
    last_name: str
    email: str
    encrypted_password: str = field(repr=False)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.encrypted_password:
            raise ValueError("Password hash is required")


@dataclass(frozen=True)
class CreateUserParams:
    """Input for creating a user. The plaintext password is excluded from repr."""
    email: str
    first_name: str
    last_name: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class UpdateUserParams:
    """
    Partial update input.

    None means "leave unchanged". Any supplied value, including an empty
    string, is an explicit request to set the field and is validated.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    def changes(self) -> Dict[str, str]:
        """Return only the supplied fields, keyed by User attribute name"""
        supplied = {
            "first_name": self.first_name,
            "last_name": self.last_name,
        }
        return {name: value for name, value in supplied.items() if value is not None}

    def is_empty(self) -> bool:
        return not self.changes()
