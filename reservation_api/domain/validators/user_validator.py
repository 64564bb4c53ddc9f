# Standard library imports
from typing import List, Optional

# Local application imports
from ...core.exceptions import FieldError, ValidationError
from ..models.user import CreateUserParams, UpdateUserParams

DEFAULT_MIN_PASSWORD_LENGTH = 7

# bcrypt only uses the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class UserValidator:
    """
    Field rules for user input.

    Pure: no I/O, no mutation of the params. All failing rules are collected
    in a fixed field order (email, first_name, last_name, password) so the
    same input always yields the same error.
    """

    def __init__(self, min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH) -> None:
        if min_password_length < 1:
            raise ValueError("min_password_length must be at least 1")
        self.min_password_length = min_password_length

    def validate_create(self, params: CreateUserParams) -> None:
        """
        Validate a create request

        Raises:
            ValidationError: listing every failed rule
        """
        errors: List[FieldError] = []
        self._collect(errors, "email", self._check_email(params.email))
        self._collect(errors, "first_name", self._check_name(params.first_name, "first name"))
        self._collect(errors, "last_name", self._check_name(params.last_name, "last name"))
        self._collect(errors, "password", self._check_password(params.password))
        if errors:
            raise ValidationError(errors)

    def validate_update(self, params: UpdateUserParams) -> None:
        """
        Validate a partial update; fields left as None are not checked

        Raises:
            ValidationError: listing every failed rule
        """
        errors: List[FieldError] = []
        if params.first_name is not None:
            self._collect(errors, "first_name", self._check_name(params.first_name, "first name"))
        if params.last_name is not None:
            self._collect(errors, "last_name", self._check_name(params.last_name, "last name"))
        if errors:
            raise ValidationError(errors)

    @staticmethod
    def _collect(errors: List[FieldError], field: str, reason: Optional[str]) -> None:
        if reason is not None:
            errors.append(FieldError(field, reason))

    @staticmethod
    def _check_email(email: str) -> Optional[str]:
        if not isinstance(email, str) or not email.strip():
            return "email is required"
        if any(ch.isspace() for ch in email):
            return "email must not contain whitespace"
        if email.count("@") != 1:
            return "email must contain exactly one '@'"
        local, domain = email.split("@")
        if not local or not domain:
            return "email must have a non-empty local part and domain"
        return None

    @staticmethod
    def _check_name(name: str, label: str) -> Optional[str]:
        if not isinstance(name, str) or not name.strip():
            return f"{label} is required"
        return None

    def _check_password(self, password: str) -> Optional[str]:
        if not isinstance(password, str) or len(password) < self.min_password_length:
            return f"password must be at least {self.min_password_length} characters"
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return f"password must be at most {MAX_PASSWORD_BYTES} bytes"
        return None
