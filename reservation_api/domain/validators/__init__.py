from .user_validator import UserValidator, DEFAULT_MIN_PASSWORD_LENGTH, MAX_PASSWORD_BYTES

__all__ = ["UserValidator", "DEFAULT_MIN_PASSWORD_LENGTH", "MAX_PASSWORD_BYTES"]
