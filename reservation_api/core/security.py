# Standard library imports
import logging

# External package imports
import bcrypt

# Local application imports
from .exceptions import HashError

logger = logging.getLogger(__name__)

DEFAULT_BCRYPT_ROUNDS = 12


def hash_password(plain_password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt cost factor

    Returns:
        Hashed password string

    Raises:
        HashError: If the password cannot be hashed. The password itself is
            never part of the error.
    """
    if not isinstance(plain_password, str):
        raise HashError("password must be a string")

    try:
        salt = bcrypt.gensalt(rounds=rounds)
        hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    except (ValueError, TypeError) as e:
        logger.warning(f"Password hashing failed: {type(e).__name__}")
        raise HashError(f"could not hash password: {type(e).__name__}") from None
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError, AttributeError):
        return False
