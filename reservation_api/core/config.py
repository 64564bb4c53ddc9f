# Standard library imports
import os
from typing import Final, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    Only the wiring layer (DI providers, app factory) reads settings. The
    store, validator and hasher receive their values through constructors.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "hot-res")
        self.mongo_user_collection: Final[str] = os.getenv("MONGO_USER_COLLECTION", "users")
        self.mongo_timeout_ms: Final[int] = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

        # User store Configuration
        self.user_store_backend: Final[str] = os.getenv("USER_STORE_BACKEND", "mongo").lower()
        self.store_operation_timeout_seconds: Final[float] = float(
            os.getenv("STORE_OPERATION_TIMEOUT_SECONDS", "10")
        )
        self.read_retry_attempts: Final[int] = int(os.getenv("READ_RETRY_ATTEMPTS", "2"))

        # Credential Configuration
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))
        self.min_password_length: Final[int] = int(os.getenv("MIN_PASSWORD_LENGTH", "7"))

        # Server Configuration
        self.listen_addr: Final[str] = os.getenv("LISTEN_ADDR", ":5001")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
