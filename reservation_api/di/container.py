# Standard library imports
import logging
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)

logger = logging.getLogger(__name__)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database client (DatabaseProvider)
    2. User store (RepositoryProvider) - depends on the client
    3. Use cases (UserProvider) - depend on the store
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings if settings is not None else get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → store → use cases
        """
        DatabaseProvider.register(self, self.settings)
        RepositoryProvider.register(self, self.settings)
        UserProvider.register(self)
        logger.info(f"Container ready (user store backend: {self.settings.user_store_backend})")

    def close(self) -> None:
        """Close the shared database client, if one was created"""
        if self.has("mongo_client"):
            self.get("mongo_client").close()


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Close and forget the global container"""
    global _container
    if _container is not None:
        _container.close()
    _container = None
