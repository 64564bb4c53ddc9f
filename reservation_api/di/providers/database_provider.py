from typing import TYPE_CHECKING

from ...core.config import Settings
from ...infrastructure.db.mongo_connection import create_mongo_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the Mongo client"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register the shared MongoDB client.
        Skipped for the in-memory backend so no client is ever created.
        """
        if settings.user_store_backend == "memory":
            return

        container.register_singleton(
            "mongo_client",
            create_mongo_client(settings.mongo_uri, timeout_ms=settings.mongo_timeout_ms),
        )
