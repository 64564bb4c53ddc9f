from .mongo_connection import create_mongo_client
from .mongo_user_store import MongoUserStore
from .memory_user_store import InMemoryUserStore

__all__ = ["create_mongo_client", "MongoUserStore", "InMemoryUserStore"]
