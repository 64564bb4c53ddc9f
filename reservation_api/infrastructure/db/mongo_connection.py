# External package imports
from motor.motor_asyncio import AsyncIOMotorClient


def create_mongo_client(mongo_uri: str, timeout_ms: int = 5000) -> AsyncIOMotorClient:
    """
    Create a MongoDB client

    The client keeps its own connection pool and is safe to share between
    concurrent operations, so one instance per process is enough. Creating
    it does not contact the server.

    Args:
        mongo_uri: MongoDB connection string
        timeout_ms: Server selection and connect timeout in milliseconds

    Returns:
        AsyncIOMotorClient instance
    """
    return AsyncIOMotorClient(
        mongo_uri,
        serverSelectionTimeoutMS=timeout_ms,
        connectTimeoutMS=timeout_ms,
    )
