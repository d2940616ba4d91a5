"""
MongoDB connection management.

This module provides:
- A process-wide MongoDB client via Motor (async driver), created once at
  application startup and closed at shutdown
- Database handle accessors used by the request dependencies
- Health check utilities
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from eventhub.config import settings

# Global MongoDB client instance
_client: Optional[AsyncIOMotorClient] = None


async def init_db() -> None:
    """
    Initialize the shared MongoDB client.
    Motor connects lazily, so this never blocks on the server being reachable.
    """
    global _client
    if _client is not None:
        return

    _client = AsyncIOMotorClient(
        settings.mongodb_url,
        minPoolSize=settings.mongodb_min_pool_size,
        maxPoolSize=settings.mongodb_max_pool_size,
        serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
    )


async def close_db() -> None:
    """
    Close MongoDB connection.
    """
    global _client
    if _client is not None:
        _client.close()
        _client = None


def get_client() -> AsyncIOMotorClient:
    """
    Get the MongoDB client instance.
    """
    if _client is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get the MongoDB database instance.
    """
    return get_client()[settings.mongodb_database]


async def check_db_connection() -> bool:
    """
    Check if MongoDB connection is healthy.
    """
    if _client is None:
        return False

    try:
        await _client.admin.command("ping")
        return True
    except PyMongoError:
        return False


def get_db_info() -> dict:
    """
    Get database connection information and status.
    """
    # Sanitize MongoDB URL to hide credentials
    sanitized_url = _sanitize_mongodb_url(settings.mongodb_url)

    return {
        "status": "connected" if _client is not None else "disconnected",
        "url": sanitized_url,
        "database": settings.mongodb_database,
        "environment": settings.environment,
    }


def _sanitize_mongodb_url(url: str) -> str:
    """
    Hide password in MongoDB URL for safe logging.
    """
    if "@" not in url or "://" not in url:
        return url

    protocol, rest = url.split("://", 1)
    if "@" not in rest:
        return url
    credentials, host = rest.rsplit("@", 1)
    if ":" in credentials:
        username = credentials.split(":", 1)[0]
        return f"{protocol}://{username}:***@{host}"
    return url
