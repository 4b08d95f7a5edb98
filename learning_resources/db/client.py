"""
MongoDB client initialization and access utilities.

This module configures and manages the asynchronous MongoDB client
used across the Learning Resources backend. It connects to the database
using Motor (the async MongoDB driver for Python) and exposes a global
client and database instance for use in other modules.

Connection parameters come from `learning_resources.config.get_settings()`
(`MONGODB_URI` and `MONGODB_DB`).

Usage example:
    >>> from learning_resources.db.client import init_mongo, get_db
    >>> await init_mongo()
    >>> db = get_db()
    >>> print(await db.list_collection_names())
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from learning_resources.config import get_settings

logger = logging.getLogger(__name__)

# Global MongoDB client and database references
client: AsyncIOMotorClient = None
_db: AsyncIOMotorDatabase = None

# ------------------------------------------------------------------------------
# Initialization
# ------------------------------------------------------------------------------

async def init_mongo():
    """
    Initialize the global MongoDB client and database connection.

    This function connects to the MongoDB server using the connection string
    defined in the settings. It should be called once during application
    startup (see `learning_resources.main`).
    """

    global client, _db
    settings = get_settings()
    client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _db = client[settings.mongo_db]
    logger.info("MongoDB client configured for %s, using database '%s'", settings.mongo_uri, settings.mongo_db)


def close_mongo():
    """Close the global MongoDB client, if any, and forget the database handle."""

    global client, _db
    if client is not None:
        client.close()
        logger.info("MongoDB connection closed")
    client = None
    _db = None

# ------------------------------------------------------------------------------
# Database Access
# ------------------------------------------------------------------------------

def get_db() -> AsyncIOMotorDatabase:
    """
    Retrieve the initialized MongoDB database instance.

    Returns:
        AsyncIOMotorDatabase: The connected MongoDB database instance.

    Raises:
        RuntimeError: If the database has not been initialized yet
        (i.e., `init_mongo()` has not been called).
    """

    if _db is None:
        raise RuntimeError("MongoDB was not initialized. Call init_mongo() first.")
    return _db


def get_resources_collection() -> AsyncIOMotorCollection:
    """Return the collection holding resource records."""

    return get_db()[get_settings().resources_collection]
