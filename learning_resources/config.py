"""
Application settings.

Settings are read from environment variables (optionally from a `.env`
file loaded with python-dotenv) and exposed as a single cached
`Settings` instance.

Environment variables:
    - MONGODB_URI:          MongoDB connection string (default: mongodb://localhost:27017)
    - MONGODB_DB:           Database name (default: learning_resources)
    - RESOURCES_COLLECTION: Collection holding resource records (default: resources)
    - SEED_ON_STARTUP:      Insert the demonstration dataset into an empty store (default: true)
    - CORS_ORIGINS:         Comma-separated list of allowed origins (default: *)
    - LOG_LEVEL:            Root logging level (default: INFO)
"""

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables from .env file
load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """
    Runtime configuration of the Learning Resources backend.

    Example:
        >>> settings = get_settings()
        >>> settings.mongo_db
        'learning_resources'
    """

    mongo_uri: str = "mongodb://localhost:27017"
    """Full MongoDB connection string."""

    mongo_db: str = "learning_resources"
    """Name of the MongoDB database."""

    resources_collection: str = "resources"
    """Collection where resource records are stored."""

    seed_on_startup: bool = True
    """Whether the demonstration dataset is inserted into an empty store at startup."""

    cors_origins: List[str] = ["*"]
    """Origins allowed to call the API from a browser."""

    log_level: str = "INFO"
    """Root logging level."""


@lru_cache
def get_settings() -> Settings:
    """
    Build the settings from the current environment.

    The result is cached; call `get_settings.cache_clear()` after changing
    environment variables (e.g., in tests).
    """

    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        mongo_uri=os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
        mongo_db=os.getenv("MONGODB_DB", "learning_resources"),
        resources_collection=os.getenv("RESOURCES_COLLECTION", "resources"),
        seed_on_startup=_as_bool(os.getenv("SEED_ON_STARTUP", "true")),
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
