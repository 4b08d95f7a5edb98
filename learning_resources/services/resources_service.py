"""
Resources service.

This module implements the persistence layer for `Resource` records within
the Learning Resources backend. It owns the MongoDB document shape and the
CRUD primitives used by the query engine and the API routes.

Absence is a normal outcome here: lookups return `None` instead of
raising. Storage failures (`pymongo.errors.PyMongoError`) are left to
propagate to the API boundary.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from learning_resources.db.client import get_resources_collection

logger = logging.getLogger(__name__)

# Newest first; _id breaks createdAt ties so the order is total.
NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


def _to_resource(document: dict) -> dict:
    """
    Converts a MongoDB document into a resource record.

    The `_id` ObjectId is exposed as the string `id`. Counters and tags
    missing from older documents are filled with their defaults.
    """

    document["id"] = str(document["_id"])
    del document["_id"]
    if document.get("downloadCount") is None:
        document["downloadCount"] = 0
    if document.get("tags") is None:
        document["tags"] = []
    return document


def _object_id(resource_id: str) -> Optional[ObjectId]:
    if not ObjectId.is_valid(resource_id):
        return None
    return ObjectId(resource_id)


async def get_all_resources() -> list[dict]:
    """
    Retrieves every stored resource, newest first.

    Returns:
        list[dict]: All resource records ordered by `createdAt` descending.
    """

    collection = get_resources_collection()
    documents = await collection.find().sort(NEWEST_FIRST).to_list(length=None)
    return [_to_resource(document) for document in documents]


async def get_resources_by_type(resource_type: str) -> list[dict]:
    """
    Retrieves the resources of a single category, newest first.

    Args:
        resource_type (str): Category value (e.g., `ebook`). A value that
            matches nothing simply yields an empty list.

    Returns:
        list[dict]: Matching resource records ordered by `createdAt` descending.
    """

    collection = get_resources_collection()
    cursor = collection.find({"type": resource_type}).sort(NEWEST_FIRST)
    documents = await cursor.to_list(length=None)
    return [_to_resource(document) for document in documents]


async def get_resource(resource_id: str) -> Optional[dict]:
    """
    Retrieves a single resource by its identifier.

    Args:
        resource_id (str): Identifier returned when the resource was created.

    Returns:
        Optional[dict]: The resource record, or None if no record has that
        identifier (malformed identifiers included).
    """

    object_id = _object_id(resource_id)
    if object_id is None:
        return None

    document = await get_resources_collection().find_one({"_id": object_id})
    if not document:
        return None
    return _to_resource(document)


async def create_resource(draft: dict) -> dict:
    """
    Persists a new resource.

    The store assigns the identifier, defaults `downloadCount` to 0 and
    stamps `createdAt` with the current UTC time. Any `id`, `_id` or
    `createdAt` present in the draft is discarded.

    Args:
        draft (dict): Resource fields (title, author, type, description, ...).

    Returns:
        dict: The fully populated resource record.
    """

    document = {key: value for key, value in draft.items() if key not in ("id", "_id", "createdAt")}
    document["downloadCount"] = document.get("downloadCount") or 0
    document["tags"] = list(document.get("tags") or [])
    document["createdAt"] = datetime.now(timezone.utc)

    collection = get_resources_collection()
    result = await collection.insert_one(document)
    logger.info("Created resource %s (%s)", result.inserted_id, document.get("type"))

    created = await collection.find_one({"_id": result.inserted_id})
    return _to_resource(created)


async def increment_download_count(resource_id: str) -> Optional[dict]:
    """
    Atomically adds one to the download counter of a resource.

    The increment is a single `$inc` update on the server, so concurrent
    calls never lose updates. A missing counter is treated as 0.

    Args:
        resource_id (str): Identifier of the resource.

    Returns:
        Optional[dict]: The updated resource record, or None if no record
        has that identifier.
    """

    object_id = _object_id(resource_id)
    if object_id is None:
        return None

    document = await get_resources_collection().find_one_and_update(
        {"_id": object_id},
        {"$inc": {"downloadCount": 1}},
        return_document=ReturnDocument.AFTER,
    )
    if not document:
        return None
    return _to_resource(document)


async def count_resources() -> int:
    """Returns the number of stored resources."""

    return await get_resources_collection().count_documents({})


async def seed_if_empty(sample_set: Iterable[dict]) -> int:
    """
    Inserts a demonstration dataset when the store holds no resources.

    Calling it again once the store has data is a no-op.

    Args:
        sample_set (Iterable[dict]): Resource drafts to insert.

    Returns:
        int: Number of resources inserted (0 when the store was not empty).
    """

    if await count_resources() > 0:
        logger.info("Resource store already populated, skipping seed")
        return 0

    inserted = 0
    for draft in sample_set:
        await create_resource(dict(draft))
        inserted += 1

    logger.info("Seeded %d sample resources", inserted)
    return inserted
