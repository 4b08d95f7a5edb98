"""
Resource routes.

This module defines the API endpoints used to browse, search and upload
learning resources. Reads delegate to the query and resources services;
only the create and download endpoints change stored state.

Storage failures are logged and reported as a generic 500 response.
Request bodies that fail validation are turned into a 400 response with
per-field messages by the handler registered in `learning_resources.main`.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pymongo.errors import PyMongoError

from learning_resources.models.resource import ResourceCreate
from learning_resources.schemas.resource import DownloadAck, ResourceResponse
from learning_resources.services.query_service import search_resources
from learning_resources.services.resources_service import (
    create_resource,
    get_all_resources,
    get_resource,
    get_resources_by_type,
    increment_download_count,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[ResourceResponse])
async def list_resources(
    type: Optional[str] = None,
    q: Optional[str] = None,
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
):
    """
    List resources, optionally filtered, searched and sorted.

    When `q` or `sortBy` is given the request goes through the search;
    otherwise `type` selects a single category, and without any parameter
    every resource is returned, newest first.

    Args:
        type (Optional[str]): Category (`ebook`, `lecture-notes`,
            `research-paper`, `multimedia`) or `all`.
        q (Optional[str]): Case-insensitive text matched against title,
            author and description.
        sort_by (Optional[str]): `newest` (default), `downloads`, `title` or `author`.

    Returns:
        List[ResourceResponse]: Matching resources.

    Example:
        >>> GET /api/resources?q=machine%20learning&sortBy=downloads
    """

    try:
        if q or sort_by:
            return await search_resources(q or "", type, sort_by)
        if type:
            return await get_resources_by_type(type)
        return await get_all_resources()
    except PyMongoError:
        logger.exception("Error fetching resources")
        raise HTTPException(status_code=500, detail="Failed to fetch resources")


@router.get("/{resource_id}", response_model=ResourceResponse)
async def get_resource_route(resource_id: str):
    """
    Retrieve a single resource.

    Args:
        resource_id (str): Identifier of the resource.

    Returns:
        ResourceResponse: The resource.

    Raises:
        HTTPException: 404 if no resource has that identifier.

    Example:
        >>> GET /api/resources/665f1c2e9b1e8a3d4c5b6a79
    """

    try:
        resource = await get_resource(resource_id)
    except PyMongoError:
        logger.exception("Error fetching resource %s", resource_id)
        raise HTTPException(status_code=500, detail="Failed to fetch resource")

    if resource is None:
        raise HTTPException(status_code=404, detail="Resource not found")
    return resource


@router.post("", status_code=201, response_model=ResourceResponse)
async def create_resource_route(data: ResourceCreate):
    """
    Upload the metadata of a new resource.

    Args:
        data (ResourceCreate): The resource to create.

    Returns:
        ResourceResponse: The stored resource, with its identifier,
        download counter and creation time.

    Example:
        >>> POST /api/resources
        {
            "title": "Compiler Construction",
            "author": "Prof. Ada Turing",
            "type": "lecture-notes",
            "description": "Lexing, parsing, semantic analysis and code generation.",
            "fileName": "compilers.pdf",
            "fileSize": "1.1 MB"
        }
    """

    try:
        return await create_resource(data.model_dump())
    except PyMongoError:
        logger.exception("Error creating resource")
        raise HTTPException(status_code=500, detail="Failed to create resource")


@router.post("/{resource_id}/download", response_model=DownloadAck)
async def download_resource_route(resource_id: str):
    """
    Record one download of a resource.

    Args:
        resource_id (str): Identifier of the resource.

    Returns:
        DownloadAck: Confirmation message and the new download count.

    Raises:
        HTTPException: 404 if no resource has that identifier.

    Example:
        >>> POST /api/resources/665f1c2e9b1e8a3d4c5b6a79/download
    """

    try:
        resource = await increment_download_count(resource_id)
    except PyMongoError:
        logger.exception("Error incrementing download count of %s", resource_id)
        raise HTTPException(status_code=500, detail="Failed to increment download count")

    if resource is None:
        raise HTTPException(status_code=404, detail="Resource not found")
    return {"message": "Download count incremented", "downloadCount": resource["downloadCount"]}
