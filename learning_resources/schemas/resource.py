"""
Resource schemas.

This module defines the Pydantic schemas used to represent resource data
in API responses.

Schemas:
    - ResourceResponse: A stored resource as returned by the API.
    - DownloadAck: Acknowledgement of a download count increment.
    - CategorySummary: One entry of the category listing with its record count.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from learning_resources.models.resource import ResourceType


class ResourceResponse(BaseModel):
    """
    Represents a resource object returned by the API.

    Example:
        >>> resource = ResourceResponse(
        ...     id="665f1c2e9b1e8a3d4c5b6a79",
        ...     title="Data Structures and Algorithms",
        ...     author="Dr. Alan Chen",
        ...     type="lecture-notes",
        ...     description="Lecture notes on arrays, lists, trees and graphs.",
        ...     downloadCount=2341,
        ...     createdAt=datetime(2025, 1, 1)
        ... )
        >>> resource.type.value
        'lecture-notes'
    """

    id: str
    """Store-assigned identifier."""

    title: str
    author: str
    type: ResourceType
    description: str
    fileName: Optional[str] = None
    fileSize: Optional[str] = None
    fileUrl: Optional[str] = None

    downloadCount: int = 0
    """Number of recorded downloads."""

    tags: List[str] = []

    createdAt: datetime
    """Creation time, stamped by the server."""


class DownloadAck(BaseModel):
    message: str
    downloadCount: int


class CategorySummary(BaseModel):
    type: str
    label: str
    count: int
