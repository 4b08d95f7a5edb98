"""
Resource model definition.

This module defines the `Resource` domain types used across the
Learning Resources backend. A resource is a catalog entry describing one
piece of educational material (e-book, lecture notes, research paper or
multimedia). Only metadata is stored; uploads are simulated and no binary
content is ever transferred.

The models are implemented using Pydantic for data validation and type
hinting, ensuring consistency across the API and MongoDB storage.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResourceType(str, Enum):
    """
    Closed set of resource categories.

    Values are stored as plain strings in MongoDB.
    """

    EBOOK = "ebook"
    LECTURE_NOTES = "lecture-notes"
    RESEARCH_PAPER = "research-paper"
    MULTIMEDIA = "multimedia"


CATEGORY_DISPLAY_NAMES = {
    ResourceType.EBOOK: "E-books",
    ResourceType.LECTURE_NOTES: "Lecture Notes",
    ResourceType.RESEARCH_PAPER: "Research Papers",
    ResourceType.MULTIMEDIA: "Multimedia",
}
"""Human-readable label of each category, as shown by the frontend."""

ALL_CATEGORIES = "all"
"""Pseudo-category meaning "no type restriction"."""


class ResourceCreate(BaseModel):
    """
    Client-supplied draft of a new resource.

    `id`, `downloadCount` and `createdAt` are assigned by the store; if a
    client sends them anyway they are ignored.

    Example:
        >>> draft = ResourceCreate(
        ...     title="Operating Systems Concepts",
        ...     author="Dr. Sarah Williams",
        ...     type="lecture-notes",
        ...     description="Notes on processes, memory and file systems.",
        ...     fileName="os-notes.pdf",
        ...     fileSize="3.1 MB"
        ... )
        >>> draft.type
        'lecture-notes'
    """

    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    title: str = Field(min_length=3, max_length=200)
    """Title of the resource."""

    author: str = Field(min_length=2, max_length=100)
    """Author, lecturer or publishing group."""

    type: ResourceType
    """Category of the resource."""

    description: str = Field(min_length=10, max_length=1000)
    """Free-text summary of the content."""

    fileName: Optional[str] = None
    """Name of the (simulated) uploaded file."""

    fileSize: Optional[str] = None
    """Human-readable size of the file (e.g., `2.5 MB`)."""

    fileUrl: Optional[str] = None
    """Download location, if any."""

    tags: List[str] = []
    """Free-text labels. Stored and returned, not used for querying."""
