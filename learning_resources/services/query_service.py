"""
Query service.

This module composes the resource queries offered by the catalog: a
category filter, a free-text filter and a choice of sort order, applied
on top of the records returned by `resources_service`.

The predicates and the sort are plain functions over resource records so
the same rules can be reused by the client-side filter state
(`learning_resources.services.filter_state`).
"""

import logging
import unicodedata
from typing import Iterable, Optional

from learning_resources.models.resource import ALL_CATEGORIES
from learning_resources.services import resources_service

logger = logging.getLogger(__name__)

SEARCHABLE_FIELDS = ("title", "author", "description")

SORT_NEWEST = "newest"
SORT_DOWNLOADS = "downloads"
SORT_TITLE = "title"
SORT_AUTHOR = "author"
SORT_OPTIONS = (SORT_NEWEST, SORT_DOWNLOADS, SORT_TITLE, SORT_AUTHOR)


def matches_text(resource: dict, text: Optional[str]) -> bool:
    """
    Checks whether a resource matches a free-text query.

    Matching is case-insensitive substring containment against the title,
    author and description; one matching field is enough. An empty query
    matches every resource.

    Args:
        resource (dict): Resource record.
        text (Optional[str]): Text typed by the user.

    Returns:
        bool: True if the resource matches.
    """

    if not text:
        return True
    needle = text.lower()
    return any(needle in (resource.get(field) or "").lower() for field in SEARCHABLE_FIELDS)


def matches_type(resource: dict, resource_type: Optional[str]) -> bool:
    """True if `resource_type` is unset, `all`, or equal to the resource's type."""

    if not resource_type or resource_type == ALL_CATEGORIES:
        return True
    return resource.get("type") == resource_type


def collation_key(value: Optional[str]) -> str:
    """
    Sort key comparing text the way a reader would: accents and case ignored.

    "Émile" sorts next to "Emma", not after "Zoe".
    """

    decomposed = unicodedata.normalize("NFKD", value or "")
    return "".join(char for char in decomposed if not unicodedata.combining(char)).casefold()


def normalize_sort(sort_by: Optional[str]) -> str:
    """Maps an unknown or missing sort option to `newest`."""

    if sort_by in SORT_OPTIONS:
        return sort_by
    return SORT_NEWEST


def sort_resources(resources: Iterable[dict], sort_by: Optional[str] = None) -> list[dict]:
    """
    Orders resources according to a sort option.

    Options:
        - `downloads`: most downloaded first (a missing counter counts as 0).
        - `title` / `author`: ascending, ignoring case and accents.
        - `newest` (default, also used for unknown values): most recent `createdAt` first.

    The sort is stable: resources that compare equal keep their input order.

    Args:
        resources (Iterable[dict]): Resource records.
        sort_by (Optional[str]): Sort option.

    Returns:
        list[dict]: A new, sorted list.
    """

    option = normalize_sort(sort_by)

    if option == SORT_DOWNLOADS:
        return sorted(resources, key=lambda r: r.get("downloadCount") or 0, reverse=True)
    if option == SORT_TITLE:
        return sorted(resources, key=lambda r: collation_key(r.get("title")))
    if option == SORT_AUTHOR:
        return sorted(resources, key=lambda r: collation_key(r.get("author")))
    return sorted(resources, key=lambda r: r["createdAt"], reverse=True)


async def search_resources(
    text: Optional[str] = "",
    resource_type: Optional[str] = None,
    sort_by: Optional[str] = None,
) -> list[dict]:
    """
    Searches the catalog.

    The candidate set is fetched from the store (restricted to one category
    unless `resource_type` is empty or `all`), filtered by `text` and then
    sorted. No limit is applied.

    Args:
        text (Optional[str]): Free-text query; empty matches everything.
        resource_type (Optional[str]): Category filter, or `all`.
        sort_by (Optional[str]): One of `downloads`, `title`, `author`, `newest`.

    Returns:
        list[dict]: Matching resource records in the requested order.

    Example:
        >>> await search_resources("machine learning", "all", "downloads")
    """

    if resource_type and resource_type != ALL_CATEGORIES:
        candidates = await resources_service.get_resources_by_type(resource_type)
    else:
        candidates = await resources_service.get_all_resources()

    matches = [resource for resource in candidates if matches_text(resource, text)]
    logger.debug(
        "Search text=%r type=%r sort=%r matched %d of %d",
        text, resource_type, sort_by, len(matches), len(candidates),
    )
    return sort_resources(matches, sort_by)
