"""
Client filter state.

Derived-state filtering applied by the frontend to a list of resources it
has already fetched, so results update while the user types without a
round trip to the server.

Everything here is a pure function of (fetched list, filter state): the
filtered view is recomputed on every change and inputs are never mutated.
The text rule is the one used by the server-side search
(`query_service.matches_text`), so live results and a full search agree.
"""

from typing import Iterable

from pydantic import BaseModel

from learning_resources.models.resource import ALL_CATEGORIES
from learning_resources.services.query_service import matches_text, matches_type


class FilterState(BaseModel):
    """
    Filter parameters selected in the resources page.

    Example:
        >>> state = FilterState(search_query="python", selected_category="multimedia")
        >>> has_active_filters(state)
        True
    """

    search_query: str = ""
    """Text typed in the search box."""

    selected_category: str = ALL_CATEGORIES
    """Selected category button, or `all`."""


def filter_resources(resources: Iterable[dict], state: FilterState) -> list[dict]:
    """
    Returns the resources matching both the search text and the category.

    The input order is preserved.
    """

    return [
        resource
        for resource in resources
        if matches_text(resource, state.search_query) and matches_type(resource, state.selected_category)
    ]


def category_counts(resources: Iterable[dict]) -> dict[str, int]:
    """
    Counts resources per category.

    The `all` key holds the total number of resources.
    """

    resources = list(resources)
    counts = {ALL_CATEGORIES: len(resources)}
    for resource in resources:
        counts[resource["type"]] = counts.get(resource["type"], 0) + 1
    return counts


def has_active_filters(state: FilterState) -> bool:
    return state.search_query != "" or state.selected_category != ALL_CATEGORIES


def clear_filters() -> FilterState:
    return FilterState()
