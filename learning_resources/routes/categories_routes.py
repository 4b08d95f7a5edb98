"""
Category routes.

Lists the resource categories with their display label and the number of
stored resources in each, as shown by the category buttons of the
resources page.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException
from pymongo.errors import PyMongoError

from learning_resources.models.resource import ALL_CATEGORIES, CATEGORY_DISPLAY_NAMES
from learning_resources.schemas.resource import CategorySummary
from learning_resources.services.filter_state import category_counts
from learning_resources.services.resources_service import get_all_resources

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[CategorySummary])
async def list_categories():
    """
    List every category, preceded by the `all` pseudo-category.

    Returns:
        List[CategorySummary]: Category value, label and resource count.

    Example:
        >>> GET /api/categories
        [{"type": "all", "label": "All Resources", "count": 12}, ...]
    """

    try:
        resources = await get_all_resources()
    except PyMongoError:
        logger.exception("Error counting resources per category")
        raise HTTPException(status_code=500, detail="Failed to fetch categories")

    counts = category_counts(resources)
    categories = [{"type": ALL_CATEGORIES, "label": "All Resources", "count": counts[ALL_CATEGORIES]}]
    for resource_type, label in CATEGORY_DISPLAY_NAMES.items():
        categories.append({"type": resource_type.value, "label": label, "count": counts.get(resource_type.value, 0)})
    return categories
