"""Lesson Search — GET /search over the fixed lessons collection.

Invariants:
    - Always queries the lessons collection, whatever the request context
    - Empty q lists every lesson
    - Store failures surface as 500 through the global handler
"""

import logging

from fastapi import APIRouter, Depends, Query

from lessons_api.core.documents import to_json_documents
from lessons_api.core.domain_types import LESSONS_COLLECTION
from lessons_api.core.search_filter import build_search_filter
from lessons_api.infrastructure.database import DocumentStoreManager, get_store

logger = logging.getLogger(__name__)
router = APIRouter(tags=["search"])


@router.get("/search")
async def search_lessons(
    q: str = Query(""),
    store: DocumentStoreManager = Depends(get_store),
):
    """Match lessons by subject/description/location text or price/availablespaces."""
    search_filter = build_search_filter(q)
    lessons = await store.repository(LESSONS_COLLECTION).find(search_filter)
    logger.debug(
        f"Search '{q}' matched {len(lessons)} lesson(s)",
        extra={"collection": LESSONS_COLLECTION},
    )
    return to_json_documents(lessons)
