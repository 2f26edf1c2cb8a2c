"""Collection Router — generic CRUD over any named collection.

Invariants:
    - {name} is resolved to a repository per request via get_collection
    - Every handler makes exactly one store call
    - Only get-by-id handles a miss inline (404 {"msg": "Document not found"});
      update/delete misses answer 200 {"msg": "error"}
    - Malformed ids raise InvalidDocumentIdError (500), never a 404
    - Everything else propagates to the global error handlers
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, status

from lessons_api.api.dependencies import get_collection
from lessons_api.api.responses import IndentedJSONResponse
from lessons_api.core.documents import (
    ensure_finite, parse_document_id, to_json_document, to_json_documents,
    update_fields,
)
from lessons_api.core.domain_types import SortDirection
from lessons_api.core.repository_protocols import DocumentRepository
from lessons_api.schemas.collection import InsertAck, NotFoundMessage, StatusMessage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/collections", tags=["collections"])


@router.get("/{name}")
async def list_documents(repo: DocumentRepository = Depends(get_collection)):
    """Every document in the collection, unfiltered."""
    return to_json_documents(await repo.find())


@router.get("/{name}/{limit}/{sort_field}/{direction}")
async def list_documents_sorted(
    limit: int = Path(ge=0),
    sort_field: str = Path(),
    direction: str = Path(),
    repo: DocumentRepository = Depends(get_collection),
):
    """At most `limit` documents sorted by `sort_field` (0 means no limit)."""
    documents = await repo.find_sorted(
        limit, sort_field, SortDirection.from_path(direction),
    )
    return to_json_documents(documents)


@router.get("/{name}/{document_id}")
async def get_document(
    document_id: str, repo: DocumentRepository = Depends(get_collection),
):
    document = await repo.get_by_id(parse_document_id(document_id))
    if document is None:
        return IndentedJSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=NotFoundMessage().model_dump(),
        )
    return to_json_document(document)


@router.post("/{name}", response_model=InsertAck)
async def insert_document(
    body: dict[str, Any] = Body(),
    repo: DocumentRepository = Depends(get_collection),
):
    """Insert the body verbatim; the store assigns _id when absent."""
    inserted_id = await repo.insert(ensure_finite(body))
    return InsertAck(inserted_id=str(inserted_id))


@router.put("/{name}/{document_id}", response_model=StatusMessage)
async def update_document(
    document_id: str,
    body: dict[str, Any] = Body(),
    repo: DocumentRepository = Depends(get_collection),
):
    """Merge the given fields onto one document ($set, not replace)."""
    matched = await repo.update_fields(
        parse_document_id(document_id), update_fields(body),
    )
    return StatusMessage.from_count(matched)


@router.delete("/{name}/{document_id}", response_model=StatusMessage)
async def delete_document(
    document_id: str, repo: DocumentRepository = Depends(get_collection),
):
    deleted = await repo.delete(parse_document_id(document_id))
    if deleted != 1:
        logger.info(
            f"Delete of {document_id} in '{repo.name}' matched nothing",
            extra={"collection": repo.name, "document_id": document_id},
        )
    return StatusMessage.from_count(deleted)
