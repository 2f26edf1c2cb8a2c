"""Document Helpers — identifier parsing and JSON conversion for stored documents.

Invariants:
    - parse_document_id never returns None: bad input raises InvalidDocumentIdError
    - to_json_document renders ObjectId values as their 24-char hex string
    - update_fields never contains the identifier field
    - Write bodies never carry non-finite floats into the store
"""

import math
from typing import Any, Iterator

from bson import ObjectId
from bson.errors import InvalidId
from fastapi.encoders import jsonable_encoder

from lessons_api.core.domain_types import Document, ID_FIELD
from lessons_api.core.errors import DocumentValidationError, InvalidDocumentIdError


def parse_document_id(raw_id: str) -> ObjectId:
    """Convert a path segment into the store's identifier type."""
    try:
        return ObjectId(raw_id)
    except (InvalidId, TypeError):
        raise InvalidDocumentIdError(raw_id)


def to_json_document(document: Document) -> Document:
    """Make a stored document JSON-safe (ObjectId, datetime, nested values)."""
    return jsonable_encoder(document, custom_encoder={ObjectId: str})


def to_json_documents(documents: list[Document]) -> list[Document]:
    return [to_json_document(d) for d in documents]


def ensure_finite(document: Document) -> Document:
    """Reject NaN and ±Infinity anywhere in a write body."""
    for path, value in _walk(document, ""):
        if isinstance(value, float) and not math.isfinite(value):
            raise DocumentValidationError(
                f"Field '{path}' must be a finite number", path,
            )
    return document


def _walk(value: Any, path: str) -> Iterator[tuple[str, Any]]:
    if isinstance(value, dict):
        for key, item in value.items():
            yield from _walk(item, f"{path}.{key}" if path else str(key))
    elif isinstance(value, list):
        for i, item in enumerate(value):
            yield from _walk(item, f"{path}.{i}")
    else:
        yield path, value


def update_fields(body: Document) -> Document:
    """Fields to $set for a partial update: identifier excluded, finite, never empty.

    A body with nothing left to set is rejected as a request error rather than
    sent to the store as a no-op update.
    """
    fields = ensure_finite({k: v for k, v in body.items() if k != ID_FIELD})
    if not fields:
        raise DocumentValidationError(
            "Update body must contain at least one field besides _id", "body",
        )
    return fields
