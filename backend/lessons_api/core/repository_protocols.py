"""Boundary Protocols — contract between routes and the document store.

Invariants:
    - Routes depend on DocumentRepository, never on the driver
    - Every method is exactly one store call
    - Identifiers are already parsed (ObjectId) when they reach the repository

Design Decisions:
    - Protocol over ABC: structural subtyping, tests may substitute any fake
"""

from typing import Any, Protocol

from bson import ObjectId

from lessons_api.core.domain_types import Document, Filter, SortDirection


class DocumentRepository(Protocol):
    """Contract for single-collection document access — implemented by infrastructure."""
    name: str

    async def find(self, filter_: Filter | None = None) -> list[Document]: ...
    async def find_sorted(
        self, limit: int, sort_field: str, direction: SortDirection,
    ) -> list[Document]: ...
    async def get_by_id(self, document_id: ObjectId) -> Document | None: ...
    async def insert(self, document: Document) -> Any: ...
    async def update_fields(self, document_id: ObjectId, fields: Document) -> int: ...
    async def delete(self, document_id: ObjectId) -> int: ...
