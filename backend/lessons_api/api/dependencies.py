"""Route Dependencies — bind a path-supplied collection name to a repository.

Invariants:
    - The store readiness check runs before any collection is resolved
    - Collection handles are resolved per request, never cached
"""

from fastapi import Depends

from lessons_api.infrastructure.database import DocumentStoreManager, get_store
from lessons_api.infrastructure.document_repository import MongoDocumentRepository


def get_collection(
    name: str, store: DocumentStoreManager = Depends(get_store),
) -> MongoDocumentRepository:
    """Resolve the {name} path segment to a repository on the shared store."""
    return store.repository(name)
