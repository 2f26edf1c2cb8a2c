"""Document Store Manager — one shared async Mongo client with an explicit readiness flag.

Invariants:
    - store_manager is None until a ping against the server succeeds
    - get_store() raises StoreNotInitializedError instead of returning None
    - A single client is shared by every request and closed on shutdown

Design Decisions:
    - Singleton store_manager initialized by the FastAPI lifespan, not on import
    - A failed startup connection is logged, not raised: the process stays up
      and every store-backed route answers 503 until restart
"""

import logging
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from lessons_api.core.errors import StoreNotInitializedError
from lessons_api.infrastructure.document_repository import MongoDocumentRepository

logger = logging.getLogger(__name__)


class DocumentStoreManager:
    """Owns the Mongo client and hands out per-collection repositories."""

    def __init__(self, client: Any, db_name: str):
        self.client = client
        self.database = client[db_name]

    def repository(self, name: str) -> MongoDocumentRepository:
        return MongoDocumentRepository(self.database[name], name)

    async def ping(self) -> None:
        await self.client.admin.command("ping")

    async def health_check(self) -> bool:
        """Check store connectivity (for the readiness check)."""
        try:
            await self.ping()
            return True
        except PyMongoError as e:
            logger.error(f"Store health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.close()


# Singleton (initialized on startup)
store_manager: DocumentStoreManager | None = None


async def init_store(uri: str, db_name: str, timeout_ms: int = 5000) -> bool:
    """Connect and verify the store; returns readiness."""
    global store_manager
    client = AsyncMongoClient(
        uri,
        server_api=ServerApi("1"),
        serverSelectionTimeoutMS=timeout_ms,
    )
    manager = DocumentStoreManager(client, db_name)
    try:
        await manager.ping()
    except PyMongoError as e:
        logger.error(f"Error connecting to document store: {e}")
        await manager.close()
        return False
    store_manager = manager
    logger.info(f"Connected to document store, database '{db_name}'")
    return True


async def close_store() -> None:
    global store_manager
    if store_manager is not None:
        await store_manager.close()
        store_manager = None


def get_store() -> DocumentStoreManager:
    """FastAPI dependency for the shared store."""
    if store_manager is None:
        raise StoreNotInitializedError()
    return store_manager
