"""Health & Readiness Checks.

Invariants:
    - GET /health answers 200 without touching the store
    - GET /health/ready answers 503 until the store is initialized and answers a ping;
      it never raises StoreNotInitializedError itself
"""

import time

from fastapi import APIRouter, Request, status

from lessons_api.api.responses import IndentedJSONResponse
import lessons_api.infrastructure.database as database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def liveness(request: Request):
    return {
        "status": "healthy",
        "service": request.app.title,
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness():
    manager = database.store_manager
    if manager is None:
        return _not_ready("database_not_initialized")

    started = time.perf_counter()
    if not await manager.health_check():
        return _not_ready("database_unavailable")
    return {
        "status": "ready",
        "database": manager.database.name,
        "ping_ms": round((time.perf_counter() - started) * 1000, 3),
    }


def _not_ready(reason: str) -> IndentedJSONResponse:
    return IndentedJSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
