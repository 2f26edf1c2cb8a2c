"""Error Hierarchy — typed, categorized exceptions for all Lessons API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status the global handler responds with
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with LessonsApiError base: one FastAPI handler catches all
    - Malformed document ids are 500 (store-level failure), not 404
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Observability context attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collection: str | None = None
    document_id: str | None = None
    debug_info: dict[str, Any] | None = None


class LessonsApiError(Exception):
    """Base exception for all Lessons API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "collection": self.context.collection,
                    "document_id": self.context.document_id,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class DocumentValidationError(LessonsApiError):
    """Request body rejected before reaching the store."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


# ─── Store Errors (500-level) ───────────────────────────────────

class InvalidDocumentIdError(LessonsApiError):
    """Path id cannot be converted to the store's identifier type."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.document_id = raw_id
        super().__init__(
            f"'{raw_id}' is not a valid document id",
            "INVALID_DOCUMENT_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 500,
        )
        self.raw_id = raw_id


class DatabaseError(LessonsApiError):
    """Document store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class StoreNotInitializedError(LessonsApiError):
    """A request arrived before the store connection was established."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Database not initialized",
            "STORE_NOT_INITIALIZED", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )
