"""Error Hierarchy tests — status codes and REST envelope shape."""

from lessons_api.core.errors import (
    DatabaseError, DocumentValidationError, ErrorContext, InvalidDocumentIdError,
    LessonsApiError, StoreNotInitializedError,
)
from lessons_api.core.domain_types import SortDirection


def test_status_codes():
    assert DocumentValidationError("bad", "body").http_status == 400
    assert InvalidDocumentIdError("x").http_status == 500
    assert DatabaseError("boom", "find").http_status == 500
    assert StoreNotInitializedError().http_status == 503


def test_all_errors_share_base():
    for exc in (
        DocumentValidationError("bad", "body"), InvalidDocumentIdError("x"),
        DatabaseError("boom", "find"), StoreNotInitializedError(),
    ):
        assert isinstance(exc, LessonsApiError)


def test_to_response_envelope():
    exc = DatabaseError("timeout", "insert", ErrorContext(collection="orders"))
    error = exc.to_response()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["message"] == "Database insert failed: timeout"
    assert error["category"] == "database"
    assert error["severity"] == "critical"
    assert error["context"]["collection"] == "orders"
    assert "timestamp" in error


def test_store_not_initialized_message():
    assert StoreNotInitializedError().message == "Database not initialized"


def test_sort_direction_only_desc_is_descending():
    assert SortDirection.from_path("desc") is SortDirection.DESCENDING
    assert SortDirection.from_path("asc") is SortDirection.ASCENDING
    assert SortDirection.from_path("DESC") is SortDirection.ASCENDING
    assert SortDirection.from_path("") is SortDirection.ASCENDING
