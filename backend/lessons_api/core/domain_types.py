"""Domain Types — aliases and enums shared by routes, repositories and tests.

Invariants:
    - Documents are schema-less: Document is a plain str-keyed dict
    - Sort direction maps to the store's 1 / -1 convention
    - Order and lesson collections have fixed names, independent of the URL
"""

from enum import Enum
from typing import Any, NewType


# ─── Document Types ──────────────────────────────────────────────

Document = dict[str, Any]
Filter = dict[str, Any]
CollectionName = NewType("CollectionName", str)

ID_FIELD = "_id"


# ─── Fixed Collections ───────────────────────────────────────────

ORDERS_COLLECTION = CollectionName("orders")
LESSONS_COLLECTION = CollectionName("lessons")


# ─── Enums ───────────────────────────────────────────────────────

class SortDirection(int, Enum):
    """Store sort order for the sorted-list route."""
    ASCENDING = 1
    DESCENDING = -1

    @classmethod
    def from_path(cls, raw: str) -> "SortDirection":
        """Only the exact string "desc" sorts descending; anything else ascends."""
        return cls.DESCENDING if raw == "desc" else cls.ASCENDING


class LessonTextField(str, Enum):
    """Lesson fields matched by case-insensitive substring search."""
    SUBJECT = "subject"
    DESCRIPTION = "description"
    LOCATION = "location"


class LessonNumericField(str, Enum):
    """Lesson fields matched by exact numeric search."""
    PRICE = "price"
    AVAILABLE_SPACES = "availablespaces"
