"""Lesson Search Filter — builds the disjunctive store filter for GET /search.

Invariants:
    - Empty query → empty filter (matches every lesson)
    - Text fields matched case-insensitively as literal substrings (query is regex-escaped)
    - Numeric fields added when the query starts with a finite decimal number
    - Result is always {} or {"$or": [...]} with at least one condition

Design Decisions:
    - Pure function: the route only forwards the result to the lessons repository
"""

import math
import re

from lessons_api.core.domain_types import Filter, LessonNumericField, LessonTextField


# Leading decimal literal after optional whitespace: digits, one dot, exponent.
# An underscore, "x" or any other character ends the literal; "inf"/"nan" never match.
_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII,
)


def parse_search_number(query: str) -> float | None:
    """Numeric value of the query's leading decimal literal, or None.

    "20abc" reads as 20 and "1_0" as 1; trailing text is ignored.
    """
    match = _LEADING_NUMBER.match(query)
    if match is None:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def build_search_filter(query: str) -> Filter:
    """Build an $or filter over lesson text and numeric fields."""
    conditions: list[Filter] = []
    if query:
        pattern = {"$regex": re.escape(query), "$options": "i"}
        conditions.extend({f.value: dict(pattern)} for f in LessonTextField)

    number = parse_search_number(query) if query else None
    if number is not None:
        conditions.extend({f.value: number} for f in LessonNumericField)

    return {"$or": conditions} if conditions else {}
