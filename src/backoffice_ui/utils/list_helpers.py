"""Filtering and pagination helpers for in-memory record lists."""

from __future__ import annotations

from datetime import tzinfo
from typing import TYPE_CHECKING, Any, Sequence, TypeVar

from backoffice_ui.utils.date_helpers import parse_instant

if TYPE_CHECKING:
    from backoffice_ui.models.common import FilterCriteria

T = TypeVar("T")

PAGE_SIZE = 10


def stringify(value: Any) -> str:
    """Render a field value the way the browser's toString() does."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def matches_text(value: Any, search: str | None, case_insensitive: bool = False) -> bool:
    """Check whether ``search`` is a substring of the stringified value."""
    if not search:
        return True
    text = stringify(value)
    if case_insensitive:
        return search.lower() in text.lower()
    return search in text


def matches_date(value: str | None, criteria: "FilterCriteria", tz: tzinfo | None = None) -> bool:
    """
    Check a record's date against the month or year selector.

    Calendar fields are read in ``tz`` (local zone when None). Records whose
    date is missing or unparsable never match an active date filter.
    """
    if not criteria.date_value:
        return True
    instant = parse_instant(value, tz)
    if instant is None:
        return False
    local = instant.astimezone(tz)
    if criteria.month is None:
        return local.year == criteria.year
    return (local.year, local.month) == (criteria.year, criteria.month)


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Return the page count, which is at least 1 even for an empty list."""
    return max(1, -(-count // page_size))


def page_slice(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> list[T]:
    """Return the 1-indexed page of items."""
    start = (page - 1) * page_size
    return list(items[start : start + page_size])
