"""Utility functions shared across the back office package."""

from backoffice_ui.utils.date_helpers import (
    format_display_date,
    format_display_day,
    map_date_to_iso,
    parse_instant,
)
from backoffice_ui.utils.list_helpers import (
    PAGE_SIZE,
    matches_date,
    matches_text,
    page_slice,
    stringify,
    total_pages,
)

__all__ = [
    "PAGE_SIZE",
    "format_display_date",
    "format_display_day",
    "map_date_to_iso",
    "matches_date",
    "matches_text",
    "page_slice",
    "parse_instant",
    "stringify",
    "total_pages",
]
