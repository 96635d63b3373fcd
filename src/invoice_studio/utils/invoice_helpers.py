"""
Helper functions for invoice search, dates and pagination.

Provides helpers for:
- Date parsing (multiple formats supported)
- Search query matching against invoice fields
- Slicing result lists into pages
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Sequence, TypeVar

if TYPE_CHECKING:
    from invoice_studio.models.invoice import Invoice

T = TypeVar("T")


def parse_date(date_str: str | None) -> datetime | None:
    """
    Parse a date string to a datetime object.

    Args:
        date_str: Date string in ISO format (e.g., "2024-12-25") or m/d/y
            format (e.g., "12/25/2024").

    Returns:
        datetime object if parsing succeeds, None otherwise
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    try:
        return datetime.fromisoformat(date_str)
    except (ValueError, TypeError):
        pass

    # m/d/y with 4-digit then 2-digit year (e.g., "12/25/2024", "1/5/24")
    for pattern in ("%m/%d/%Y", "%m/%d/%y"):
        try:
            return datetime.strptime(date_str, pattern)
        except ValueError:
            pass

    return None


def matches_query(invoice: "Invoice", query: str) -> bool:
    """
    Check if an invoice matches the search query.

    Performs case-insensitive substring matching against the invoice
    number, notes, status and line item descriptions.

    Args:
        invoice: Invoice to check.
        query: Search query string.

    Returns:
        True if query matches any searchable term, or if query is empty.
    """
    normalized = (query or "").strip().lower()
    if not normalized:
        return True
    return any(normalized in value for value in invoice.searchable_terms())


def page_slice(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return the 1-indexed page of items; out of range pages are empty."""
    page, page_size = max(page, 1), max(page_size, 1)
    start = (page - 1) * page_size
    return list(items[start : start + page_size])
