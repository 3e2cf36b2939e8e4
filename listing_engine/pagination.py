"""
Offset/limit slicing of an ordered sequence.
"""
from typing import Any, List, NamedTuple, Sequence

from .filters import clamp_limit, clamp_page


class PageSlice(NamedTuple):
    items: List[Any]
    has_next: bool
    has_prev: bool


def page_bounds(total: int, page: int, limit: int):
    """Return ``(start, end)`` indices of a page, clamped to ``total``."""
    page, limit = clamp_page(page), clamp_limit(limit)
    start = min((page - 1) * limit, total)
    end = min(start + limit, total)
    return start, end


def total_pages(total: int, limit: int) -> int:
    limit = clamp_limit(limit)
    return (total + limit - 1) // limit


def paginate(ordered: Sequence[Any], page: int, limit: int) -> PageSlice:
    """
    Slice one page out of ``ordered``.

    ``has_next`` is measured against the real length of ``ordered``. A page
    past the end yields an empty list rather than an error.
    """
    page = clamp_page(page)
    start, end = page_bounds(len(ordered), page, limit)
    return PageSlice(
        items=list(ordered[start:end]),
        has_next=end < len(ordered),
        has_prev=page > 1,
    )
