# src/filters/paginator.py

"""Fixed-size paging and the compact page-number window for the pager."""

import math
from collections.abc import Sequence

from src.models.property import Property
from src.models.view_state import PageView


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for *count* items; 0 for an empty list."""
    if count <= 0:
        return 0
    return math.ceil(count / page_size)


def is_valid_page(page: int, total: int) -> bool:
    return 1 <= page <= total


def clamp_page(page: int, total: int) -> int:
    """Pull *page* into ``[1, total]`` (page 1 when there are no pages)."""
    if total <= 0:
        return 1
    return max(1, min(page, total))


def visible_pages(current: int, total: int) -> list[int | None]:
    """Page numbers to show in the pager, ``None`` marking an ellipsis.

    The first and last page are always shown, as are the neighbours of
    *current*.  Every gap of one or more hidden pages collapses into a
    single ``None``.
    """
    if total <= 0:
        return []

    shown = {1, total}
    shown.update(
        p for p in (current - 1, current, current + 1) if 1 <= p <= total
    )

    window: list[int | None] = []
    previous = 0
    for page in sorted(shown):
        if page - previous > 1:
            window.append(None)
        window.append(page)
        previous = page
    return window


def paginate(
    properties: Sequence[Property],
    page: int,
    page_size: int,
) -> PageView:
    """Slice out *page* of *properties* and attach pager metadata.

    A page outside ``[1, total]`` on either side yields no items; an empty
    list yields zero pages.
    """
    count = len(properties)
    pages = total_pages(count, page_size)
    start = (page - 1) * page_size
    items = list(properties[start:start + page_size]) if page >= 1 else []

    return PageView(
        items=items,
        current_page=page,
        total_pages=pages,
        visible_pages=visible_pages(page, pages),
        total_items=count,
    )
