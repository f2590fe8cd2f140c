# src/models/view_state.py

"""Explicit state passed between the listing's pure functions."""

from dataclasses import dataclass, field
from enum import Enum

from src.models.property import Property


class SortKey(str, Enum):
    """Fields the listing can be ordered by."""

    PRICE = "price"
    DATE = "date"


class SortDirection(str, Enum):
    """Ordering direction for the active sort key."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortState:
    """Active sort key and direction; no key means insertion order."""

    key: SortKey | None = None
    direction: SortDirection = SortDirection.DESC

    @property
    def is_active(self) -> bool:
        return self.key is not None


@dataclass(frozen=True)
class PageView:
    """One rendered page of the listing plus pager metadata.

    ``visible_pages`` holds page numbers in display order, with ``None``
    standing for a collapsed run of pages (an ellipsis).
    """

    items: list[Property] = field(
        default_factory=lambda: list[Property]()
    )
    current_page: int = 1
    total_pages: int = 0
    visible_pages: list[int | None] = field(
        default_factory=lambda: list[int | None]()
    )
    total_items: int = 0

    @property
    def is_empty(self) -> bool:
        return self.total_items == 0

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages
