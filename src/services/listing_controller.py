# src/services/listing_controller.py

"""Owns the listing's sort and page state and builds the rendered page."""

import logging
from collections.abc import Callable, Sequence

from src.config.settings import Settings
from src.filters.paginator import clamp_page, is_valid_page, paginate, total_pages
from src.filters.property_sorter import PropertySorter, toggle_sort
from src.models.property import Property
from src.models.view_state import PageView, SortKey, SortState

logger = logging.getLogger("property_admin.listing")


class ListingController:
    """Threads sort / page state through the pure listing functions.

    The presentation layer feeds it the (possibly filtered) listings and
    user clicks, and renders whatever :meth:`view` returns.
    """

    def __init__(
        self,
        properties: Sequence[Property] = (),
        page_size: int | None = None,
        on_select: Callable[[Property], None] | None = None,
    ) -> None:
        self.properties: Sequence[Property] = properties
        self.page_size: int = page_size or Settings.PAGE_SIZE
        self.sort_state: SortState = SortState()
        self.current_page: int = 1
        self._on_select = on_select

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.properties), self.page_size)

    def set_properties(self, properties: Sequence[Property]) -> None:
        """Replace the listings, keeping the page inside the new range."""
        self.properties = properties
        clamped = clamp_page(self.current_page, self.total_pages)
        if clamped != self.current_page:
            logger.debug(
                "Page %d out of range after update, clamped to %d",
                self.current_page,
                clamped,
            )
        self.current_page = clamped

    def toggle_sort(self, key: SortKey) -> SortState:
        """Cycle the sort on *key* and go back to the first page."""
        self.sort_state = toggle_sort(self.sort_state, key)
        self.current_page = 1
        logger.debug(
            "Sort now key=%s direction=%s",
            self.sort_state.key,
            self.sort_state.direction,
        )
        return self.sort_state

    def go_to_page(self, page: int) -> bool:
        """Move to *page*; out-of-range requests leave the state untouched."""
        if not is_valid_page(page, self.total_pages):
            logger.debug(
                "Rejected page %d (total %d)", page, self.total_pages
            )
            return False
        self.current_page = page
        return True

    def next_page(self) -> bool:
        return self.go_to_page(self.current_page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.current_page - 1)

    def view(self) -> PageView:
        """Sort the listings and cut out the current page."""
        ordered = PropertySorter.sort(self.properties, self.sort_state)
        return paginate(ordered, self.current_page, self.page_size)

    def select(self, row_index: int) -> Property | None:
        """Resolve a row of the current page and report the selection."""
        items = self.view().items
        if not 0 <= row_index < len(items):
            return None

        selected = items[row_index]
        logger.info("Listing selected: %s", selected.id)
        if self._on_select is not None:
            self._on_select(selected)
        return selected
