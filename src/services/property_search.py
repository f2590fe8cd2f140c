# src/services/property_search.py

"""Debounced free-text search over the loaded listings."""

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Protocol

from src.config.settings import Settings
from src.filters.property_filter import PropertyFilter
from src.models.property import Property

logger = logging.getLogger("property_admin.search")


class TimerHandle(Protocol):
    """A pending deferred call that can be cancelled."""

    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


def asyncio_scheduler(
    delay: float, callback: Callable[[], None]
) -> TimerHandle:
    """Schedule *callback* on the running event loop after *delay* seconds."""
    return asyncio.get_running_loop().call_later(delay, callback)


class PropertySearch:
    """Filter listings on a query that settles after a debounce delay.

    Every edit cancels the pending timer and starts a new one, so only the
    term present when the delay runs out is applied.  Clearing the term
    restores the full list at once.
    """

    def __init__(
        self,
        properties: Sequence[Property],
        fields: Iterable[str] | None = None,
        debounce_ms: int | None = None,
        scheduler: Scheduler | None = None,
        on_results: Callable[[Sequence[Property]], None] | None = None,
    ) -> None:
        self.properties: Sequence[Property] = properties
        self.fields: tuple[str, ...] = tuple(
            fields if fields is not None else Settings.SEARCH_FIELDS
        )
        self.debounce_ms: int = (
            debounce_ms
            if debounce_ms is not None
            else Settings.SEARCH_DEBOUNCE_MS
        )
        self._scheduler: Scheduler = scheduler or asyncio_scheduler
        self._on_results = on_results
        self._pending: TimerHandle | None = None

        self.search_term: str = ""
        self.applied_term: str = ""
        self.filtered: Sequence[Property] = properties
        self.is_searching: bool = False

    # ── Derived state ────────────────────────────────────

    @property
    def total_results(self) -> int:
        return len(self.filtered)

    @property
    def has_results(self) -> bool:
        return self.total_results > 0

    # ── Input events ─────────────────────────────────────

    def handle_search_change(self, value: str) -> None:
        """Record a keystroke; the term applies once typing settles."""
        self.search_term = value
        self._cancel_pending()

        if not value.strip():
            self._apply("")
            return

        self.is_searching = True
        self._pending = self._scheduler(
            self.debounce_ms / 1000, self._on_timer
        )

    def handle_search(self, term: str) -> None:
        """Apply *term* right away (search submitted)."""
        self.search_term = term
        self._cancel_pending()
        self._apply(term)

    def clear_search(self) -> None:
        """Drop the query and show every listing again."""
        self.handle_search("")

    def set_properties(self, properties: Sequence[Property]) -> None:
        """Swap the candidate listings and re-run the current term."""
        self.properties = properties
        self.handle_search_change(self.search_term)

    # ── Internals ────────────────────────────────────────

    def _on_timer(self) -> None:
        self._pending = None
        self._apply(self.search_term)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _apply(self, term: str) -> None:
        self.applied_term = term.strip()
        self.filtered = PropertyFilter.filter_by_query(
            term, self.properties, self.fields
        )
        self.is_searching = False

        if self.applied_term:
            logger.info(
                "Search '%s' -> %d results",
                self.applied_term,
                self.total_results,
            )

        if self._on_results is not None:
            self._on_results(self.filtered)
