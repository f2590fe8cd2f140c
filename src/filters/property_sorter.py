# src/filters/property_sorter.py

"""Price / publication-date ordering with a tri-state sort toggle."""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from src.models.property import Property
from src.models.view_state import SortDirection, SortKey, SortState

logger = logging.getLogger("property_admin.filters")

_DATE_FORMAT = "%d-%m-%Y"


def parse_listing_date(value: str) -> datetime | None:
    """Parse a ``DD-MM-YYYY`` publication date.

    Returns ``None`` when the string is not a valid calendar date.
    """
    try:
        return datetime.strptime(value.strip(), _DATE_FORMAT)
    except (AttributeError, ValueError):
        return None


def _date_key(prop: Property) -> datetime:
    parsed = parse_listing_date(prop.date)
    if parsed is None:
        logger.debug(
            "Unparseable date '%s' on %s, sorting as oldest",
            prop.date,
            prop.id,
        )
        return datetime.min
    return parsed


def _price_key(prop: Property) -> float:
    return prop.price


_SORT_KEYS: dict[SortKey, Callable[[Property], float | datetime]] = {
    SortKey.PRICE: _price_key,
    SortKey.DATE: _date_key,
}


def toggle_sort(state: SortState, key: SortKey) -> SortState:
    """Advance the per-key cycle: descending, ascending, unsorted.

    Picking a key other than the active one starts it at descending.
    """
    if state.key != key:
        return SortState(key=key, direction=SortDirection.DESC)
    if state.direction is SortDirection.DESC:
        return SortState(key=key, direction=SortDirection.ASC)
    return SortState()


class PropertySorter:
    """Order listings according to a :class:`SortState`."""

    @staticmethod
    def sort(
        properties: Sequence[Property],
        state: SortState,
    ) -> list[Property]:
        """Return a new list ordered by *state*.

        An inactive state keeps the input order.
        """
        if state.key is None:
            return list(properties)

        key_func = _SORT_KEYS[state.key]
        return sorted(
            properties,
            key=key_func,
            reverse=state.direction is SortDirection.DESC,
        )
