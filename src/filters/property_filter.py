# src/filters/property_filter.py

"""Case-insensitive substring filtering of property listings."""

import logging
from collections.abc import Iterable, Sequence

from src.models.property import Property

logger = logging.getLogger("property_admin.filters")


def _number_text(value: int | float) -> str:
    """Render a number the way it reads in the table (``85.0`` -> ``85``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def field_matches(value: object, term: str) -> bool:
    """Check one field value against an already normalised search term.

    Strings and string lists match on a lowercase substring, numbers on
    their decimal text.  Any other type never matches.
    """
    if isinstance(value, str):
        return term in value.lower()
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return term in _number_text(value)
    if isinstance(value, (list, tuple)):
        return any(
            isinstance(item, str) and term in item.lower()
            for item in value
        )
    return False


class PropertyFilter:
    """Filter listings on a free-text query across a set of fields."""

    @staticmethod
    def filter_by_query(
        query: str,
        properties: Sequence[Property],
        fields: Iterable[str],
    ) -> Sequence[Property]:
        """Keep the listings where at least one field contains *query*.

        A blank query returns *properties* itself.  Surviving listings keep
        their input order.
        """
        if not query.strip():
            return properties

        term = query.strip().lower()
        field_names = tuple(fields)

        matched = [
            prop
            for prop in properties
            if any(
                field_matches(getattr(prop, name, None), term)
                for name in field_names
            )
        ]

        logger.debug(
            "Query '%s' matched %d of %d listings",
            term,
            len(matched),
            len(properties),
        )
        return matched
