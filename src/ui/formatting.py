# src/ui/formatting.py

"""es-ES display helpers for prices, dates and surfaces."""

from src.config.settings import Settings
from src.filters.property_sorter import parse_listing_date


def _group_thousands(amount: int) -> str:
    # es-ES only groups from five integer digits upwards ("5000", "25.000")
    digits = str(abs(amount))
    if len(digits) > 4:
        digits = f"{int(digits):,}".replace(",", ".")
    return f"-{digits}" if amount < 0 else digits


def format_price(price: float, currency: str) -> str:
    """Whole-unit price with the currency symbol after it."""
    symbol = Settings.CURRENCY_SYMBOLS.get(currency, currency)
    return f"{_group_thousands(round(price))} {symbol}"


def format_date(value: str) -> str:
    """``DD-MM-YYYY`` as ``D/M/YYYY``; malformed dates pass through."""
    parsed = parse_listing_date(value)
    if parsed is None:
        return value
    return f"{parsed.day}/{parsed.month}/{parsed.year}"


def format_area(area: float) -> str:
    if float(area).is_integer():
        return f"{int(area)} m²"
    return f"{str(area).replace('.', ',')} m²"
