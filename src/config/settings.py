# src/config/settings.py

"""Central configuration for the property_admin screen."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the property_admin screen."""

    # --- Search ---
    SEARCH_DEBOUNCE_MS: int = 300       # Delay before a typed query applies
    SEARCH_FIELDS: tuple[str, ...] = (
        "title",
        "location",
        "type",
        "status",
        "office",
        "id",
    )

    # --- Listing ---
    PAGE_SIZE: int = 8                  # Rows per table page
    MAX_DETAIL_IMAGES: int = 6          # Image refs shown in the detail view

    # --- Locale ---
    LOCALE: str = "es-ES"
    CURRENCY_SYMBOLS: dict[str, str] = {
        "EUR": "€",
        "USD": "US$",
        "GBP": "GB£",
    }

    # --- Navigation ---
    MENU_ITEMS: list[dict[str, str]] = [
        {"id": "inicio", "label": "Inicio", "icon": "⌂"},
        {"id": "usuarios", "label": "Usuarios", "icon": "+"},
        {"id": "grupos", "label": "Grupos", "icon": "☷"},
        {"id": "favoritos", "label": "Favoritos", "icon": "♥"},
        {"id": "precios", "label": "Precios", "icon": "$"},
        {"id": "propiedades", "label": "Propiedades", "icon": "▦"},
        {"id": "calendario", "label": "Calendario", "icon": "▣"},
        {"id": "archivos", "label": "Archivos", "icon": "≡"},
        {"id": "mapa", "label": "Mapa", "icon": "◎"},
    ]
    FOOTER_ITEMS: list[dict[str, str]] = [
        {"id": "ajustes", "label": "Ajustes", "icon": "⚙"},
        {"id": "salir", "label": "Salir", "icon": "⏻"},
    ]
    DEFAULT_MENU_ITEM: str = "propiedades"

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_PATH: Path = Path(
        os.getenv(
            "PROPERTY_ADMIN_DATA",
            str(BASE_DIR / "src" / "data" / "properties.json"),
        )
    )
    LOGS_DIR: Path = BASE_DIR / "logs"
