# src/cli/runner.py

"""Headless listing runner: search, sort and page without the TUI."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.config.settings import Settings
from src.filters.property_filter import PropertyFilter
from src.models.property import Property
from src.models.view_state import PageView, SortDirection, SortKey, SortState
from src.services.listing_controller import ListingController
from src.storage.property_repository import DatasetError, PropertyRepository
from src.ui.formatting import format_area, format_date, format_price

logger = logging.getLogger("property_admin.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _view_to_dict(view: PageView) -> dict[str, object]:
    """Serialise a page of results plus pager metadata for JSON output."""
    return {
        "page": view.current_page,
        "total_pages": view.total_pages,
        "total_items": view.total_items,
        "visible_pages": view.visible_pages,
        "items": [p.to_dict() for p in view.items],
    }


def _print_table(view: PageView) -> None:
    """Render a Rich table of one listing page to stdout."""
    table = Table(
        title=f"Propiedades (página {view.current_page}/{view.total_pages})",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Oficina", style="magenta")
    table.add_column("Referencia", style="dim")
    table.add_column("Tipo")
    table.add_column("Dirección", max_width=40)
    table.add_column("Precio", justify="right", style="green")
    table.add_column("Hab.", justify="center")
    table.add_column("Superficie", justify="right")
    table.add_column("Fecha", justify="right")

    for p in view.items:
        table.add_row(
            p.office,
            p.id,
            p.type.capitalize(),
            p.location,
            format_price(p.price, p.currency),
            str(p.bedrooms) if p.bedrooms is not None else "—",
            format_area(p.area),
            format_date(p.date),
        )

    Console().print(table)


def _sort_state(sort: str | None, order: str) -> SortState:
    if sort is None:
        return SortState()
    return SortState(key=SortKey(sort), direction=SortDirection(order))


def cli_list(
    query: str,
    sort: str | None,
    order: str,
    page: int,
    output_format: str,
    data_path: str | None,
) -> int:
    """List one page of matching listings; returns an exit code.

    0 when the page has results, 1 for no results or a page outside the
    range, 2 when the dataset cannot be loaded.
    """
    repository = PropertyRepository(
        Path(data_path) if data_path is not None else None
    )
    try:
        properties: list[Property] = repository.load()
    except DatasetError as exc:
        logger.error("Dataset load failed: %s", exc, exc_info=True)
        _err.print(f"[red]{escape(str(exc))}[/red]")
        return 2

    matches = PropertyFilter.filter_by_query(
        query, properties, Settings.SEARCH_FIELDS
    )
    if query.strip():
        _err.print(
            f"[bold]Buscar:[/bold] {escape(query)}  "
            f"[dim]{len(matches)} de {len(properties)}[/dim]"
        )

    if not matches:
        _err.print("[yellow]No hay propiedades disponibles.[/yellow]")
        return 1

    listing = ListingController(matches)
    listing.sort_state = _sort_state(sort, order)
    if not listing.go_to_page(page):
        _err.print(
            f"[red]Página {page} fuera de rango "
            f"(1-{listing.total_pages})[/red]"
        )
        return 1

    view = listing.view()
    if output_format == "table":
        _print_table(view)
    else:
        json.dump(
            _view_to_dict(view),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0
