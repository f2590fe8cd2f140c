# src/ui/app.py

"""Terminal admin screen for browsing property listings."""

import logging
from collections.abc import Sequence
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Static,
)

from src.config.settings import Settings
from src.models.property import Property
from src.models.view_state import PageView, SortDirection, SortKey
from src.services.listing_controller import ListingController
from src.services.property_search import PropertySearch
from src.storage.property_repository import DatasetError, PropertyRepository
from src.ui.detail_modal import PropertyDetailScreen
from src.ui.formatting import format_area, format_date, format_price
from src.ui.listing_table import ListingTable
from src.ui.sidebar import Sidebar

logger = logging.getLogger("property_admin.ui")

_COLUMNS = (
    "Oficina",
    "Referencia",
    "Tipo",
    "Dirección",
    "Precio",
    "Habitaciones",
    "Superficie",
    "Fecha",
)

_SORT_LABELS = {SortKey.PRICE: "precio", SortKey.DATE: "fecha"}


class PropertyAdminApp(App[object]):
    """Sidebar shell with a searchable, sortable, paged listing table."""

    CSS_PATH = "styles.tcss"
    TITLE = "Propiedades"
    AUTO_FOCUS = "#results_table"

    BINDINGS = [
        Binding("q", "quit", "Salir"),
        Binding("p", "sort_price", "Orden precio"),
        Binding("d", "sort_date", "Orden fecha"),
        Binding("right,n", "next_page", "Siguiente"),
        Binding("left,b", "previous_page", "Anterior"),
        Binding("slash", "focus_search", "Buscar"),
        Binding("escape", "clear_search", "Limpiar", show=False),
        Binding("ctrl+b", "toggle_sidebar", "Menú"),
    ]

    def __init__(
        self,
        properties: Sequence[Property] | None = None,
        repository: PropertyRepository | None = None,
        debounce_ms: int | None = None,
    ) -> None:
        super().__init__()
        self.repository = repository or PropertyRepository()
        self._initial_properties = properties
        self.listing = ListingController(on_select=self.show_details)
        self.search = PropertySearch(
            [],
            debounce_ms=debounce_ms,
            on_results=self._on_search_results,
        )

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        yield Header()
        yield Horizontal(
            Sidebar(id="sidebar"),
            Container(
                Horizontal(
                    Static("Propiedades", id="title"),
                    Button(
                        "+ Añadir nueva propiedad",
                        variant="default",
                        id="add_btn",
                    ),
                    id="title_bar",
                ),
                Horizontal(
                    Input(placeholder="Buscar", id="search_input"),
                    id="search_bar",
                ),
                Static("", id="status"),
                ListingTable(
                    id="results_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
                Static(
                    "No hay propiedades disponibles\n"
                    "Intenta ajustar los filtros de búsqueda",
                    id="empty_state",
                ),
                Static("", id="pager"),
                id="main_container",
            ),
            id="shell",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure the table and load the dataset."""
        self._table().add_columns(*_COLUMNS)

        if self._initial_properties is not None:
            properties = self._initial_properties
        else:
            try:
                properties = self.repository.load()
            except DatasetError as e:
                logger.error("Dataset load failed: %s", e, exc_info=True)
                self.notify(str(e), severity="error")
                properties = []

        self.search.set_properties(properties)

    # ── Rendering ────────────────────────────────────────

    def _table(self) -> ListingTable:
        return self.query_one("#results_table", ListingTable)

    def _on_search_results(self, results: Sequence[Property]) -> None:
        self.listing.set_properties(results)
        self.refresh_listing()

    def refresh_listing(self) -> None:
        """Redraw the table, pager and status line from current state."""
        view = self.listing.view()
        table = self._table()
        table.clear()
        for prop in view.items:
            table.add_row(
                prop.office,
                prop.id,
                prop.type.capitalize(),
                prop.location,
                Text(format_price(prop.price, prop.currency), justify="right"),
                str(prop.bedrooms) if prop.bedrooms is not None else "",
                format_area(prop.area),
                format_date(prop.date),
                key=prop.id,
            )

        table.display = not view.is_empty
        self.query_one("#empty_state", Static).display = view.is_empty
        self.query_one("#pager", Static).update(self._pager_text(view))
        self._update_status()

    def _pager_text(self, view: PageView) -> Text:
        if view.total_pages <= 1:
            return Text()

        text = Text(justify="center")
        text.append("‹ ", style="dim" if not view.has_previous else "")
        for page in view.visible_pages:
            if page is None:
                text.append(" … ")
            elif page == view.current_page:
                text.append(f" {page} ", style="bold reverse")
            else:
                text.append(f" {page} ")
        text.append(" ›", style="dim" if not view.has_next else "")
        return text

    def _update_status(self) -> None:
        status = self.query_one("#status", Static)
        if self.search.is_searching:
            status.update(f"Buscando '{self.search.search_term.strip()}'...")
            return

        parts = [f"{self.search.total_results} propiedades"]
        if self.search.applied_term:
            parts.append(f"para '{self.search.applied_term}'")
        sort_state = self.listing.sort_state
        if sort_state.key is not None:
            arrow = "↓" if sort_state.direction is SortDirection.DESC else "↑"
            parts.append(f"· orden: {_SORT_LABELS[sort_state.key]} {arrow}")
        status.update(Text(" ".join(parts)))

    # ── Events ───────────────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        """Debounce keystrokes in the search box."""
        if event.input.id == "search_input":
            self.search.handle_search_change(event.value)
            self._update_status()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Apply the query at once on Enter."""
        if event.input.id == "search_input":
            self.search.handle_search(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add_btn":
            logger.info("Add property requested (not available)")
            self.notify("Añadir nueva propiedad: no disponible")

    def on_sidebar_item_selected(self, event: Sidebar.ItemSelected) -> None:
        if event.item_id == "salir":
            self.exit()
        elif event.item_id != Settings.DEFAULT_MENU_ITEM:
            self.notify(f"Sección '{event.item_id}' no disponible")

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Open the detail view for the clicked row."""
        self.listing.select(event.cursor_row)

    def on_listing_table_page_requested(
        self, event: ListingTable.PageRequested
    ) -> None:
        if event.step > 0:
            self.action_next_page()
        else:
            self.action_previous_page()

    def show_details(self, prop: Property) -> None:
        self.push_screen(PropertyDetailScreen(prop))

    # ── Actions ──────────────────────────────────────────

    def action_sort_price(self) -> None:
        """Cycle price ordering: descending, ascending, off."""
        self.listing.toggle_sort(SortKey.PRICE)
        self.refresh_listing()

    def action_sort_date(self) -> None:
        """Cycle publication-date ordering: descending, ascending, off."""
        self.listing.toggle_sort(SortKey.DATE)
        self.refresh_listing()

    def action_next_page(self) -> None:
        if self.listing.next_page():
            self.refresh_listing()

    def action_previous_page(self) -> None:
        if self.listing.previous_page():
            self.refresh_listing()

    def action_focus_search(self) -> None:
        self.query_one("#search_input", Input).focus()

    def action_clear_search(self) -> None:
        search_input = self.query_one("#search_input", Input)
        search_input.value = ""
        self.search.clear_search()

    def action_toggle_sidebar(self) -> None:
        self.query_one("#sidebar", Sidebar).toggle_expanded()
