# src/ui/detail_modal.py

"""Modal screen with the full details of one listing."""

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from src.config.settings import Settings
from src.models.property import Property
from src.ui.formatting import format_area, format_date, format_price


def _characteristics(prop: Property) -> list[tuple[str, str]]:
    rows = [("Superficie", format_area(prop.area))]
    if prop.bedrooms:
        rows.append(("Habitaciones", str(prop.bedrooms)))
    if prop.bathrooms:
        rows.append(("Baños", str(prop.bathrooms)))
    rows += [
        ("Tipo de propiedad", prop.type.capitalize()),
        ("Estado / Conservación", prop.status.capitalize()),
        ("Oficina", prop.office),
        ("Fecha de publicación", format_date(prop.date)),
    ]
    return rows


class PropertyDetailScreen(ModalScreen[None]):
    """Read-only detail view opened from a table row."""

    BINDINGS = [
        Binding("escape", "close", "Cerrar"),
    ]

    def __init__(self, prop: Property) -> None:
        super().__init__()
        self.prop = prop

    def compose(self) -> ComposeResult:
        prop = self.prop
        with Vertical(id="detail_dialog"):
            with Horizontal(id="detail_header"):
                yield Static(Text(prop.title, style="bold"), id="detail_title")
                yield Button("✕", id="detail_close")
            with VerticalScroll(id="detail_body"):
                yield Static(
                    Text(format_price(prop.price, prop.currency), style="bold"),
                    id="detail_price",
                )
                yield Static(Text(prop.location), id="detail_location")

                yield Static("Características", classes="detail-section")
                characteristics = Text()
                for label, value in _characteristics(prop):
                    characteristics.append(f"{label}: ", style="dim")
                    characteristics.append(f"{value}\n", style="bold")
                yield Static(characteristics, id="detail_characteristics")

                if prop.features:
                    yield Static("Detalles", classes="detail-section")
                    yield Static(
                        Text(" · ".join(f.capitalize() for f in prop.features)),
                        id="detail_features",
                    )

                if prop.images:
                    yield Static("Imágenes", classes="detail-section")
                    yield Static(self._images_text(), id="detail_images")

                if prop.description:
                    yield Static("Descripción", classes="detail-section")
                    yield Static(
                        Text(prop.description), id="detail_description"
                    )

    def _images_text(self) -> Text:
        limit = Settings.MAX_DETAIL_IMAGES
        images = self.prop.images
        text = Text()
        for index, image in enumerate(images[:limit], 1):
            text.append(f"{index}. {image}\n")
        if len(images) > limit:
            text.append(f"+{len(images) - limit} más imágenes", style="dim")
        return text

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "detail_close":
            event.stop()
            self.dismiss()

    def action_close(self) -> None:
        self.dismiss()
