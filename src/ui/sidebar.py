# src/ui/sidebar.py

"""Collapsible navigation sidebar for the admin shell."""

import logging

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button

from src.config.settings import Settings

logger = logging.getLogger("property_admin.ui")


class Sidebar(Vertical):
    """Icon rail that expands to show labels; tracks the selected entry."""

    expanded: reactive[bool] = reactive(False)
    selected_item: reactive[str] = reactive(Settings.DEFAULT_MENU_ITEM)

    class ItemSelected(Message):
        """Posted when a menu or footer entry is pressed."""

        def __init__(self, item_id: str) -> None:
            super().__init__()
            self.item_id = item_id

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._items = {
            item["id"]: item
            for item in Settings.MENU_ITEMS + Settings.FOOTER_ITEMS
        }

    def compose(self) -> ComposeResult:
        yield Button("→", id="sidebar_toggle", classes="sidebar-toggle")
        with Vertical(id="sidebar_menu"):
            for item in Settings.MENU_ITEMS:
                yield Button(
                    self._label(item),
                    id=f"menu_{item['id']}",
                    classes="menu-item",
                )
        with Vertical(id="sidebar_footer"):
            for item in Settings.FOOTER_ITEMS:
                yield Button(
                    self._label(item),
                    id=f"menu_{item['id']}",
                    classes="menu-item",
                )

    def on_mount(self) -> None:
        self._refresh_selection()

    def _label(self, item: dict[str, str]) -> str:
        if self.expanded:
            return f"{item['icon']}  {item['label']}"
        return item["icon"]

    def toggle_expanded(self) -> None:
        self.expanded = not self.expanded

    def watch_expanded(self, expanded: bool) -> None:
        self.set_class(expanded, "-expanded")
        if not self.is_mounted:
            return
        self.query_one("#sidebar_toggle", Button).label = (
            "←" if expanded else "→"
        )
        for item_id, item in self._items.items():
            self.query_one(f"#menu_{item_id}", Button).label = (
                self._label(item)
            )

    def watch_selected_item(self, _item_id: str) -> None:
        if self.is_mounted:
            self._refresh_selection()

    def _refresh_selection(self) -> None:
        for item in Settings.MENU_ITEMS:
            self.query_one(f"#menu_{item['id']}", Button).set_class(
                item["id"] == self.selected_item, "-selected"
            )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route clicks on the toggle and menu entries."""
        event.stop()
        button_id = event.button.id or ""
        if button_id == "sidebar_toggle":
            self.toggle_expanded()
            return

        item_id = button_id.removeprefix("menu_")
        if item_id not in self._items:
            return
        if any(item["id"] == item_id for item in Settings.MENU_ITEMS):
            self.selected_item = item_id
        logger.debug("Sidebar item pressed: %s", item_id)
        self.post_message(self.ItemSelected(item_id))
