# src/ui/listing_table.py

"""Results table whose horizontal keys turn the page."""

from rich.text import Text
from textual.message import Message
from textual.widgets import DataTable


class ListingTable(DataTable[str | Text]):
    """Row-cursor table that posts page requests on left/right.

    With a row cursor there is no column to move to, so ``right`` and
    ``left`` ask the app for the next and previous page instead of
    scrolling horizontally.
    """

    class PageRequested(Message):
        """Posted when the user steps to an adjacent page."""

        def __init__(self, step: int) -> None:
            super().__init__()
            self.step = step

    def action_cursor_right(self) -> None:
        if self.cursor_type == "row":
            self.post_message(self.PageRequested(1))
        else:
            super().action_cursor_right()

    def action_cursor_left(self) -> None:
        if self.cursor_type == "row":
            self.post_message(self.PageRequested(-1))
        else:
            super().action_cursor_left()
