"""Bottom status bar."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget


class StatusBar(Widget):
    """Bottom status bar showing the selected function and log line count."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        dock: bottom;
        background: #264f78;
        color: #ffffff;
        padding: 0 1;
    }
    """

    def __init__(self, id: str | None = None) -> None:  # noqa: A002
        super().__init__(id=id)
        self._total: int = 0
        self._entity: str | None = None
        self._loading: str | None = None
        self._tailing: bool = False

    def update_counts(self, total: int) -> None:
        """Update the log line count."""
        self._total = total
        self.refresh()

    def set_tailing(self, tailing: bool) -> None:  # noqa: FBT001
        """Set autoscroll mode indicator."""
        self._tailing = tailing
        self.refresh()

    def set_entity(self, entity: str | None) -> None:
        """Set the selected function and clear the loading indicator."""
        self._entity = entity
        self._loading = None
        self.refresh()

    def set_loading(self, entity: str) -> None:
        """Show that a refresh of ``entity`` is in flight."""
        self._loading = entity
        self.refresh()

    def render(self) -> Text:
        text = Text()

        if self._tailing:
            text.append(" TAIL ", style="bold reverse")
            text.append(" ")

        text.append(f"{self._total} lines")

        if self._loading is not None:
            right_part = f"loading {self._loading}..."
        else:
            right_part = self._entity or ""
        if right_part:
            used = len(text.plain)
            padding = max(1, self.size.width - used - len(right_part))
            text.append(" " * padding)
            text.append(right_part)

        return text
