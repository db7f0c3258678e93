"""Configuration panel of the selected function."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static


def render_metadata(metadata: dict[str, str]) -> Text:
    """Render fields sorted by name, one ``<name> <value>`` row each."""
    text = Text()
    for title in sorted(metadata):
        text.append(title, style="green")
        text.append(f" {metadata[title]}\n")
    text.rstrip()
    return text


class MetadataPanel(Static):
    """Shows the configuration fields of one function."""

    DEFAULT_CSS = """
    MetadataPanel {
        height: 10;
        border: round $secondary;
        padding: 0 1;
    }
    """

    def show(self, entity: str, metadata: dict[str, str]) -> None:
        """Replace the panel content with ``entity``'s fields."""
        self.border_title = entity
        self.update(render_metadata(metadata))
