"""Style mapping and rendering of a single merged log line."""

from __future__ import annotations

from datetime import tzinfo

from rich.segment import Segment
from rich.style import Style

from lambdaview.classifier import format_timestamp
from lambdaview.models import Category, MergedLine

TIMESTAMP_STYLE = Style(color="green")
SEPARATOR = " - "

_CATEGORY_STYLES: dict[Category, Style] = {
    Category.BOUNDARY: Style(color="green", reverse=True),
    Category.PLAIN: Style(),
}


def category_style(category: Category) -> Style:
    """Return the content style of a line category."""
    return _CATEGORY_STYLES[category]


def display_text(text: str) -> str:
    """Flatten a message onto one row: tabs expanded, line breaks as spaces."""
    return " ".join(text.expandtabs(4).splitlines())


def render_segments(line: MergedLine, bg_style: Style | None = None, tz: tzinfo | None = None) -> list[Segment]:
    """Render a line as ``<timestamp> - <message>`` segments."""
    bg = bg_style or Style()
    return [
        Segment(format_timestamp(line.timestamp, tz), TIMESTAMP_STYLE + bg),
        Segment(SEPARATOR, bg),
        Segment(display_text(line.text), category_style(line.category) + bg),
    ]
