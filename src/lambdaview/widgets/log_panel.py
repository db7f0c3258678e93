"""Log panel showing the merged lines of the selected function."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from rich.style import Style
from textual.binding import Binding, BindingType
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from lambdaview.viewport import LINE_STEP, PAGE_STEP, ViewportController
from lambdaview.widgets.log_line import render_segments

if TYPE_CHECKING:
    from textual import events

    from lambdaview.models import MergedLine


class LogPanel(Widget, can_focus=True):
    """Line API view over a buffer of merged lines, positioned by a ViewportController."""

    DEFAULT_CSS = """
    LogPanel {
        height: 1fr;
        background: $surface;
        border: round $secondary;
    }

    LogPanel:focus {
        border: round $accent;
    }

    LogPanel > .logpanel--cursor {
        background: #264f78;
        color: #ffffff;
    }
    """

    COMPONENT_CLASSES: ClassVar[set[str]] = {"logpanel--cursor"}

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("up", "scroll_lines(-1)", "Up", show=False),
        Binding("down", "scroll_lines(1)", "Down", show=False),
        Binding("pageup", "scroll_page(-1)", "Page Up"),
        Binding("pagedown", "scroll_page(1)", "Page Down"),
    ]

    class ViewportChanged(Message):
        """Posted after the user scrolls the panel."""

    def __init__(self, viewport: ViewportController | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._viewport = viewport or ViewportController()
        self._lines: list[MergedLine] = []
        self.border_title = "logs"

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def clear(self) -> None:
        """Drop all lines."""
        self._lines = []
        self.refresh()

    def add_lines(self, lines: list[MergedLine]) -> None:
        """Append lines to the buffer."""
        self._lines.extend(lines)
        self.refresh()

    def on_resize(self, event: events.Resize) -> None:
        self._viewport.resize(self.size.height)
        self.refresh()

    def render_line(self, y: int) -> Strip:
        width = self.size.width
        visible = self._viewport.visible_range()
        index = visible.start + y
        if width <= 0 or index not in visible or index >= len(self._lines):
            return Strip.blank(width, self.rich_style)

        is_cursor = self.has_focus and not self._viewport.autoscroll and index == self._viewport.cursor
        bg_style = self.get_component_rich_style("logpanel--cursor") if is_cursor else Style()
        strip = Strip(render_segments(self._lines[index], bg_style)).crop(0, width)
        if is_cursor:
            return strip.extend_cell_length(width, Style(bgcolor=bg_style.bgcolor))
        return strip.extend_cell_length(width).apply_style(self.rich_style)

    # --- Actions ---

    def action_scroll_lines(self, direction: int) -> None:
        self._scroll(direction * LINE_STEP)

    def action_scroll_page(self, direction: int) -> None:
        self._scroll(direction * PAGE_STEP)

    def _scroll(self, delta: int) -> None:
        self._viewport.scroll_by(delta)
        self.refresh()
        self.post_message(self.ViewportChanged())
