"""Side panel listing the Lambda functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from rich.segment import Segment
from textual.binding import Binding, BindingType
from textual.strip import Strip
from textual.widget import Widget

from lambdaview.viewport import LINE_STEP, ViewportController

if TYPE_CHECKING:
    from textual import events


class FunctionList(Widget, can_focus=True):
    """Navigable list of function names with a highlighted cursor row."""

    DEFAULT_CSS = """
    FunctionList {
        width: 32;
        height: 1fr;
        background: $surface;
        border: round $secondary;
    }

    FunctionList:focus {
        border: round $accent;
    }

    FunctionList > .functionlist--cursor {
        background: green;
        color: black;
    }
    """

    COMPONENT_CLASSES: ClassVar[set[str]] = {"functionlist--cursor"}

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("up", "cursor_up", "Up", show=False),
        Binding("down", "cursor_down", "Down", show=False),
    ]

    def __init__(self, names: list[str] | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._names = list(names or [])
        self._viewport = ViewportController(follow=False)
        self._viewport.append(len(self._names))
        self.border_title = "functions"

    @property
    def current(self) -> str | None:
        """Name under the cursor, if any."""
        if not self._names:
            return None
        return self._names[self._viewport.cursor]

    def on_resize(self, event: events.Resize) -> None:
        self._viewport.resize(self.size.height)
        self.refresh()

    def render_line(self, y: int) -> Strip:
        width = self.size.width
        visible = self._viewport.visible_range()
        index = visible.start + y
        if width <= 0 or index not in visible:
            return Strip.blank(width, self.rich_style)
        if index == self._viewport.cursor:
            style = self.get_component_rich_style("functionlist--cursor")
            return Strip([Segment(self._names[index], style)]).crop(0, width).extend_cell_length(width, style)
        return Strip([Segment(self._names[index])]).crop(0, width).extend_cell_length(width).apply_style(self.rich_style)

    def action_cursor_up(self) -> None:
        self._viewport.cursor_move(-LINE_STEP)
        self.refresh()

    def action_cursor_down(self) -> None:
        self._viewport.cursor_move(LINE_STEP)
        self.refresh()
