"""Help screen showing all keyboard shortcuts."""

from __future__ import annotations

from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import BindingType
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

HELP_TEXT = """\
[bold]Functions panel[/bold]
  Up/Down       Move between functions
  Enter         Load configuration and logs of the function

[bold]Logs panel[/bold]
  Up/Down       Scroll one line
  PgUp/PgDn     Scroll five lines
  Enter         Reload logs of the function under the cursor

  Scrolling down past the last line resumes following new lines (TAIL).
  Logs of the two most recent streams are shown, older stream first.

[bold]General[/bold]
  Tab           Switch between functions and logs
  h             Show this help
  q, Ctrl+C     Quit
"""


class HelpScreen(ModalScreen[None]):
    """Modal help screen with keyboard shortcuts."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > VerticalScroll {
        width: 74;
        height: 80%;
        max-height: 24;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        ("escape", "dismiss_help", "Close"),
        ("h", "dismiss_help", "Close"),
    ]

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(HELP_TEXT, markup=True)

    def action_dismiss_help(self) -> None:
        self.dismiss(None)
