"""Textual application for lambdaview."""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer
from textual.worker import get_current_worker

from lambdaview.widgets.function_list import FunctionList
from lambdaview.widgets.help_screen import HelpScreen
from lambdaview.widgets.log_panel import LogPanel
from lambdaview.widgets.metadata_panel import MetadataPanel
from lambdaview.widgets.status_bar import StatusBar

if TYPE_CHECKING:
    from lambdaview.models import AppConfig, MergedLine, RefreshResult
    from lambdaview.selection import SelectionController
    from lambdaview.viewport import ViewportController

logger = logging.getLogger(__name__)


class LambdaViewApp(App[None]):
    """Dashboard of Lambda functions, their configuration and recent logs."""

    CSS_PATH = "styles/app.tcss"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("tab", "switch_focus", "Switch panel", priority=True),
        Binding("enter", "activate", "Load"),
        Binding("h", "show_help", "Help"),
    ]

    def __init__(
        self,
        functions: list[str],
        selection: SelectionController,
        log_viewport: ViewportController,
        config: AppConfig | None = None,
    ) -> None:
        super().__init__()
        self._functions = functions
        self._selection = selection
        self._log_viewport = log_viewport
        self._shown_entity: str | None = None
        if config is not None:
            self.theme = config.theme

    def compose(self) -> ComposeResult:
        with Horizontal(id="main"):
            yield FunctionList(self._functions, id="function-list")
            with Vertical(id="details"):
                yield LogPanel(self._log_viewport, id="log-panel")
                yield MetadataPanel(id="metadata")
        yield StatusBar(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#function-list", FunctionList).focus()
        if not self._functions:
            self.notify("No Lambda functions found", severity="warning")

    # --- Refresh cycle ---

    def action_activate(self) -> None:
        """Refresh the function under the list cursor."""
        entity = self.query_one("#function-list", FunctionList).current
        if entity is None:
            return
        self.query_one("#status-bar", StatusBar).set_loading(entity)
        self.run_worker(partial(self._collect, entity), thread=True, exclusive=True, group="refresh")

    def _collect(self, entity: str) -> None:
        """Worker body: fetch off the UI thread, hand the result back to it."""
        worker = get_current_worker()
        result = self._selection.collect(entity)
        if not worker.is_cancelled:
            self.call_from_thread(self._apply_refresh, result)

    def _apply_refresh(self, result: RefreshResult) -> None:
        self._selection.apply(result, self)
        if not result.ok:
            self.notify(f"{result.failed_stage}: {result.error}", title=result.entity, severity="error")
        self.query_one("#status-bar", StatusBar).set_entity(self._shown_entity)
        self._update_status_bar()

    # RefreshView

    def show_metadata(self, entity: str, metadata: dict[str, str]) -> None:
        self._shown_entity = entity
        self.query_one("#metadata", MetadataPanel).show(entity, metadata)

    def clear_logs(self) -> None:
        self.query_one("#log-panel", LogPanel).clear()

    def show_logs(self, lines: list[MergedLine]) -> None:
        self.query_one("#log-panel", LogPanel).add_lines(lines)

    # --- Status ---

    def on_log_panel_viewport_changed(self, _event: LogPanel.ViewportChanged) -> None:
        self._update_status_bar()

    def _update_status_bar(self) -> None:
        log_panel = self.query_one("#log-panel", LogPanel)
        status_bar = self.query_one("#status-bar", StatusBar)
        status_bar.update_counts(log_panel.line_count)
        status_bar.set_tailing(self._shown_entity is not None and self._log_viewport.autoscroll)

    # --- Navigation ---

    def action_switch_focus(self) -> None:
        log_panel = self.query_one("#log-panel", LogPanel)
        if log_panel.has_focus:
            self.query_one("#function-list", FunctionList).focus()
        else:
            log_panel.focus()

    def action_show_help(self) -> None:
        self.push_screen(HelpScreen())
