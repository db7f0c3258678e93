"""Selection of a function and the refresh cycle it triggers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from lambdaview.models import RefreshResult, RefreshStage, Selection
from lambdaview.sources import SourceUnavailable

if TYPE_CHECKING:
    from lambdaview.merger import LogMerger
    from lambdaview.models import MergedLine
    from lambdaview.sources import EntityDirectory
    from lambdaview.viewport import ViewportController

logger = logging.getLogger(__name__)


class RefreshView(Protocol):
    """Panels updated by a refresh cycle."""

    def show_metadata(self, entity: str, metadata: dict[str, str]) -> None: ...

    def clear_logs(self) -> None: ...

    def show_logs(self, lines: list[MergedLine]) -> None: ...


class SelectionController:
    """Owns the selected function and runs its refresh cycle.

    A cycle is split in two so the backend calls can run off the UI thread:
    ``collect`` only talks to the backends, ``apply`` mutates state and
    renders. ``activate`` runs both in sequence.
    """

    def __init__(self, directory: EntityDirectory, merger: LogMerger, viewport: ViewportController) -> None:
        self._directory = directory
        self._merger = merger
        self._viewport = viewport
        self.selection = Selection()

    @property
    def selected(self) -> str | None:
        return self.selection.entity

    def collect(self, entity: str) -> RefreshResult:
        """Fetch metadata then merged logs, stopping at the first failure."""
        try:
            metadata = self._directory.get_metadata(entity)
        except SourceUnavailable as e:
            return RefreshResult(entity=entity, error=str(e), failed_stage=RefreshStage.METADATA)
        try:
            lines = self._merger.merge(entity)
        except SourceUnavailable as e:
            return RefreshResult(entity=entity, metadata=metadata, error=str(e), failed_stage=RefreshStage.LOGS)
        return RefreshResult(entity=entity, metadata=metadata, lines=lines)

    def apply(self, result: RefreshResult, view: RefreshView) -> RefreshResult:
        """Select ``result.entity`` and render whatever the cycle produced."""
        self.selection = Selection(entity=result.entity)
        if result.metadata is None:
            logger.warning("Refresh of %s failed: %s", result.entity, result.error)
            return result
        view.show_metadata(result.entity, result.metadata)

        self._viewport.reset()
        view.clear_logs()
        if result.lines is None:
            logger.warning("Refresh of %s failed: %s", result.entity, result.error)
            return result
        self._viewport.append(len(result.lines))
        view.show_logs(result.lines)
        logger.info("Refreshed %s: %d log lines", result.entity, len(result.lines))
        return result

    def activate(self, entity: str, view: RefreshView) -> RefreshResult:
        """Run a full refresh cycle for ``entity``."""
        return self.apply(self.collect(entity), view)
