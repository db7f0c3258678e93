"""Merge the recent log streams of a function into one sequence of lines."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lambdaview.classifier import classify
from lambdaview.models import MergedLine

if TYPE_CHECKING:
    from lambdaview.models import RawEvent
    from lambdaview.sources import LogSource

logger = logging.getLogger(__name__)


def to_merged_line(event: RawEvent) -> MergedLine:
    """Normalize a raw event into a classified line."""
    return MergedLine(timestamp=event.timestamp, text=event.message, category=classify(event.message))


class LogMerger:
    """Concatenates the events of a function's most recent log streams.

    Streams arrive most recent first. Each stream's events are placed before
    everything gathered so far, so older streams come first and each stream
    keeps its backend order. There is no cross-stream sort: timestamps may
    step backwards at a stream boundary.
    """

    def __init__(self, source: LogSource) -> None:
        self._source = source

    def merge(self, entity: str) -> list[MergedLine]:
        """Return the merged lines of ``entity``.

        Raises SourceUnavailable if any backend call fails; nothing gathered
        before the failure is returned.
        """
        streams = self._source.list_streams(entity)
        events: list[RawEvent] = []
        for stream in streams:
            events = self._source.fetch_events(stream) + events
        logger.debug("Merged %d events from %d streams of %s", len(events), len(streams), entity)
        return [to_merged_line(event) for event in events]
