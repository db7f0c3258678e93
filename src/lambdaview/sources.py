"""Backend interfaces consumed by the log engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lambdaview.models import LogStreamRef, RawEvent

MAX_STREAMS = 2


class SourceUnavailable(Exception):  # noqa: N818
    """A backend call failed (network, auth or service error)."""


class LogSource(Protocol):
    """Fetches log streams and their raw events for a function."""

    def list_streams(self, entity: str) -> list[LogStreamRef]:
        """Return at most ``MAX_STREAMS`` streams, most recently active first.

        Returns an empty list if the function never produced logs.
        """
        ...

    def fetch_events(self, stream: LogStreamRef) -> list[RawEvent]:
        """Return the events of one stream in backend order."""
        ...


class EntityDirectory(Protocol):
    """Lists functions and describes their configuration."""

    def list_entities(self) -> list[str]: ...

    def get_metadata(self, entity: str) -> dict[str, str]: ...
