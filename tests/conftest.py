"""Shared test fixtures."""

from __future__ import annotations

import pytest

from lambdaview.models import LogStreamRef, MergedLine, RawEvent
from lambdaview.sources import SourceUnavailable


class FakeLogSource:
    """In-memory LogSource that records every call."""

    def __init__(self) -> None:
        self.streams: dict[str, list[LogStreamRef]] = {}
        self.events: dict[LogStreamRef, list[RawEvent]] = {}
        self.failing: set[LogStreamRef] = set()
        self.unavailable = False
        self.calls: list[tuple[str, str]] = []

    def add_stream(self, entity: str, name: str, events: list[tuple[int, str]]) -> LogStreamRef:
        """Add a stream; streams must be added most recent first."""
        stream = LogStreamRef(group=f"/aws/lambda/{entity}", name=name)
        self.streams.setdefault(entity, []).append(stream)
        self.events[stream] = [RawEvent(timestamp=ts, message=msg) for ts, msg in events]
        return stream

    def list_streams(self, entity: str) -> list[LogStreamRef]:
        self.calls.append(("list_streams", entity))
        if self.unavailable:
            msg = "backend unreachable"
            raise SourceUnavailable(msg)
        return list(self.streams.get(entity, []))[:2]

    def fetch_events(self, stream: LogStreamRef) -> list[RawEvent]:
        self.calls.append(("fetch_events", stream.name))
        if stream in self.failing:
            msg = f"cannot fetch {stream.name}"
            raise SourceUnavailable(msg)
        return list(self.events.get(stream, []))


class FakeDirectory:
    """In-memory EntityDirectory."""

    def __init__(self) -> None:
        self.metadata: dict[str, dict[str, str]] = {}
        self.unavailable = False
        self.calls: list[str] = []

    def list_entities(self) -> list[str]:
        if self.unavailable:
            msg = "backend unreachable"
            raise SourceUnavailable(msg)
        return list(self.metadata)

    def get_metadata(self, entity: str) -> dict[str, str]:
        self.calls.append(entity)
        if self.unavailable:
            msg = "backend unreachable"
            raise SourceUnavailable(msg)
        return dict(self.metadata.get(entity, {}))


class RecordingView:
    """RefreshView that records what it was asked to render."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.metadata: dict[str, str] | None = None
        self.lines: list[MergedLine] = []

    def show_metadata(self, entity: str, metadata: dict[str, str]) -> None:
        self.calls.append("show_metadata")
        self.metadata = metadata

    def clear_logs(self) -> None:
        self.calls.append("clear_logs")
        self.lines = []

    def show_logs(self, lines: list[MergedLine]) -> None:
        self.calls.append("show_logs")
        self.lines.extend(lines)


@pytest.fixture
def log_source() -> FakeLogSource:
    return FakeLogSource()


@pytest.fixture
def directory() -> FakeDirectory:
    d = FakeDirectory()
    d.metadata["orderSvc"] = {"runtime": "python3.12", "timeout": "30", "Description": "orders"}
    return d


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()
