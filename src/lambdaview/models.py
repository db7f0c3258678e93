"""Pydantic models for lambdaview."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class Category(StrEnum):
    """Semantic category of a log line."""

    BOUNDARY = "boundary"
    PLAIN = "plain"


class LogStreamRef(BaseModel, frozen=True):
    """Handle to one CloudWatch log stream of a function."""

    group: str
    name: str


class RawEvent(BaseModel):
    """A log event as returned by the backend, timestamp in epoch seconds."""

    timestamp: int
    message: str


class MergedLine(BaseModel):
    """A normalized, classified log line ready for display."""

    timestamp: int
    text: str
    category: Category = Category.PLAIN


class ViewportState(BaseModel):
    """Scroll position of a bounded text buffer."""

    origin: int = Field(default=0, ge=0)
    cursor: int = Field(default=0, ge=0)
    autoscroll: bool = True


class Selection(BaseModel):
    """The function currently selected in the dashboard."""

    entity: str | None = None


class RefreshStage(StrEnum):
    """Stage of a refresh cycle that can fail."""

    METADATA = "metadata"
    LOGS = "logs"


class RefreshResult(BaseModel):
    """Outcome of one refresh cycle.

    ``metadata`` is set once the metadata fetch succeeded, ``lines`` once the
    log merge succeeded. On failure ``error`` and ``failed_stage`` say where the
    cycle stopped.
    """

    entity: str
    metadata: dict[str, str] | None = None
    lines: list[MergedLine] | None = None
    error: str | None = None
    failed_stage: RefreshStage | None = None

    @property
    def ok(self) -> bool:
        """Whether the whole cycle completed."""
        return self.error is None


class AppConfig(BaseModel):
    """Application configuration read from disk."""

    theme: str = "textual-dark"
    region: str | None = None
    endpoint_url: str | None = None
    fetch_timeout: float = Field(default=10.0, gt=0)
    log_level: str = "INFO"
