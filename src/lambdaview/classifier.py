"""Lifecycle classification of Lambda log lines."""

from __future__ import annotations

from datetime import datetime, tzinfo

from lambdaview.models import Category

BOUNDARY_MARKERS: tuple[str, ...] = (
    "START RequestId:",
    "END RequestId:",
    "REPORT RequestId:",
)


def classify(message: str) -> Category:
    """Return BOUNDARY for invocation start/end/report lines, PLAIN otherwise."""
    if message.startswith(BOUNDARY_MARKERS):
        return Category.BOUNDARY
    return Category.PLAIN


def format_timestamp(timestamp: int, tz: tzinfo | None = None) -> str:
    """Render epoch seconds as ``YYYY-MM-DD HH:MM:SS`` (local time unless tz is given)."""
    return datetime.fromtimestamp(timestamp, tz=tz).strftime("%Y-%m-%d %H:%M:%S")
