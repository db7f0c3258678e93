"""Function list filtering."""

from __future__ import annotations

from collections.abc import Iterable


def filter_entities(names: Iterable[str], pattern: str | None = None) -> list[str]:
    """Keep names containing ``pattern`` (case-sensitive), sorted ascending.

    An empty or missing pattern keeps every name.
    """
    if pattern:
        names = [name for name in names if pattern in name]
    return sorted(names)
