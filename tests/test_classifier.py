"""Tests for lifecycle line classification."""

from __future__ import annotations

from datetime import UTC

import pytest

from lambdaview.classifier import classify, format_timestamp
from lambdaview.models import Category


class TestClassify:
    @pytest.mark.parametrize(
        "message",
        [
            "START RequestId: 8f5c1e2a Version: $LATEST",
            "END RequestId: 8f5c1e2a",
            "REPORT RequestId: 8f5c1e2a\tDuration: 1.23 ms\tBilled Duration: 2 ms",
        ],
    )
    def test_boundary_markers(self, message: str) -> None:
        assert classify(message) == Category.BOUNDARY

    @pytest.mark.parametrize(
        "message",
        [
            "hello",
            "",
            "[INFO]\t2024-01-15T10:30:00Z\tprocessing order",
            "  START RequestId: indented",
            "start RequestId: lower case",
            "STARTED RequestId: 1",
            "Something START RequestId: 1",
        ],
    )
    def test_plain_lines(self, message: str) -> None:
        assert classify(message) == Category.PLAIN

    def test_deterministic(self) -> None:
        messages = ["START RequestId: 1", "hello", "END RequestId: 1", ""]
        assert [classify(m) for m in messages] == [classify(m) for m in messages]


class TestFormatTimestamp:
    def test_utc(self) -> None:
        assert format_timestamp(1705314600, UTC) == "2024-01-15 10:30:00"

    def test_epoch(self) -> None:
        assert format_timestamp(0, UTC) == "1970-01-01 00:00:00"
