"""Tests for pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lambdaview.models import AppConfig, Category, LogStreamRef, MergedLine, RefreshResult, RefreshStage


class TestMergedLine:
    def test_default_category(self) -> None:
        assert MergedLine(timestamp=1, text="x").category == Category.PLAIN


class TestLogStreamRef:
    def test_hashable(self) -> None:
        a = LogStreamRef(group="g", name="s")
        assert {a: 1}[LogStreamRef(group="g", name="s")] == 1


class TestRefreshResult:
    def test_ok(self) -> None:
        assert RefreshResult(entity="svc", metadata={}, lines=[]).ok

    def test_failure(self) -> None:
        result = RefreshResult(entity="svc", error="boom", failed_stage=RefreshStage.METADATA)
        assert not result.ok
        assert result.metadata is None


class TestAppConfig:
    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(fetch_timeout=0)

    def test_str_enums(self) -> None:
        assert str(Category.BOUNDARY) == "boundary"
        assert str(RefreshStage.LOGS) == "logs"
