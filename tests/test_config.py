"""Tests for configuration loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lambdaview.config import get_config_dir, load_config

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


class TestConfig:
    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LAMBDAVIEW_CONFIG_DIR", str(tmp_path))
        assert get_config_dir() == tmp_path

    def test_defaults_when_missing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LAMBDAVIEW_CONFIG_DIR", str(tmp_path))
        config = load_config()
        assert config.theme == "textual-dark"
        assert config.region is None
        assert config.fetch_timeout == 10.0

    def test_load_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LAMBDAVIEW_CONFIG_DIR", str(tmp_path))
        (tmp_path / "config.toml").write_text(
            'theme = "nord"\nregion = "eu-west-1"\nendpoint_url = "http://localhost:4566"\nfetch_timeout = 2.5\n'
        )
        config = load_config()
        assert config.theme == "nord"
        assert config.region == "eu-west-1"
        assert config.endpoint_url == "http://localhost:4566"
        assert config.fetch_timeout == 2.5

    def test_invalid_toml_falls_back(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LAMBDAVIEW_CONFIG_DIR", str(tmp_path))
        (tmp_path / "config.toml").write_text("theme = [unclosed")
        assert load_config().theme == "textual-dark"

    def test_invalid_value_falls_back(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LAMBDAVIEW_CONFIG_DIR", str(tmp_path))
        (tmp_path / "config.toml").write_text("fetch_timeout = -1\n")
        assert load_config().fetch_timeout == 10.0
