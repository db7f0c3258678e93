"""XDG directory management and configuration for lambdaview."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_log_dir

from lambdaview.models import AppConfig


def get_config_dir() -> Path:
    """Get the lambdaview config directory.

    Respects LAMBDAVIEW_CONFIG_DIR environment variable if set.
    """
    if override := os.environ.get("LAMBDAVIEW_CONFIG_DIR"):
        return Path(override)
    return Path(user_config_dir("lambdaview"))


def get_log_file() -> Path:
    """Get the log file path, creating its directory if needed."""
    d = Path(user_log_dir("lambdaview"))
    d.mkdir(parents=True, exist_ok=True)
    return d / "lambdaview.log"


def load_config() -> AppConfig:
    """Load application config from disk, returning defaults if not found."""
    path = get_config_dir() / "config.toml"
    if not path.exists():
        return AppConfig()
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text())
        return AppConfig(**data)
    except (OSError, ValueError, TypeError, KeyError):
        return AppConfig()
