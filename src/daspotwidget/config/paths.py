"""Shared path utilities for configuration and cache locations.

This module centralizes how the widget discovers locations for its
config and log files.

Policy (user-scoped, XDG):
- Config: ``$XDG_CONFIG_HOME/daspotwidget/config.toml`` unless overridden by
  ``DASPOTWIDGET_CONFIG``.
- Logs: ``$XDG_CACHE_HOME/daspotwidget/logs/daspotwidget.log``.
- Artwork: configured ``download_location`` or the platform temp directory.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

APP_DIR_NAME: Final[str] = "daspotwidget"
_ENV_CONFIG_FILE: Final[str] = "DASPOTWIDGET_CONFIG"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _xdg_dir(env_var: str, fallback: str) -> Path:
    """Return an XDG base directory, ignoring empty or relative values."""

    raw = os.environ.get(env_var, "").strip()
    if raw and Path(raw).is_absolute():
        return Path(raw)
    return Path.home() / fallback


def default_config_dir() -> Path:
    """Get the user-scoped configuration directory."""

    return _xdg_dir("XDG_CONFIG_HOME", ".config") / APP_DIR_NAME


def default_config_path() -> Path:
    """Get the path to the TOML config file.

    ``DASPOTWIDGET_CONFIG`` takes precedence over the XDG location.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: default_config_dir() / "config.toml",
    )


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_xdg_dir("XDG_CACHE_HOME", ".cache") / APP_DIR_NAME / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "daspotwidget.log").resolve()


def default_download_dir() -> Path:
    """Directory used for artwork when no ``download_location`` is configured."""

    return Path(tempfile.gettempdir())


__all__ = [
    "APP_DIR_NAME",
    "default_config_dir",
    "default_config_path",
    "default_download_dir",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
