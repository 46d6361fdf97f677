"""Configuration management for daspotwidget."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from daspotwidget.config.paths import default_config_path, default_download_dir
from daspotwidget.config.settings import DEFAULT_PLAYERCTL_BINARY, DEFAULT_TARGET_PLAYER
from daspotwidget.platform.logging import logger


class ConfigError(ValueError):
    """Raised when a configuration value has an unusable type or range."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Directory receiving downloaded artwork (temp dir when unset)
    download_location: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # External utility and the player treated as "ours"
    playerctl_path: str = DEFAULT_PLAYERCTL_BINARY
    target_player: str = DEFAULT_TARGET_PLAYER

    # Artwork cache bound; 0 keeps every file
    artwork_cache_max_files: int = 0

    # Seconds before an artwork download gives up; None waits indefinitely
    fetch_timeout: float | None = None

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Normalize path fields and validate scalar settings.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                value = Path(value) if value.strip() else None
            if value is not None and not isinstance(value, Path):
                raise ConfigError(f"{f.name} must be a path string, got {value!r}")
            setattr(self, f.name, value.expanduser() if value is not None else None)

        for name in ("playerctl_path", "target_player"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{name} must be a non-empty string, got {value!r}")

        max_files = self.artwork_cache_max_files
        if isinstance(max_files, bool) or not isinstance(max_files, int) or max_files < 0:
            raise ConfigError(
                f"artwork_cache_max_files must be a non-negative integer, got {max_files!r}"
            )

        timeout = self.fetch_timeout
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                raise ConfigError(f"fetch_timeout must be a positive number, got {timeout!r}")
            self.fetch_timeout = float(timeout)

    @property
    def uses_temp_fallback(self) -> bool:
        """True when artwork lands in the shared platform temp directory."""
        return self.download_location is None

    @property
    def download_directory(self) -> Path:
        """Directory where remote artwork is cached."""
        if self.download_location is None:
            return default_download_dir()
        return self.download_location

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML, ignoring unknown keys.

        Args:
            data: Parsed TOML document.

        Returns:
            Config: Validated configuration.

        Raises:
            ConfigError: If a recognized value is invalid.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in data.items() if key in known})

    @staticmethod
    def _render_template() -> str:
        """Render a fully commented TOML template so defaults stay in effect."""

        lines: list[str] = [
            "# daspotwidget configuration file",
            "",
            "# Directory where downloaded album artwork is cached (optional)",
            "# Defaults to the system temporary directory",
            '# download_location = "~/.cache/daspotwidget/artwork"',
            "",
            "# Log file path (optional)",
            '# log_file = "~/.cache/daspotwidget/logs/daspotwidget.log"',
            "",
            "# Media-control utility and the player name treated as active",
            f'# playerctl_path = "{DEFAULT_PLAYERCTL_BINARY}"',
            f'# target_player = "{DEFAULT_TARGET_PLAYER}"',
            "",
            "# Keep at most this many cached artwork files (0 = keep everything)",
            "# Never applied while artwork is stored in the system temporary directory",
            "# artwork_cache_max_files = 200",
            "",
            "# Seconds to wait for an artwork download (unset = no timeout)",
            "# fetch_timeout = 10.0",
            "",
        ]
        return "\n".join(lines)

    @classmethod
    def _ensure_config_file(cls, config_file: Path) -> None:
        """Create the config directory and a commented template when missing."""

        config_file.parent.mkdir(parents=True, exist_ok=True)
        if config_file.exists():
            return
        _ = config_file.write_text(cls._render_template(), encoding="utf-8")
        logger.info("Created configuration template at %s", config_file)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration once per process.

        A missing, unreadable or invalid file yields the default configuration
        (artwork downloaded to the temp directory) after a warning.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            cls._ensure_config_file(config_file)
        except OSError as e:
            logger.warning("Could not prepare configuration at %s: %s", config_file, e)

        instance: Config
        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
            instance = cls.from_mapping(config_dict)
            logger.debug("Configuration loaded from %s", config_file)
        except FileNotFoundError:
            instance = cls()
        except (OSError, tomllib.TOMLDecodeError, ConfigError, TypeError) as e:
            logger.warning(
                "Failed to load configuration from %s, using defaults: %s", config_file, e
            )
            instance = cls()

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = ["Config", "ConfigError"]
