"""Where: src/daspotwidget/features/artwork/usecases/cache.py
What: Name-addressed on-disk artwork cache with optional count-bounded eviction.
Why: Avoid re-downloading artwork the widget has already shown.
"""

from __future__ import annotations

import logging
from pathlib import Path

from daspotwidget.config.config import Config
from daspotwidget.platform.logging import logger
from daspotwidget.shared.events import PlayerEvent, log_event


class ArtworkCache:
    """Files are keyed by name only; an existing name is never overwritten.

    ``max_files`` of 0 keeps everything. Eviction is disabled entirely when
    ``eviction_enabled`` is False, which is the case for the shared temp
    directory fallback.
    """

    directory: Path
    max_files: int
    eviction_enabled: bool

    def __init__(self, directory: Path, *, max_files: int = 0, eviction_enabled: bool = True) -> None:
        self.directory = directory
        self.max_files = max_files
        self.eviction_enabled = eviction_enabled

    @classmethod
    def from_config(cls, config: Config) -> "ArtworkCache":
        return cls(
            config.download_directory,
            max_files=config.artwork_cache_max_files,
            eviction_enabled=not config.uses_temp_fallback,
        )

    def destination(self, file_name: str) -> Path:
        return self.directory / file_name

    def cached_path(self, file_name: str) -> Path | None:
        """Return the cached file for ``file_name`` if one exists, whatever its content."""

        candidate = self.destination(file_name)
        return candidate if candidate.exists() else None

    def store(self, file_name: str, content: bytes) -> Path:
        """Write ``content`` under ``file_name`` unless that name is already taken.

        Returns:
            Path: The cached file.

        Raises:
            OSError: If the directory or the file cannot be written. A partially
                written file is removed first.
        """
        target = self.destination(file_name)
        self.directory.mkdir(parents=True, exist_ok=True)

        try:
            with open(target, "xb") as handle:
                _ = handle.write(content)
        except FileExistsError:
            logger.debug("Artwork %s appeared concurrently; keeping existing file", target)
            return target
        except OSError:
            target.unlink(missing_ok=True)
            raise

        log_event(
            logger,
            logging.INFO,
            PlayerEvent.ARTWORK_CACHE_STORE,
            "Stored artwork at %s (%d bytes)",
            target,
            len(content),
            path=target,
        )

        if self.max_files > 0:
            try:
                _ = self.prune(keep=target)
            except OSError as exc:
                logger.warning("Could not prune artwork cache %s: %s", self.directory, exc)
        return target

    def prune(self, max_files: int | None = None, *, keep: Path | None = None) -> list[Path]:
        """Delete the oldest files beyond ``max_files`` (defaults to ``self.max_files``).

        Args:
            max_files: Number of files to retain; 0 disables pruning.
            keep: A file that must survive regardless of its age.

        Returns:
            list[Path]: Files that were removed.
        """
        limit = self.max_files if max_files is None else max_files
        if limit <= 0 or not self.eviction_enabled:
            if limit > 0:
                logger.debug("Artwork eviction disabled for %s", self.directory)
            return []
        if not self.directory.is_dir():
            return []

        aged: list[tuple[float, Path]] = []
        for entry in self.directory.iterdir():
            try:
                if entry.is_file():
                    aged.append((entry.stat().st_mtime, entry))
            except OSError:
                # Vanished between listing and stat.
                continue
        aged.sort(key=lambda item: item[0], reverse=True)
        files = [entry for _, entry in aged]
        if keep is not None and keep in files:
            files.remove(keep)
            files.insert(0, keep)

        removed: list[Path] = []
        for stale in files[limit:]:
            try:
                stale.unlink()
            except OSError as exc:
                logger.warning("Could not evict cached artwork %s: %s", stale, exc)
                continue
            removed.append(stale)
            log_event(
                logger,
                logging.DEBUG,
                PlayerEvent.ARTWORK_CACHE_EVICT,
                "Evicted artwork %s",
                stale,
                path=stale,
            )
        return removed


__all__ = ["ArtworkCache"]
