"""Artwork resolution and cache maintenance commands."""

from typing import final

from daspotwidget.features.artwork import ArtworkCache
from daspotwidget.platform.logging import logger
from daspotwidget.ui.cli.args.options import ArtworkArgs, PruneArtworkArgs
from daspotwidget.ui.cli.commands.executor import CommandExecutor


@final
class ArtworkCommand(CommandExecutor):
    """Print the local artwork path for the current track."""

    args: ArtworkArgs

    def execute(self) -> bool:
        resolution = self.build_resolver().resolve()
        self.display.show_artwork(resolution, quiet=self.args.quiet)
        return resolution.ok


@final
class PruneArtworkCommand(CommandExecutor):
    """Apply the cache bound on demand."""

    args: PruneArtworkArgs

    def execute(self) -> bool:
        cache = ArtworkCache.from_config(self.config)
        if not cache.eviction_enabled:
            logger.error(
                "Refusing to prune the shared temporary directory %s; set download_location first",
                cache.directory,
            )
            return False

        max_files = self.args.max_files or self.config.artwork_cache_max_files
        if max_files <= 0:
            logger.error("No file limit given; pass --max-files or set artwork_cache_max_files")
            return False

        removed = cache.prune(max_files)
        self.display.show_pruned(removed, quiet=self.args.quiet)
        return True
