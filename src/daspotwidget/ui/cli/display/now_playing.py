"""src/daspotwidget/ui/cli/display/now_playing.py
What: Render now-playing snapshots, action outcomes and artwork results.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from daspotwidget.features.artwork import ArtworkResolution, LocatorKind
from daspotwidget.features.player import NowPlaying, SpawnResult


def format_seconds(total: int) -> str:
    """Format whole seconds as ``M:SS`` (or ``H:MM:SS`` past an hour)."""

    minutes, seconds = divmod(max(0, total), 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


@final
class NowPlayingDisplay:
    """Handles now-playing output in the CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize now-playing display."""
        self.console = Console()

    def show_now_playing(
        self,
        snapshot: NowPlaying,
        *,
        artwork: ArtworkResolution | None = None,
        player_active: bool | None = None,
        quiet: bool = False,
    ) -> None:
        """Display one snapshot as a two-column table.

        Args:
            snapshot: Values read from the player.
            artwork: Optional artwork resolution for the same refresh.
            player_active: Whether the target player is listed by playerctl.
            quiet: Whether to suppress output.
        """
        if quiet:
            return

        # Player and network text is escaped so brackets are shown, not parsed as markup.
        title = escape(snapshot.title) if snapshot.title else "Nothing playing"
        table = Table(title=title, show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Artist", escape(snapshot.artist) if snapshot.artist else "-")
        table.add_row("Album", escape(snapshot.album) if snapshot.album else "-")
        table.add_row("Status", snapshot.status.value)
        table.add_row(
            "Position",
            f"{format_seconds(snapshot.position_seconds)} / {format_seconds(snapshot.length_seconds)}",
        )
        table.add_row("Volume", f"{round(snapshot.volume * 100)}%")
        table.add_row("Shuffle", "on" if snapshot.shuffle else "off")
        if player_active is not None:
            table.add_row("Target player", "active" if player_active else "not running")
        if artwork is not None:
            table.add_row("Artwork", self._describe_artwork(artwork))

        self.console.print(table)

    def show_action(self, result: SpawnResult, *, quiet: bool = False) -> None:
        """Report a spawned action; the player's response is not checked."""

        if quiet:
            return
        self.console.print(f"Sent: playerctl {escape(' '.join(result.argv))}")

    def show_artwork(self, resolution: ArtworkResolution, *, quiet: bool = False) -> None:
        """Print the artwork path alone so the output can be piped."""

        if resolution.path is not None:
            self.console.print(str(resolution.path), markup=False, highlight=False, soft_wrap=True)
            return
        if not quiet:
            self.console.print(self._describe_artwork(resolution))

    def show_pruned(self, removed: list[Path], *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print(f"Removed cached artwork files: {len(removed)}")
        for path in removed:
            self.console.print(f"  • {escape(path.name)}")

    @staticmethod
    def _describe_artwork(resolution: ArtworkResolution) -> str:
        if resolution.path is not None:
            suffix = " (cached)" if resolution.from_cache else ""
            return f"{escape(str(resolution.path))}{suffix}"
        if resolution.failure is not None:
            failure = resolution.failure
            return f"unavailable ({failure.kind.value}: {escape(failure.detail)})"
        if resolution.locator.kind is LocatorKind.UNSUPPORTED:
            return f"unsupported locator {escape(resolution.locator.raw)}"
        return "none"


__all__ = ["NowPlayingDisplay", "format_seconds"]
