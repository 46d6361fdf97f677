"""Display management for CLI interface."""

from daspotwidget.ui.cli.display.now_playing import NowPlayingDisplay, format_seconds

__all__ = ["NowPlayingDisplay", "format_seconds"]
