"""Command execution package for CLI."""

from daspotwidget.ui.cli.commands.artwork import ArtworkCommand, PruneArtworkCommand
from daspotwidget.ui.cli.commands.control import ControlCommand
from daspotwidget.ui.cli.commands.executor import CommandExecutor
from daspotwidget.ui.cli.commands.status import StatusCommand, WatchCommand

__all__ = [
    "ArtworkCommand",
    "CommandExecutor",
    "ControlCommand",
    "PruneArtworkCommand",
    "StatusCommand",
    "WatchCommand",
]
