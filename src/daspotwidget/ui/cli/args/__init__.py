"""Command line argument parsing."""

from daspotwidget.ui.cli.args.options import (
    ArtworkArgs,
    CLIArgs,
    ControlArgs,
    PruneArtworkArgs,
    StatusArgs,
    WatchArgs,
)
from daspotwidget.ui.cli.args.parser import ArgumentParser

__all__ = [
    "ArgumentParser",
    "ArtworkArgs",
    "CLIArgs",
    "ControlArgs",
    "PruneArtworkArgs",
    "StatusArgs",
    "WatchArgs",
]
