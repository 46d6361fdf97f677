"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

ControlCommandName = Literal[
    "play-pause", "stop", "next", "previous", "seek", "volume", "shuffle"
]


@final
@dataclass(slots=True)
class StatusArgs:
    """Command line arguments for the ``status`` subcommand."""

    command: Literal["status"]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ControlArgs:
    """Command line arguments for playback control subcommands.

    Only the field matching ``command`` is set: ``seconds`` for ``seek``,
    ``level`` for ``volume`` and ``enabled`` for ``shuffle``.
    """

    command: ControlCommandName
    verbose: bool
    quiet: bool
    seconds: int | None = None
    level: float | None = None
    enabled: bool | None = None


@final
@dataclass(slots=True)
class ArtworkArgs:
    """Command line arguments for the ``artwork`` subcommand."""

    command: Literal["artwork"]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class WatchArgs:
    """Command line arguments for the ``watch`` subcommand."""

    command: Literal["watch"]
    verbose: bool
    quiet: bool
    interval: float
    count: int | None


@final
@dataclass(slots=True)
class PruneArtworkArgs:
    """Command line arguments for the ``prune-artwork`` subcommand."""

    command: Literal["prune-artwork"]
    verbose: bool
    quiet: bool
    max_files: int | None


CLIArgs = StatusArgs | ControlArgs | ArtworkArgs | WatchArgs | PruneArtworkArgs

__all__ = [
    "ArtworkArgs",
    "CLIArgs",
    "ControlArgs",
    "ControlCommandName",
    "PruneArtworkArgs",
    "StatusArgs",
    "WatchArgs",
]
