"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from daspotwidget.config.config import Config
from daspotwidget.config.settings import DEFAULT_REFRESH_INTERVAL_SECONDS
from daspotwidget.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from daspotwidget.ui.cli.args.options import (
    ArtworkArgs,
    CLIArgs,
    ControlArgs,
    PruneArtworkArgs,
    StatusArgs,
    WatchArgs,
)

_SIMPLE_ACTIONS: dict[str, str] = {
    "play-pause": "Toggle between playing and paused",
    "stop": "Stop playback",
    "next": "Skip to the next track",
    "previous": "Go back to the previous track",
}


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="daspotwidget - show and control the current track through playerctl.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        status_parser = subparsers.add_parser(
            "status",
            help="Show the current track, playback state and artwork path",
        )
        ArgumentParser._add_verbosity_flags(status_parser)

        for name, help_text in _SIMPLE_ACTIONS.items():
            action_parser = subparsers.add_parser(name, help=help_text)
            ArgumentParser._add_verbosity_flags(action_parser)

        seek_parser = subparsers.add_parser(
            "seek",
            help="Jump to a position inside the current track",
        )
        _ = seek_parser.add_argument(
            "seconds",
            type=int,
            help="Target position in whole seconds (must be inside the track)",
            metavar="SECONDS",
        )
        ArgumentParser._add_verbosity_flags(seek_parser)

        volume_parser = subparsers.add_parser(
            "volume",
            help="Set the player volume",
        )
        _ = volume_parser.add_argument(
            "level",
            type=float,
            help="Volume between 0.0 and 1.0",
            metavar="LEVEL",
        )
        ArgumentParser._add_verbosity_flags(volume_parser)

        shuffle_parser = subparsers.add_parser(
            "shuffle",
            help="Turn shuffle on or off",
        )
        _ = shuffle_parser.add_argument(
            "state",
            choices=("on", "off"),
            help="Desired shuffle state",
        )
        ArgumentParser._add_verbosity_flags(shuffle_parser)

        artwork_parser = subparsers.add_parser(
            "artwork",
            help="Resolve the current artwork to a local file and print its path",
        )
        ArgumentParser._add_verbosity_flags(artwork_parser)

        watch_parser = subparsers.add_parser(
            "watch",
            help="Refresh the now-playing view periodically",
        )
        _ = watch_parser.add_argument(
            "--interval",
            type=float,
            default=DEFAULT_REFRESH_INTERVAL_SECONDS,
            help="Seconds between refreshes (default: %(default)s)",
        )
        _ = watch_parser.add_argument(
            "--count",
            type=int,
            help="Stop after N refreshes instead of running until interrupted",
        )
        ArgumentParser._add_verbosity_flags(watch_parser)

        prune_parser = subparsers.add_parser(
            "prune-artwork",
            help="Delete the oldest cached artwork files",
        )
        _ = prune_parser.add_argument(
            "--max-files",
            type=int,
            help="Files to keep (defaults to artwork_cache_max_files from the config)",
        )
        ArgumentParser._add_verbosity_flags(prune_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If option validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "status":
            return StatusArgs(command="status", verbose=is_verbose, quiet=is_quiet)

        if command in _SIMPLE_ACTIONS or command in {"seek", "volume", "shuffle"}:
            return ArgumentParser._process_control(parsed_args, is_verbose, is_quiet)

        if command == "artwork":
            return ArtworkArgs(command="artwork", verbose=is_verbose, quiet=is_quiet)

        if command == "watch":
            return ArgumentParser._process_watch(parsed_args, is_verbose, is_quiet)

        if command == "prune-artwork":
            return ArgumentParser._process_prune(parsed_args, is_verbose, is_quiet)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        """Apply the shared ``--verbose`` / ``--quiet`` flags."""

        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug diagnostics, including every playerctl call",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _process_control(
        parsed_args: argparse.Namespace, verbose: bool, quiet: bool
    ) -> ControlArgs:
        command = parsed_args.command
        return ControlArgs(
            command=command,
            verbose=verbose,
            quiet=quiet,
            seconds=parsed_args.seconds if command == "seek" else None,
            level=parsed_args.level if command == "volume" else None,
            enabled=(parsed_args.state == "on") if command == "shuffle" else None,
        )

    @staticmethod
    def _process_watch(
        parsed_args: argparse.Namespace, verbose: bool, quiet: bool
    ) -> WatchArgs:
        if parsed_args.interval <= 0:
            logger.error("Refresh interval must be positive: %s", parsed_args.interval)
            sys.exit(2)
        if parsed_args.count is not None and parsed_args.count < 1:
            logger.error("Refresh count must be at least 1: %s", parsed_args.count)
            sys.exit(2)

        return WatchArgs(
            command="watch",
            verbose=verbose,
            quiet=quiet,
            interval=parsed_args.interval,
            count=parsed_args.count,
        )

    @staticmethod
    def _process_prune(
        parsed_args: argparse.Namespace, verbose: bool, quiet: bool
    ) -> PruneArtworkArgs:
        if parsed_args.max_files is not None and parsed_args.max_files < 1:
            logger.error("--max-files must be at least 1: %s", parsed_args.max_files)
            sys.exit(2)

        return PruneArtworkArgs(
            command="prune-artwork",
            verbose=verbose,
            quiet=quiet,
            max_files=parsed_args.max_files,
        )
