"""Command line interface for daspotwidget."""

import sys
from typing import final

from daspotwidget.platform.logging import logger
from daspotwidget.ui.cli.args import ArgumentParser
from daspotwidget.ui.cli.args.options import (
    ArtworkArgs,
    CLIArgs,
    ControlArgs,
    PruneArtworkArgs,
    StatusArgs,
    WatchArgs,
)
from daspotwidget.ui.cli.commands import (
    ArtworkCommand,
    CommandExecutor,
    ControlCommand,
    PruneArtworkCommand,
    StatusCommand,
    WatchCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command = CommandProcessor._build_command(args)
            if not command.execute():
                sys.exit(1)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _build_command(args: CLIArgs) -> CommandExecutor:
        """Select the executor matching the parsed arguments."""

        if isinstance(args, StatusArgs):
            return StatusCommand(args)
        if isinstance(args, ControlArgs):
            return ControlCommand(args)
        if isinstance(args, ArtworkArgs):
            return ArtworkCommand(args)
        if isinstance(args, WatchArgs):
            return WatchCommand(args)
        assert isinstance(args, PruneArtworkArgs)
        return PruneArtworkCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failing commands call
        ``sys.exit(...)`` directly, so this return is only reached on success.
    """
    CommandProcessor.process_command()
    return 0
