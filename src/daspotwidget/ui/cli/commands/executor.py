"""src/daspotwidget/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Build the facade and display once from the loaded configuration.
"""

from abc import ABC, abstractmethod

from daspotwidget.config.config import Config
from daspotwidget.features.artwork import ArtworkResolver
from daspotwidget.features.player import PlayerFacade
from daspotwidget.platform.playerctl import SubprocessRunner
from daspotwidget.ui.cli.args.options import CLIArgs
from daspotwidget.ui.cli.display.now_playing import NowPlayingDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    config: Config
    facade: PlayerFacade
    display: NowPlayingDisplay

    def __init__(self, args: CLIArgs, facade: PlayerFacade | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            facade: Player facade; built from the configuration when omitted.
        """
        self.args = args
        self.config = Config.load()
        self.facade = (
            facade
            if facade is not None
            else PlayerFacade(
                SubprocessRunner(self.config.playerctl_path),
                target_player=self.config.target_player,
            )
        )
        self.display = NowPlayingDisplay()

    def build_resolver(self) -> ArtworkResolver:
        return ArtworkResolver.from_config(self.facade, self.config)

    @abstractmethod
    def execute(self) -> bool:
        """Execute the command.

        Returns:
            bool: True when the command succeeded.
        """
        pass
