"""Playback control commands (play/pause, seek, volume, shuffle, ...)."""

from typing import final

from daspotwidget.features.player import SpawnResult
from daspotwidget.ui.cli.args.options import ControlArgs
from daspotwidget.ui.cli.commands.executor import CommandExecutor


@final
class ControlCommand(CommandExecutor):
    """Forward one control intent to the facade."""

    args: ControlArgs

    def execute(self) -> bool:
        """Spawn the requested action.

        Returns:
            bool: False when a bounds check skipped the action or it could not
            be spawned.
        """
        result = self._dispatch()
        if result is None or not result.spawned:
            return False
        self.display.show_action(result, quiet=self.args.quiet)
        return True

    def _dispatch(self) -> SpawnResult | None:
        args = self.args
        match args.command:
            case "play-pause":
                return self.facade.play_pause()
            case "stop":
                return self.facade.stop()
            case "next":
                return self.facade.next()
            case "previous":
                return self.facade.previous()
            case "seek":
                assert args.seconds is not None
                return self.facade.seek_to(args.seconds)
            case "volume":
                assert args.level is not None
                return self.facade.set_volume(args.level)
            case "shuffle":
                assert args.enabled is not None
                return self.facade.set_shuffle(args.enabled)
