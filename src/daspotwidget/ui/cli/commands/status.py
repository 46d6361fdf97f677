"""src/daspotwidget/ui/cli/commands/status.py
What: One-shot and periodic now-playing views.
Why: Stand in for the widget's timer-driven refresh from a terminal.
"""

from __future__ import annotations

import asyncio
from typing import final

from daspotwidget.ui.cli.args.options import StatusArgs, WatchArgs
from daspotwidget.ui.cli.commands.executor import CommandExecutor


@final
class StatusCommand(CommandExecutor):
    """Show a single snapshot with artwork and player activity."""

    args: StatusArgs

    def execute(self) -> bool:
        snapshot = self.facade.snapshot()
        player_active = self.facade.is_target_player_active()
        artwork = self.build_resolver().resolve()
        self.display.show_now_playing(
            snapshot,
            artwork=artwork,
            player_active=player_active,
            quiet=self.args.quiet,
        )
        return True


@final
class WatchCommand(CommandExecutor):
    """Refresh the view every ``interval`` seconds.

    Player queries and artwork resolution run on worker threads side by side,
    so a slow download delays a refresh by at most the download itself.
    """

    args: WatchArgs

    def execute(self) -> bool:
        asyncio.run(self._watch())
        return True

    async def _watch(self) -> None:
        resolver = self.build_resolver()
        refreshes = 0
        while self.args.count is None or refreshes < self.args.count:
            snapshot, artwork = await asyncio.gather(
                asyncio.to_thread(self.facade.snapshot),
                resolver.resolve_async(),
            )
            self.display.show_now_playing(snapshot, artwork=artwork, quiet=self.args.quiet)
            refreshes += 1
            if self.args.count is not None and refreshes >= self.args.count:
                break
            await asyncio.sleep(self.args.interval)
