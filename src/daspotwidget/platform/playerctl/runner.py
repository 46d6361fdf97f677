"""Where: src/daspotwidget/platform/playerctl/runner.py
What: Run playerctl synchronously for queries and detached for actions.
Why: Decouple process handling from argument building and output parsing.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from typing import Protocol

from daspotwidget.config.settings import DEFAULT_PLAYERCTL_BINARY
from daspotwidget.platform.logging import logger


class ProcessRunner(Protocol):
    """Protocol for executors able to query and command the player utility."""

    def capture(self, argv: Sequence[str]) -> bytes | None:
        """Run to completion and return raw stdout, or None if it could not start."""
        ...

    def spawn(self, argv: Sequence[str]) -> None:
        """Start without waiting; raise ``OSError`` if the process cannot start."""
        ...


class SubprocessRunner:
    """Execute ``playerctl`` through :mod:`subprocess` without timeouts."""

    binary: str

    def __init__(self, binary: str = DEFAULT_PLAYERCTL_BINARY) -> None:
        self.binary = binary

    def command(self, argv: Sequence[str]) -> list[str]:
        return [self.binary, *argv]

    def capture(self, argv: Sequence[str]) -> bytes | None:
        command = self.command(argv)
        try:
            completed = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            logger.debug("Could not run %s: %s", " ".join(command), exc)
            return None
        return completed.stdout

    def spawn(self, argv: Sequence[str]) -> None:
        # Exit status is never collected; the effect is not confirmed.
        _ = subprocess.Popen(
            self.command(argv),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )


DEFAULT_RUNNER = SubprocessRunner()


__all__ = ["DEFAULT_RUNNER", "ProcessRunner", "SubprocessRunner"]
