"""Where: src/daspotwidget/config/settings.py
What: Static runtime constants shared by the facade, the resolver and the CLI.
Why: Keep defaults and fallback values in one place without file I/O.
"""

from __future__ import annotations

from typing import Final

from daspotwidget import __version__

APP_NAME: Final[str] = "daspotwidget"
APP_VERSION: Final[str] = __version__

# External media-control utility ---------------------------------------------

DEFAULT_PLAYERCTL_BINARY: Final[str] = "playerctl"

# Player name matched (as a substring) against ``playerctl -l`` output.
DEFAULT_TARGET_PLAYER: Final[str] = "spotify"

# Parse fallbacks --------------------------------------------------------------

LENGTH_FALLBACK_MICROS: Final[int] = 0
VOLUME_FALLBACK: Final[float] = 0.5
POSITION_FALLBACK_SECONDS: Final[float] = 0.0
MICROS_PER_SECOND: Final[int] = 1_000_000

# Refresh cadence used by the ``watch`` command.
DEFAULT_REFRESH_INTERVAL_SECONDS: Final[float] = 1.0


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_PLAYERCTL_BINARY",
    "DEFAULT_REFRESH_INTERVAL_SECONDS",
    "DEFAULT_TARGET_PLAYER",
    "LENGTH_FALLBACK_MICROS",
    "MICROS_PER_SECOND",
    "POSITION_FALLBACK_SECONDS",
    "VOLUME_FALLBACK",
]
