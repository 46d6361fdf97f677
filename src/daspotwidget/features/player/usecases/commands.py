"""
Summary: Map query keys and player actions to exact playerctl argument lists.
Why: Keep argv construction pure so it can be tested without spawning processes.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from daspotwidget.features.player.domain.models import (
    Next,
    PlayerAction,
    PlayPause,
    Previous,
    QueryKey,
    SeekTo,
    SetShuffle,
    SetVolume,
    Stop,
)

_QUERY_ARGUMENTS: Final[MappingProxyType[QueryKey, tuple[str, ...]]] = MappingProxyType(
    {
        QueryKey.TITLE: ("metadata", "xesam:title"),
        QueryKey.ARTIST: ("metadata", "xesam:artist"),
        QueryKey.ALBUM: ("metadata", "xesam:album"),
        QueryKey.ARTWORK_LOCATOR: ("metadata", "mpris:artUrl"),
        QueryKey.LENGTH_MICROS: ("metadata", "mpris:length"),
        QueryKey.PLAYER_NAME: ("-l",),
        QueryKey.VOLUME: ("volume",),
        QueryKey.POSITION_SECONDS: ("position",),
        QueryKey.STATUS: ("status",),
        QueryKey.SHUFFLE_FLAG: ("shuffle",),
    }
)


def query_arguments(key: QueryKey) -> tuple[str, ...]:
    """Return the playerctl arguments that read ``key``."""

    return _QUERY_ARGUMENTS[key]


def action_arguments(action: PlayerAction) -> tuple[str, ...]:
    """Return the playerctl arguments that perform ``action``.

    Raises:
        TypeError: If ``action`` is not one of the known action types.
    """

    match action:
        case PlayPause():
            return ("play-pause",)
        case Stop():
            return ("stop",)
        case Next():
            return ("next",)
        case Previous():
            return ("previous",)
        case SeekTo(position=position):
            return ("position", str(position))
        case SetVolume(level=level):
            return ("volume", str(float(level)))
        case SetShuffle(enabled=enabled):
            return ("shuffle", "on" if enabled else "off")
        case _:
            raise TypeError(f"Unsupported player action: {action!r}")


__all__ = ["action_arguments", "query_arguments"]
