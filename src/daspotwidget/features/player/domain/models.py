"""
Summary: Typed selectors, commands and results for the playerctl facade.
Why: Replace ad hoc string calls with closed variant sets callers can match on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum


class QueryKey(Enum):
    """Value the facade can read from the active player."""

    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    ARTWORK_LOCATOR = "artwork_locator"
    LENGTH_MICROS = "length_micros"
    PLAYER_NAME = "player_name"
    VOLUME = "volume"
    POSITION_SECONDS = "position_seconds"
    STATUS = "status"
    SHUFFLE_FLAG = "shuffle_flag"


class PlayerStatus(StrEnum):
    """Playback state; ``PAUSED`` exists for consumers but is never parsed."""

    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"


@dataclass(slots=True, frozen=True)
class PlayPause:
    """Toggle between playing and paused."""


@dataclass(slots=True, frozen=True)
class Stop:
    """Stop playback."""


@dataclass(slots=True, frozen=True)
class Next:
    """Skip to the next track."""


@dataclass(slots=True, frozen=True)
class Previous:
    """Go back to the previous track."""


@dataclass(slots=True, frozen=True)
class SeekTo:
    """Jump to an absolute position in whole seconds."""

    position: int

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError(f"Seek position must be non-negative, got {self.position}")


@dataclass(slots=True, frozen=True)
class SetVolume:
    """Set the player volume; 0.0 is silent and 1.0 is full."""

    level: float


@dataclass(slots=True, frozen=True)
class SetShuffle:
    """Enable or disable shuffle."""

    enabled: bool


PlayerAction = PlayPause | Stop | Next | Previous | SeekTo | SetVolume | SetShuffle


@dataclass(slots=True, frozen=True)
class SpawnResult:
    """Outcome of launching an action; says nothing about its effect on the player."""

    action: PlayerAction
    argv: tuple[str, ...]
    spawned: bool
    error: str | None = None


@dataclass(slots=True, frozen=True)
class NowPlaying:
    """One refresh pass over every value the widget displays."""

    title: str = ""
    artist: str = ""
    album: str = ""
    length_seconds: int = 0
    position_seconds: int = 0
    volume: float = 0.5
    status: PlayerStatus = PlayerStatus.STOPPED
    shuffle: bool = False

    @property
    def is_playing(self) -> bool:
        return self.status is PlayerStatus.PLAYING

    @property
    def progress(self) -> float:
        """Position as a fraction of the track length, clamped to [0, 1]."""
        if self.length_seconds <= 0:
            return 0.0
        return max(0.0, min(1.0, self.position_seconds / self.length_seconds))


__all__ = [
    "Next",
    "NowPlaying",
    "PlayPause",
    "PlayerAction",
    "PlayerStatus",
    "Previous",
    "QueryKey",
    "SeekTo",
    "SetShuffle",
    "SetVolume",
    "SpawnResult",
    "Stop",
]
