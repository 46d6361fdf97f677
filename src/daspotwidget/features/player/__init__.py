"""
Summary: Export the player facade, its domain types and the pure helpers.
Why: Provide a stable import surface for the CLI, the artwork feature and tests.
"""

from .domain.models import (
    Next,
    NowPlaying,
    PlayerAction,
    PlayerStatus,
    PlayPause,
    Previous,
    QueryKey,
    SeekTo,
    SetShuffle,
    SetVolume,
    SpawnResult,
    Stop,
)
from .usecases.commands import action_arguments, query_arguments
from .usecases.facade import PlayerFacade
from .usecases.parsing import (
    parse_length_seconds,
    parse_player_active,
    parse_position_seconds,
    parse_shuffle,
    parse_status,
    parse_volume,
)

__all__ = [
    "Next",
    "NowPlaying",
    "PlayPause",
    "PlayerAction",
    "PlayerFacade",
    "PlayerStatus",
    "Previous",
    "QueryKey",
    "SeekTo",
    "SetShuffle",
    "SetVolume",
    "SpawnResult",
    "Stop",
    "action_arguments",
    "parse_length_seconds",
    "parse_player_active",
    "parse_position_seconds",
    "parse_shuffle",
    "parse_status",
    "parse_volume",
    "query_arguments",
]
