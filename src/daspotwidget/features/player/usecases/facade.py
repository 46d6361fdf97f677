"""
Summary: Stateless query/command facade over the playerctl command-line utility.
Why: Give the widget typed reads and bounded writes, each a fresh process round trip.
"""

from __future__ import annotations

import logging

from daspotwidget.config.settings import DEFAULT_TARGET_PLAYER
from daspotwidget.features.player.domain.models import (
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
from daspotwidget.platform.logging import logger
from daspotwidget.platform.playerctl import DEFAULT_RUNNER, ProcessRunner
from daspotwidget.shared.events import PlayerEvent, log_event

from .commands import action_arguments, query_arguments
from .parsing import (
    parse_length_seconds,
    parse_player_active,
    parse_position_seconds,
    parse_shuffle,
    parse_status,
    parse_volume,
)


class PlayerFacade:
    """Read and control the active MPRIS player through ``playerctl``.

    Holds no player state: every getter re-runs the utility, and every action
    is spawned without waiting for it to finish. Nothing here enforces a
    timeout, so a hung ``playerctl`` blocks the caller.
    """

    runner: ProcessRunner
    target_player: str

    def __init__(
        self,
        runner: ProcessRunner | None = None,
        *,
        target_player: str = DEFAULT_TARGET_PLAYER,
    ) -> None:
        self.runner = runner if runner is not None else DEFAULT_RUNNER
        self.target_player = target_player

    # Queries -----------------------------------------------------------------

    def query(self, key: QueryKey) -> str:
        """Return trimmed stdout for ``key``, or ``""`` if it cannot be obtained."""

        raw = self.runner.capture(query_arguments(key))
        if raw is None:
            return ""
        try:
            return raw.decode("utf-8").strip()
        except UnicodeDecodeError:
            logger.debug("Discarding non UTF-8 output for %s", key.name)
            return ""

    def get_title(self) -> str:
        return self.query(QueryKey.TITLE)

    def get_artist(self) -> str:
        return self.query(QueryKey.ARTIST)

    def get_album(self) -> str:
        return self.query(QueryKey.ALBUM)

    def get_artwork_locator(self) -> str:
        return self.query(QueryKey.ARTWORK_LOCATOR)

    def get_length_seconds(self) -> int:
        return parse_length_seconds(self.query(QueryKey.LENGTH_MICROS))

    def get_volume(self) -> float:
        return parse_volume(self.query(QueryKey.VOLUME))

    def get_position_seconds(self) -> int:
        return parse_position_seconds(self.query(QueryKey.POSITION_SECONDS))

    def get_shuffle(self) -> bool:
        return parse_shuffle(self.query(QueryKey.SHUFFLE_FLAG))

    def get_status(self) -> PlayerStatus:
        return parse_status(self.query(QueryKey.STATUS))

    def is_target_player_active(self) -> bool:
        return parse_player_active(self.query(QueryKey.PLAYER_NAME), self.target_player)

    def snapshot(self) -> NowPlaying:
        """Refresh every displayed value, one query after another."""

        return NowPlaying(
            title=self.get_title(),
            artist=self.get_artist(),
            album=self.get_album(),
            length_seconds=self.get_length_seconds(),
            position_seconds=self.get_position_seconds(),
            volume=self.get_volume(),
            status=self.get_status(),
            shuffle=self.get_shuffle(),
        )

    # Actions -----------------------------------------------------------------

    def act(self, action: PlayerAction) -> SpawnResult:
        """Spawn the command for ``action`` without waiting for it.

        A spawn failure is logged and reported on the result, never raised.
        """

        argv = action_arguments(action)
        try:
            self.runner.spawn(argv)
        except OSError as exc:
            log_event(
                logger,
                logging.WARNING,
                PlayerEvent.ACTION_FAILED,
                "Could not execute player action %s: %s",
                type(action).__name__,
                exc,
                action=type(action).__name__,
                argv=argv,
                error_message=str(exc),
            )
            return SpawnResult(action=action, argv=argv, spawned=False, error=str(exc))

        log_event(
            logger,
            logging.DEBUG,
            PlayerEvent.ACTION_SENT,
            "Sent player action %s",
            type(action).__name__,
            action=type(action).__name__,
            argv=argv,
        )
        return SpawnResult(action=action, argv=argv, spawned=True)

    def play_pause(self) -> SpawnResult:
        return self.act(PlayPause())

    def stop(self) -> SpawnResult:
        return self.act(Stop())

    def next(self) -> SpawnResult:
        return self.act(Next())

    def previous(self) -> SpawnResult:
        return self.act(Previous())

    def set_shuffle(self, enabled: bool) -> SpawnResult:
        return self.act(SetShuffle(enabled=enabled))

    def seek_to(self, seconds: int) -> SpawnResult | None:
        """Seek when ``0 < seconds < track length``; otherwise log and return None."""

        song_length = self.get_length_seconds()
        if not 0 < seconds < song_length:
            log_event(
                logger,
                logging.WARNING,
                PlayerEvent.ACTION_SKIPPED,
                "Position should be between 0 and song length (%s), will not change position. Got: %s",
                song_length,
                seconds,
                action="SeekTo",
                reason=f"position {seconds} outside (0, {song_length})",
            )
            return None
        return self.act(SeekTo(position=seconds))

    def set_volume(self, level: float) -> SpawnResult | None:
        """Set volume when ``0.0 <= level <= 1.0``; otherwise log and return None."""

        if not 0.0 <= level <= 1.0:
            log_event(
                logger,
                logging.WARNING,
                PlayerEvent.ACTION_SKIPPED,
                "Volume should be between 0.0 and 1.0, will not change volume. Got: %s",
                level,
                action="SetVolume",
                reason=f"volume {level} outside [0.0, 1.0]",
            )
            return None
        return self.act(SetVolume(level=level))


__all__ = ["PlayerFacade"]
