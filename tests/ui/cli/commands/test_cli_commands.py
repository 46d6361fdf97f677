"""Tests for command execution."""

import os
from io import StringIO
from pathlib import Path

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from daspotwidget.features.player import PlayerFacade, QueryKey
from daspotwidget.ui.cli.args.options import (
    ArtworkArgs,
    ControlArgs,
    ControlCommandName,
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
from fakes import FakeRunner


def _silence(command: CommandExecutor) -> StringIO:
    stream = StringIO()
    command.display.console = Console(file=stream, width=120, color_system=None)
    return stream


def _control(command: ControlCommandName, **values: object) -> ControlArgs:
    return ControlArgs(command=command, verbose=False, quiet=False, **values)  # pyright: ignore[reportArgumentType]


def test_executor_builds_facade_from_config(isolated_config: Path) -> None:
    _ = isolated_config.write_text(
        'playerctl_path = "/opt/bin/playerctl"\ntarget_player = "vlc"\n', encoding="utf-8"
    )

    command = StatusCommand(StatusArgs(command="status", verbose=False, quiet=False))

    assert command.facade.target_player == "vlc"
    assert command.facade.runner.binary == "/opt/bin/playerctl"  # pyright: ignore[reportAttributeAccessIssue]


@pytest.mark.parametrize(
    ("args", "argv"),
    [
        (_control("play-pause"), ("play-pause",)),
        (_control("stop"), ("stop",)),
        (_control("next"), ("next",)),
        (_control("previous"), ("previous",)),
        (_control("volume", level=0.25), ("volume", "0.25")),
        (_control("shuffle", enabled=True), ("shuffle", "on")),
    ],
)
def test_control_command_spawns_action(
    args: ControlArgs,
    argv: tuple[str, ...],
    facade: PlayerFacade,
    fake_runner: FakeRunner,
) -> None:
    command = ControlCommand(args, facade)
    stream = _silence(command)

    assert command.execute()
    assert fake_runner.spawned == [argv]
    assert f"Sent: playerctl {' '.join(argv)}" in stream.getvalue()


def test_control_command_seek_inside_track(facade: PlayerFacade, fake_runner: FakeRunner) -> None:
    fake_runner.respond(QueryKey.LENGTH_MICROS, "200000000")
    command = ControlCommand(_control("seek", seconds=30), facade)
    _ = _silence(command)

    assert command.execute()
    assert fake_runner.spawned == [("position", "30")]


def test_control_command_reports_skipped_seek(facade: PlayerFacade, fake_runner: FakeRunner) -> None:
    fake_runner.respond(QueryKey.LENGTH_MICROS, "200000000")
    command = ControlCommand(_control("seek", seconds=500), facade)
    stream = _silence(command)

    assert not command.execute()
    assert fake_runner.spawned == []
    assert stream.getvalue() == ""


def test_control_command_reports_spawn_failure(facade: PlayerFacade, fake_runner: FakeRunner) -> None:
    fake_runner.spawn_error = FileNotFoundError(2, "No such file or directory")
    command = ControlCommand(_control("next"), facade)
    _ = _silence(command)

    assert not command.execute()


def test_status_command_shows_snapshot(facade: PlayerFacade, fake_runner: FakeRunner) -> None:
    fake_runner.respond(QueryKey.TITLE, "Song")
    fake_runner.respond(QueryKey.PLAYER_NAME, "spotify")
    fake_runner.respond(QueryKey.ARTWORK_LOCATOR, "file:///tmp/cover.png")
    command = StatusCommand(StatusArgs(command="status", verbose=False, quiet=False), facade)
    stream = _silence(command)

    assert command.execute()

    output = stream.getvalue()
    assert "Song" in output
    assert "/tmp/cover.png" in output
    assert fake_runner.spawned == []


def test_artwork_command_prints_local_path(facade: PlayerFacade, fake_runner: FakeRunner) -> None:
    fake_runner.respond(QueryKey.ARTWORK_LOCATOR, "file:///tmp/cover.png")
    command = ArtworkCommand(ArtworkArgs(command="artwork", verbose=False, quiet=True), facade)
    stream = _silence(command)

    assert command.execute()
    assert stream.getvalue().strip() == "/tmp/cover.png"


def test_artwork_command_fails_for_unsupported_locator(
    facade: PlayerFacade, fake_runner: FakeRunner
) -> None:
    fake_runner.respond(QueryKey.ARTWORK_LOCATOR, "ftp://x/y.jpg")
    command = ArtworkCommand(ArtworkArgs(command="artwork", verbose=False, quiet=True), facade)
    _ = _silence(command)

    assert not command.execute()


def test_watch_command_refreshes_count_times(
    facade: PlayerFacade, fake_runner: FakeRunner, mocker: MockerFixture
) -> None:
    fake_runner.respond(QueryKey.TITLE, "Song")
    sleep = mocker.patch("asyncio.sleep", new=mocker.AsyncMock())
    args = WatchArgs(command="watch", verbose=False, quiet=False, interval=0.5, count=3)
    command = WatchCommand(args, facade)
    stream = _silence(command)

    assert command.execute()

    assert stream.getvalue().count("Song") == 3
    assert sleep.await_count == 2
    sleep.assert_awaited_with(0.5)


def _populate(directory: Path, names: list[str]) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for index, name in enumerate(names):
        path = directory / name
        _ = path.write_bytes(b"x")
        os.utime(path, (1_000_000 + index, 1_000_000 + index))


def test_prune_command_applies_limit(isolated_config: Path, tmp_path: Path, facade: PlayerFacade) -> None:
    artwork_dir = tmp_path / "artwork"
    _populate(artwork_dir, ["a.jpg", "b.jpg", "c.jpg"])
    _ = isolated_config.write_text(f'download_location = "{artwork_dir}"\n', encoding="utf-8")
    args = PruneArtworkArgs(command="prune-artwork", verbose=False, quiet=False, max_files=1)
    command = PruneArtworkCommand(args, facade)
    stream = _silence(command)

    assert command.execute()

    assert [path.name for path in artwork_dir.iterdir()] == ["c.jpg"]
    assert "Removed cached artwork files: 2" in stream.getvalue()


def test_prune_command_falls_back_to_configured_limit(
    isolated_config: Path, tmp_path: Path, facade: PlayerFacade
) -> None:
    artwork_dir = tmp_path / "artwork"
    _populate(artwork_dir, ["a.jpg", "b.jpg", "c.jpg"])
    _ = isolated_config.write_text(
        f'download_location = "{artwork_dir}"\nartwork_cache_max_files = 2\n', encoding="utf-8"
    )
    args = PruneArtworkArgs(command="prune-artwork", verbose=False, quiet=True, max_files=None)
    command = PruneArtworkCommand(args, facade)

    assert command.execute()
    assert sorted(path.name for path in artwork_dir.iterdir()) == ["b.jpg", "c.jpg"]


def test_prune_command_refuses_temp_directory(facade: PlayerFacade) -> None:
    args = PruneArtworkArgs(command="prune-artwork", verbose=False, quiet=False, max_files=5)

    assert not PruneArtworkCommand(args, facade).execute()


def test_prune_command_requires_a_limit(
    isolated_config: Path, tmp_path: Path, facade: PlayerFacade
) -> None:
    _ = isolated_config.write_text(f'download_location = "{tmp_path}"\n', encoding="utf-8")
    args = PruneArtworkArgs(command="prune-artwork", verbose=False, quiet=False, max_files=None)

    assert not PruneArtworkCommand(args, facade).execute()


def test_watch_command_survives_markup_in_track_text(
    facade: PlayerFacade, fake_runner: FakeRunner, mocker: MockerFixture
) -> None:
    fake_runner.respond(QueryKey.TITLE, "Dub [/version]")
    fake_runner.respond(QueryKey.ARTIST, "Band [feat. Guest]")
    _ = mocker.patch("asyncio.sleep", new=mocker.AsyncMock())
    args = WatchArgs(command="watch", verbose=False, quiet=False, interval=0.5, count=2)
    command = WatchCommand(args, facade)
    stream = _silence(command)

    assert command.execute()

    output = stream.getvalue()
    assert output.count("Dub [/version]") == 2
    assert "Band [feat. Guest]" in output
