"""Tests for now-playing display functionality."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from daspotwidget.features.artwork import (
    ArtworkFailure,
    ArtworkResolution,
    FetchFailureKind,
    classify_locator,
)
from daspotwidget.features.player import NowPlaying, PlayerStatus, PlayPause, SpawnResult
from daspotwidget.ui.cli.display import NowPlayingDisplay, format_seconds


@pytest.fixture
def display() -> NowPlayingDisplay:
    """Display writing to an in-memory console."""

    instance = NowPlayingDisplay()
    instance.console = Console(file=StringIO(), width=120, color_system=None)
    return instance


def _output(display: NowPlayingDisplay) -> str:
    stream = display.console.file
    assert isinstance(stream, StringIO)
    return stream.getvalue()


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "0:00"), (65, "1:05"), (3600, "1:00:00"), (3725, "1:02:05"), (-4, "0:00")],
)
def test_format_seconds(seconds: int, expected: str) -> None:
    assert format_seconds(seconds) == expected


def test_show_now_playing(display: NowPlayingDisplay) -> None:
    snapshot = NowPlaying(
        title="Song",
        artist="Artist",
        album="Album",
        length_seconds=245,
        position_seconds=61,
        volume=0.64,
        status=PlayerStatus.PLAYING,
        shuffle=True,
    )
    artwork = ArtworkResolution(
        locator=classify_locator("https://example.com/a.jpg"),
        path=Path("/tmp/a.jpg"),
        from_cache=True,
    )

    display.show_now_playing(snapshot, artwork=artwork, player_active=True)

    output = _output(display)
    assert "Song" in output
    assert "Artist" in output
    assert "1:01 / 4:05" in output
    assert "64%" in output
    assert "Playing" in output
    assert "/tmp/a.jpg (cached)" in output
    assert "active" in output


def test_show_now_playing_quiet(display: NowPlayingDisplay) -> None:
    display.show_now_playing(NowPlaying(), quiet=True)

    assert _output(display) == ""


def test_show_action(display: NowPlayingDisplay) -> None:
    result = SpawnResult(action=PlayPause(), argv=("play-pause",), spawned=True)

    display.show_action(result)

    assert "Sent: playerctl play-pause" in _output(display)


def test_show_artwork_prints_bare_path_even_when_quiet(display: NowPlayingDisplay) -> None:
    resolution = ArtworkResolution(locator=classify_locator("file:///tmp/a.jpg"), path=Path("/tmp/a.jpg"))

    display.show_artwork(resolution, quiet=True)

    assert _output(display).strip() == "/tmp/a.jpg"


def test_show_artwork_describes_failure(display: NowPlayingDisplay) -> None:
    url = "https://example.com/a.jpg"
    resolution = ArtworkResolution(
        locator=classify_locator(url),
        failure=ArtworkFailure(kind=FetchFailureKind.HTTP_STATUS, url=url, detail="HTTP 404", status=404),
    )

    display.show_artwork(resolution)

    assert "unavailable (http_status: HTTP 404)" in _output(display)


def test_show_artwork_describes_unsupported_locator(display: NowPlayingDisplay) -> None:
    display.show_artwork(ArtworkResolution(locator=classify_locator("ftp://x/y.jpg")))

    assert "unsupported locator ftp://x/y.jpg" in _output(display)


def test_show_pruned(display: NowPlayingDisplay) -> None:
    display.show_pruned([Path("/cache/a.jpg"), Path("/cache/b.jpg")])

    output = _output(display)
    assert "Removed cached artwork files: 2" in output
    assert "a.jpg" in output and "b.jpg" in output


def test_bracketed_track_text_is_shown_verbatim(display: NowPlayingDisplay) -> None:
    snapshot = NowPlaying(
        title="Dub [/version]",
        artist="Band [feat. Guest]",
        album="[bold]Live[/bold]",
    )

    display.show_now_playing(snapshot)

    output = _output(display)
    assert "Dub [/version]" in output
    assert "Band [feat. Guest]" in output
    assert "[bold]Live[/bold]" in output


def test_bracketed_artwork_text_is_shown_verbatim(display: NowPlayingDisplay) -> None:
    display.show_artwork(ArtworkResolution(locator=classify_locator("ftp://x/[/cover].jpg")))
    display.show_artwork(
        ArtworkResolution(
            locator=classify_locator("file:///music/[red]cover.jpg"),
            path=Path("/music/[red]cover.jpg"),
        )
    )

    output = _output(display)
    assert "unsupported locator ftp://x/[/cover].jpg" in output
    assert "/music/[red]cover.jpg" in output
