"""Tests for ``PlayerEventRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from daspotwidget.platform.logging import PlayerEventRichHandler
from daspotwidget.shared.events import PlayerEvent


def _make_handler() -> PlayerEventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return PlayerEventRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with event extras for testing."""

    record = logging.LogRecord(
        name="daspotwidget",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_store_event_abbreviates_long_paths() -> None:
    """Deep cache paths keep only their last segments behind an ellipsis."""

    handler = _make_handler()
    record = _build_record(
        player_event=PlayerEvent.ARTWORK_CACHE_STORE,
        path="/home/user/.cache/daspotwidget/artwork/ab67616d0000b273",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Artwork stored @ …/daspotwidget/artwork/ab67616d0000b273" in plain
    assert plain.startswith("📥")


def test_short_paths_render_unchanged() -> None:
    handler = _make_handler()
    record = _build_record(player_event=PlayerEvent.ARTWORK_CACHE_HIT, path="/tmp/cover.jpg")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "Artwork cached @ /tmp/cover.jpg" in rendered.plain


def test_skipped_action_shows_argv_and_reason() -> None:
    handler = _make_handler()
    record = _build_record(
        player_event=PlayerEvent.ACTION_SKIPPED,
        action="seek",
        argv=("position", "300"),
        reason="outside track",
    )

    rendered = handler.render_message(record, "ignored")
    assert isinstance(rendered, Text)
    assert "seek [position 300] (outside track)" in rendered.plain


def test_sent_action_omits_reason() -> None:
    handler = _make_handler()
    record = _build_record(
        player_event=PlayerEvent.ACTION_SENT,
        action="next",
        argv=("next",),
        reason="should not appear",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "next [next]" in rendered.plain
    assert "should not appear" not in rendered.plain


def test_pathless_events_fall_back_to_message() -> None:
    handler = _make_handler()
    record = _build_record(player_event=PlayerEvent.ARTWORK_FETCH_ERROR)

    rendered = handler.render_message(record, "Artwork fetch failed")
    assert isinstance(rendered, Text)
    assert "Artwork fetch failed" in rendered.plain


def test_plain_records_use_default_rendering() -> None:
    handler = _make_handler()
    record = _build_record("plain message")

    rendered = handler.render_message(record, "plain message")
    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"
