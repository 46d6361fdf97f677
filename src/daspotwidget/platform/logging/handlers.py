"""Rich console handler for structured player and artwork events.

Where: platform/logging/handlers.py
What: Render ``player_event`` log records with icons, colours and compact paths.
Why: Keep console formatting separate from logger bootstrap.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PlayerEventRichHandler(RichHandler):
    """Rich handler that styles player actions and artwork cache events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "player.action.sent": ("▶", "cyan"),
        "player.action.skipped": ("⏭", "yellow"),
        "player.action.failed": ("⛔", "red"),
        "artwork.cache.hit": ("♻️", "green"),
        "artwork.cache.store": ("📥", "green"),
        "artwork.cache.evict": ("🧹", "magenta"),
        "artwork.fetch.error": ("❌", "red"),
        "artwork.locator.unsupported": ("❓", "yellow"),
    }
    _PATH_LABELS: ClassVar[dict[str, str]] = {
        "artwork.cache.hit": "Artwork cached",
        "artwork.cache.store": "Artwork stored",
        "artwork.cache.evict": "Artwork evicted",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Abbreviate long paths to their last segments with coloured separators."""

        pure_path = PurePosixPath(path)
        parts = [part for part in pure_path.parts if part != pure_path.anchor]
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…/" + "/".join(parts[-self._PATH_SEGMENT_LIMIT:])
        else:
            display = str(pure_path)

        text = Text()
        for char in display:
            color = "magenta" if char in {"/", "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_event_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records tagged with a ``player_event`` extra."""

        event = getattr(record, "player_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        if event.startswith("player.action"):
            action = getattr(record, "action", None)
            _ = body.append(message if action is None else str(action))
            argv = getattr(record, "argv", None)
            if argv:
                _ = body.append(f" [{' '.join(str(arg) for arg in argv)}]")
            reason = getattr(record, "reason", None) or getattr(record, "error_message", None)
            if reason and event != "player.action.sent":
                _ = body.append(f" ({reason})")
        else:
            path = getattr(record, "path", None)
            label = self._PATH_LABELS.get(event)
            if path and label:
                _ = body.append(f"{label} @ ")
                _ = body.append_text(self._format_path(str(path)))
            else:
                _ = body.append(message)

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for player events."""

        event_text = self._render_event_message(record, message)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["PlayerEventRichHandler"]
