"""Structured log events emitted by the facade and the artwork cache.

Where: shared/.
What: Event identifiers plus a helper attaching them to log records.
Why: Keep event names in sync between emitters and the Rich console handler.
"""

from __future__ import annotations

import logging
from enum import StrEnum

__all__ = ["PlayerEvent", "log_event"]


class PlayerEvent(StrEnum):
    """Structured event identifiers for player and artwork logs."""

    ACTION_SENT = "player.action.sent"
    ACTION_SKIPPED = "player.action.skipped"
    ACTION_FAILED = "player.action.failed"
    ARTWORK_CACHE_HIT = "artwork.cache.hit"
    ARTWORK_CACHE_STORE = "artwork.cache.store"
    ARTWORK_CACHE_EVICT = "artwork.cache.evict"
    ARTWORK_FETCH_ERROR = "artwork.fetch.error"
    ARTWORK_LOCATOR_UNSUPPORTED = "artwork.locator.unsupported"


def log_event(
    log: logging.Logger,
    level: int,
    event: PlayerEvent,
    message: str,
    *message_args: object,
    **context: object,
) -> None:
    """Emit ``message`` with ``player_event`` and ``context`` attached as extras."""

    extra: dict[str, object] = {"player_event": event.value}
    extra.update(context)
    log.log(level, message, *message_args, extra=extra)
