"""
Summary: Convert raw playerctl text into typed values with fixed fallbacks.
Why: Callers never see raw text and a parse failure never becomes an exception.
"""

from __future__ import annotations

import math

from daspotwidget.config.settings import (
    LENGTH_FALLBACK_MICROS,
    MICROS_PER_SECOND,
    POSITION_FALLBACK_SECONDS,
    VOLUME_FALLBACK,
)
from daspotwidget.features.player.domain.models import PlayerStatus


def _parse_float(raw: str) -> float | None:
    text = raw.strip()
    if not text.isascii():
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_length_seconds(raw: str) -> int:
    """Parse ``mpris:length`` microseconds into whole seconds, truncating."""

    text = raw.strip()
    micros = int(text) if text.isascii() and text.isdigit() else LENGTH_FALLBACK_MICROS
    return micros // MICROS_PER_SECOND


def parse_volume(raw: str) -> float:
    """Parse a volume level; malformed output yields 0.5."""

    value = _parse_float(raw)
    return VOLUME_FALLBACK if value is None else value


def parse_position_seconds(raw: str) -> int:
    """Parse a fractional position and truncate it to whole, non-negative seconds."""

    value = _parse_float(raw)
    if value is None:
        value = POSITION_FALLBACK_SECONDS
    return max(0, int(value))


def parse_shuffle(raw: str) -> bool:
    """Shuffle is on when the output mentions ``On`` anywhere (case-sensitive)."""

    return "On" in raw


def parse_status(raw: str) -> PlayerStatus:
    # "Paused" collapses to STOPPED along with everything that is not "Playing".
    if raw == PlayerStatus.PLAYING.value:
        return PlayerStatus.PLAYING
    return PlayerStatus.STOPPED


def parse_player_active(raw: str, target: str) -> bool:
    """True when any comma-separated player name contains ``target``."""

    return any(target in player for player in raw.strip().split(","))


__all__ = [
    "parse_length_seconds",
    "parse_player_active",
    "parse_position_seconds",
    "parse_shuffle",
    "parse_status",
    "parse_volume",
]
