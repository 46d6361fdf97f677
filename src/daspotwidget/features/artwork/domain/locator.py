"""Where: src/daspotwidget/features/artwork/domain/locator.py
What: Classify raw artwork locator strings reported by the player.
Why: Resolution branches on the locator kind; classification stays pure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final

HTTP_PREFIX: Final[str] = "http"
FILE_PREFIX: Final[str] = "file://"
_DIRECTORY_NAMES: Final[frozenset[str]] = frozenset({".", ".."})


class LocatorKind(StrEnum):
    """How an artwork locator is resolved to a local file."""

    REMOTE_HTTP = "remote_http"
    LOCAL_FILE = "local_file"
    EMPTY = "empty"
    UNSUPPORTED = "unsupported"


@dataclass(slots=True, frozen=True)
class ArtworkLocator:
    """A classified locator; ``raw`` is kept verbatim for diagnostics."""

    kind: LocatorKind
    raw: str

    @property
    def url(self) -> str | None:
        return self.raw if self.kind is LocatorKind.REMOTE_HTTP else None

    @property
    def local_path(self) -> Path | None:
        """Path with the ``file://`` prefix stripped; existence is not checked."""
        if self.kind is not LocatorKind.LOCAL_FILE:
            return None
        return Path(self.raw.removeprefix(FILE_PREFIX))

    @property
    def file_name(self) -> str | None:
        """Cache file name: everything after the last ``/`` of the URL.

        Empty when that segment is missing or names a directory (``.``/``..``).
        """
        if self.kind is not LocatorKind.REMOTE_HTTP:
            return None
        name = self.raw.rsplit("/", 1)[-1]
        return "" if name in _DIRECTORY_NAMES else name


def classify_locator(raw: str) -> ArtworkLocator:
    """Classify ``raw`` by prefix: http, file://, empty, or unsupported."""

    if raw.startswith(HTTP_PREFIX):
        kind = LocatorKind.REMOTE_HTTP
    elif raw.startswith(FILE_PREFIX):
        kind = LocatorKind.LOCAL_FILE
    elif not raw:
        kind = LocatorKind.EMPTY
    else:
        kind = LocatorKind.UNSUPPORTED
    return ArtworkLocator(kind=kind, raw=raw)


__all__ = ["ArtworkLocator", "LocatorKind", "classify_locator"]
