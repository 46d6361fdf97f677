"""Outcome records for artwork resolution.

Where: features/artwork/domain.
What: Failure kinds and the resolution result handed back to consumers.
Why: Fetch and write faults end the current resolution, not the process.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from .locator import ArtworkLocator, LocatorKind


class FetchFailureKind(StrEnum):
    """Why a remote artwork file could not be cached."""

    NETWORK = "network"
    HTTP_STATUS = "http_status"
    WRITE = "write"
    NO_FILE_NAME = "no_file_name"


@dataclass(slots=True, frozen=True)
class ArtworkFailure:
    """A fetch or write fault for one resolution; never retried."""

    kind: FetchFailureKind
    url: str
    detail: str
    status: int | None = None


@dataclass(slots=True, frozen=True)
class ArtworkResolution:
    """Result of resolving the current track's artwork."""

    locator: ArtworkLocator
    path: Path | None = None
    from_cache: bool = False
    failure: ArtworkFailure | None = None

    @property
    def ok(self) -> bool:
        """False only for failed fetches and unsupported locators."""
        return self.failure is None and self.locator.kind is not LocatorKind.UNSUPPORTED


__all__ = ["ArtworkFailure", "ArtworkResolution", "FetchFailureKind"]
