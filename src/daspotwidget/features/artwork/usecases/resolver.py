"""Where: src/daspotwidget/features/artwork/usecases/resolver.py
What: Turn the player's artwork locator into a local file path.
Why: The widget only reads local bytes; downloading and caching happen here.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from daspotwidget.config.config import Config
from daspotwidget.features.player import PlayerFacade
from daspotwidget.platform.http import DEFAULT_HTTP_CLIENT, HTTPClient
from daspotwidget.platform.logging import logger
from daspotwidget.shared.events import PlayerEvent, log_event

from ..domain.locator import ArtworkLocator, LocatorKind, classify_locator
from ..domain.results import ArtworkFailure, ArtworkResolution, FetchFailureKind
from .cache import ArtworkCache


class ArtworkResolver:
    """Resolve the current track's artwork, downloading remote images once."""

    facade: PlayerFacade
    cache: ArtworkCache
    http_client: HTTPClient
    fetch_timeout: float | None

    def __init__(
        self,
        facade: PlayerFacade,
        cache: ArtworkCache,
        http_client: HTTPClient | None = None,
        *,
        fetch_timeout: float | None = None,
    ) -> None:
        self.facade = facade
        self.cache = cache
        self.http_client = http_client if http_client is not None else DEFAULT_HTTP_CLIENT
        self.fetch_timeout = fetch_timeout

    @classmethod
    def from_config(
        cls,
        facade: PlayerFacade,
        config: Config | None = None,
        http_client: HTTPClient | None = None,
    ) -> "ArtworkResolver":
        """Build a resolver from the process-wide configuration."""

        resolved = config if config is not None else Config.load()
        return cls(
            facade,
            ArtworkCache.from_config(resolved),
            http_client,
            fetch_timeout=resolved.fetch_timeout,
        )

    def resolve(self) -> ArtworkResolution:
        """Resolve the locator currently reported by the player.

        Returns:
            ArtworkResolution: ``path`` is set for cached, downloaded and local
            artwork; ``failure`` describes a fetch or write fault. Empty and
            unsupported locators yield neither.
        """
        locator = classify_locator(self.facade.get_artwork_locator())

        match locator.kind:
            case LocatorKind.EMPTY:
                return ArtworkResolution(locator=locator)
            case LocatorKind.LOCAL_FILE:
                return ArtworkResolution(locator=locator, path=locator.local_path)
            case LocatorKind.UNSUPPORTED:
                log_event(
                    logger,
                    logging.WARNING,
                    PlayerEvent.ARTWORK_LOCATOR_UNSUPPORTED,
                    "Url type not supported: %s",
                    locator.raw,
                    locator=locator.raw,
                )
                return ArtworkResolution(locator=locator)
            case LocatorKind.REMOTE_HTTP:
                return self._resolve_remote(locator)

    def resolve_path(self) -> Path | None:
        return self.resolve().path

    async def resolve_async(self) -> ArtworkResolution:
        """Run :meth:`resolve` on a worker thread; not cancelled or de-duplicated."""

        return await asyncio.to_thread(self.resolve)

    def _resolve_remote(self, locator: ArtworkLocator) -> ArtworkResolution:
        url = locator.raw
        file_name = locator.file_name or ""
        if not file_name:
            return self._fail(locator, FetchFailureKind.NO_FILE_NAME, "URL has no file name")

        cached = self.cache.cached_path(file_name)
        if cached is not None:
            log_event(
                logger,
                logging.DEBUG,
                PlayerEvent.ARTWORK_CACHE_HIT,
                "Using cached artwork %s",
                cached,
                path=cached,
            )
            return ArtworkResolution(locator=locator, path=cached, from_cache=True)

        result = self.http_client.get_bytes(url, timeout=self.fetch_timeout)
        if result.status == 0:
            return self._fail(
                locator, FetchFailureKind.NETWORK, result.error or "no response"
            )
        if not result.ok or result.content is None:
            return self._fail(
                locator,
                FetchFailureKind.HTTP_STATUS,
                result.error or f"HTTP {result.status}",
                status=result.status,
            )

        try:
            stored = self.cache.store(file_name, result.content)
        except OSError as exc:
            return self._fail(locator, FetchFailureKind.WRITE, str(exc))
        return ArtworkResolution(locator=locator, path=stored)

    def _fail(
        self,
        locator: ArtworkLocator,
        kind: FetchFailureKind,
        detail: str,
        *,
        status: int | None = None,
    ) -> ArtworkResolution:
        log_event(
            logger,
            logging.WARNING,
            PlayerEvent.ARTWORK_FETCH_ERROR,
            "Artwork fetch failed (%s) for %s: %s",
            kind.value,
            locator.raw,
            detail,
            url=locator.raw,
            error_message=detail,
        )
        failure = ArtworkFailure(kind=kind, url=locator.raw, detail=detail, status=status)
        return ArtworkResolution(locator=locator, failure=failure)


__all__ = ["ArtworkResolver"]
