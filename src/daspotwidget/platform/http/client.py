"""Where: src/daspotwidget/platform/http/client.py
What: Single-attempt HTTP GET adapter returning raw response bodies.
Why: Keep ``requests`` out of the artwork cache logic and easy to fake in tests.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, cast

import requests

from daspotwidget.config.settings import APP_NAME, APP_VERSION
from daspotwidget.platform.logging import logger


def format_user_agent(app_name: str, app_version: str) -> str:
    """Return ``App/Version`` for outbound requests."""

    return f"{app_name}/{app_version}"


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response relevant to artwork downloads.

    ``status`` is 0 when no response was received; ``error`` then describes why.
    """

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300 and self.content is not None


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to fetch binary payloads."""

    def get_bytes(self, url: str, *, timeout: float | None = None) -> HTTPResult:
        ...


class ArtworkHTTPClient:
    """Perform one GET per call; no retries, no caching."""

    user_agent: str

    def __init__(self, user_agent: str | None = None) -> None:
        self.user_agent = user_agent or format_user_agent(APP_NAME, APP_VERSION)

    def get_bytes(self, url: str, *, timeout: float | None = None) -> HTTPResult:
        headers = {"User-Agent": self.user_agent}
        try:
            response = requests.get(url, headers=headers, timeout=timeout)
        except requests.RequestException as exc:
            logger.debug("Artwork request error for %s: %s", url, exc)
            return HTTPResult(status=0, error=str(exc))

        status = int(response.status_code)
        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        response_headers = {str(key): str(value) for key, value in header_items}

        if not 200 <= status < 300:
            return HTTPResult(
                status=status,
                headers=response_headers,
                error=f"HTTP {status}",
            )

        return HTTPResult(status=status, headers=response_headers, content=response.content)


DEFAULT_HTTP_CLIENT = ArtworkHTTPClient()


__all__ = [
    "DEFAULT_HTTP_CLIENT",
    "ArtworkHTTPClient",
    "HTTPClient",
    "HTTPResult",
    "format_user_agent",
]
