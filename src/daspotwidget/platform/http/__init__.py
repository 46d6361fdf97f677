"""HTTP adapters used to download remote artwork."""

from .client import DEFAULT_HTTP_CLIENT, ArtworkHTTPClient, HTTPClient, HTTPResult

__all__ = ["DEFAULT_HTTP_CLIENT", "ArtworkHTTPClient", "HTTPClient", "HTTPResult"]
