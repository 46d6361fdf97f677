"""Artwork feature exports.

Where: features/artwork/__init__.py
What: Re-export locator classification, the on-disk cache and the resolver.
Why: Give the CLI and tests one import path for artwork handling.
"""

from .domain.locator import ArtworkLocator, LocatorKind, classify_locator
from .domain.results import ArtworkFailure, ArtworkResolution, FetchFailureKind
from .usecases.cache import ArtworkCache
from .usecases.resolver import ArtworkResolver

__all__ = [
    "ArtworkCache",
    "ArtworkFailure",
    "ArtworkLocator",
    "ArtworkResolution",
    "ArtworkResolver",
    "FetchFailureKind",
    "LocatorKind",
    "classify_locator",
]
