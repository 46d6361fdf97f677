# Where: daspotwidget.shared.__init__
# What: Provide a concise import surface for shared enums and helpers.
# Why: Let the player and artwork features log the same structured events.

"""Shared cross-cutting utilities exposed at the package level."""

from .events import PlayerEvent, log_event

__all__ = ["PlayerEvent", "log_event"]
