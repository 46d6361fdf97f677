"""Command line interface for daspotwidget."""

from daspotwidget.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
