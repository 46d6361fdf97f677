"""daspotwidget - playerctl-backed now-playing widget core."""

__version__ = "0.1.0"
