"""Module entry point for ``python -m daspotwidget``."""

import sys

from daspotwidget.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
