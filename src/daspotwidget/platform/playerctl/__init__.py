"""playerctl process adapters.

The facade never touches :mod:`subprocess` directly; it goes through a
:class:`ProcessRunner` so tests can substitute a recording fake.
"""

from .runner import DEFAULT_RUNNER, ProcessRunner, SubprocessRunner

__all__ = ["DEFAULT_RUNNER", "ProcessRunner", "SubprocessRunner"]
