"""Exception hierarchy for fuzpick.

Callers (mainly the CLI) discriminate on these to pick an exit status.
"""


class FuzpickError(Exception):
    """Base class for all fuzpick exceptions."""


class ConfigError(FuzpickError):
    """Raised when configuration values are invalid."""


class NoSelection(FuzpickError):
    """Raised when a selection is requested but nothing matches the query."""


class Cancelled(FuzpickError):
    """Raised when the user aborts the session with the interrupt key."""


class TerminalError(FuzpickError):
    """Raised when the terminal cannot be opened, configured, or restored."""
