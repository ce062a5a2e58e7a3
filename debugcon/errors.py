"""Exceptions raised by the debug console."""


class DebugConsoleError(Exception):
    """Base class for all debugcon errors."""


class ConsoleAllocationError(DebugConsoleError):
    """A terminal was required at startup but none could be attached.

    This is fatal: the logger has nowhere to write. It is raised while the
    logger is being constructed so the entry point can decide how to
    terminate the process.
    """


class LogFormatError(DebugConsoleError, ValueError):
    """The message template and its arguments do not agree."""
