"""
Shared Rich Console instances for terminal output.

This module creates the two Rich Consoles used across the package: one bound to
standard output and one bound to standard error. Every other module imports
these instead of building its own Console.

Why shared instances?
  - Rich's Console detects terminal state (is it a TTY? which color system?)
    once, when it is created. Keeping one Console per stream means every write
    agrees on whether colors are available.
  - Tests can patch `console` or `error_console` in one place.

Usage:
    from .console import console, error_console
    error_console.print("[yellow]Warning: something odd[/yellow]")
"""

from typing import Any

from rich.console import Console


def create_console(stderr: bool = False, **kwargs: Any) -> Console:
    """Build a Console configured for plain line-oriented output.

    Highlighting is disabled so log text is never recolored by Rich's
    repr highlighter, and soft wrapping keeps long lines intact instead of
    folding them at the detected terminal width.
    """
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("soft_wrap", True)
    return Console(stderr=stderr, **kwargs)


# Standard output console. Also used by RichTerminal for the "out" stream.
console = create_console()

# Standard error console. Used for the "err" stream and for the package's own
# warnings (bad config values, fatal startup errors).
error_console = create_console(stderr=True)
