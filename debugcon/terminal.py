"""
Terminal backends for the console logger.

The logger never touches sys.stdout or escape codes directly. It talks to a
small capability interface, `Terminal`, with four operations:

  - write_raw(stream, text, newline)   write text (and maybe a newline), flush
  - set_attribute(stream, attribute)   color subsequently written text
  - get_default_attribute(stream)      the stream's resting color, or None
                                       when the stream can't be colored
  - allocate_terminal()                attach a terminal to the process

Two implementations live here:

  RichTerminal    the real one, built on Rich Consoles. Rich decides whether
                  a stream can be colored (TTY detection, NO_COLOR, color
                  system) and renders the escape codes.
  MemoryTerminal  an in-memory fake that records every write together with the
                  attribute active at the time. Tests use it to check locking
                  and color restoration without a real terminal.
"""

from __future__ import annotations

import enum
import sys
import threading
from typing import IO, Protocol

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from .attributes import NEUTRAL_ATTRIBUTE, attribute_style
from .console import console, create_console, error_console


class Stream(enum.Enum):
    """The two conventional output channels."""

    OUT = "out"
    ERR = "err"


class Terminal(Protocol):
    """Capabilities the logger needs from an output surface.

    `lock` guards the whole surface: the logger holds it for every line, so
    two loggers writing to the same terminal never interleave.
    """

    lock: threading.Lock

    def write_raw(self, stream: Stream, text: str, newline: bool = True) -> None: ...

    def set_attribute(self, stream: Stream, attribute: int) -> None: ...

    def get_default_attribute(self, stream: Stream) -> int | None: ...

    def allocate_terminal(self) -> None: ...


# Writes through the shared default consoles all land on the process's real
# stdout/stderr, so every RichTerminal using them serializes on this lock.
_default_console_lock = threading.Lock()


class RichTerminal:
    """Terminal backed by one Rich Console per stream.

    Rich decides whether a stream can be colored and renders the escape codes,
    but the text itself goes straight to the console's file so tabs, carriage
    returns and other control characters reach the stream unchanged.
    """

    def __init__(
        self,
        out: Console | None = None,
        err: Console | None = None,
        lock: threading.Lock | None = None,
    ):
        self._consoles: dict[Stream, Console] = {
            Stream.OUT: out if out is not None else console,
            Stream.ERR: err if err is not None else error_console,
        }
        if lock is None:
            lock = _default_console_lock if out is None or err is None else threading.Lock()
        self.lock = lock
        # None means "whatever the terminal shows by default"
        self._attributes: dict[Stream, int | None] = {Stream.OUT: None, Stream.ERR: None}
        self._styles: dict[Stream, Style] = {Stream.OUT: Style.null(), Stream.ERR: Style.null()}

    def supports_attributes(self, stream: Stream) -> bool:
        """True when the stream is a terminal Rich can color."""
        target = self._consoles[stream]
        return target.is_terminal and target.color_system is not None

    def get_default_attribute(self, stream: Stream) -> int | None:
        if not self.supports_attributes(stream):
            return None
        return NEUTRAL_ATTRIBUTE

    def set_attribute(self, stream: Stream, attribute: int) -> None:
        if not self.supports_attributes(stream):
            return
        self._attributes[stream] = attribute
        # The neutral attribute is the terminal's own default color, which may
        # not be white at all, so it maps to "no style" rather than to white.
        if attribute == NEUTRAL_ATTRIBUTE:
            self._styles[stream] = Style.null()
        else:
            self._styles[stream] = attribute_style(attribute)

    def current_attribute(self, stream: Stream) -> int:
        attribute = self._attributes[stream]
        return NEUTRAL_ATTRIBUTE if attribute is None else attribute

    def write_raw(self, stream: Stream, text: str, newline: bool = True) -> None:
        target = self._consoles[stream]
        style = self._styles[stream]
        if style and text and target.color_system is not None:
            text = style.render(text, color_system=COLOR_SYSTEMS[target.color_system])
        file = target.file
        file.write(text + "\n" if newline else text)
        file.flush()

    def allocate_terminal(self) -> None:
        """Attach a terminal and rebind the standard streams to it.

        On Windows a new console is allocated (an already attached console is
        accepted). Elsewhere the controlling terminal, /dev/tty, is reopened.
        Raises OSError when neither is possible; the standard streams are only
        replaced once all three handles are open.
        """
        if sys.platform == "win32":
            import ctypes

            kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
            if not kernel32.AllocConsole() and not kernel32.GetConsoleWindow():
                raise OSError(ctypes.get_last_error(), "AllocConsole failed")
            out_name, in_name = "CONOUT$", "CONIN$"
        else:
            out_name = in_name = "/dev/tty"

        handles: list[IO[str]] = []
        try:
            handles.append(open(out_name, "w", encoding="utf-8"))  # noqa: SIM115
            handles.append(open(out_name, "w", encoding="utf-8"))  # noqa: SIM115
            handles.append(open(in_name, encoding="utf-8"))  # noqa: SIM115
        except OSError:
            for handle in handles:
                handle.close()
            raise

        sys.stdout, sys.stderr, sys.stdin = handles

        # Rich detects TTY and color support when a Console is built, so the
        # consoles must be rebuilt against the new handles.
        self._consoles = {
            Stream.OUT: create_console(file=sys.stdout),
            Stream.ERR: create_console(file=sys.stderr),
        }


class MemoryTerminal:
    """In-memory terminal that records writes and attribute changes.

    Each write is stored as (stream, text, attribute) where attribute is the
    one in effect when the text was written.
    """

    def __init__(
        self,
        supports_attributes: bool = True,
        allocatable: bool = True,
        default_attribute: int = NEUTRAL_ATTRIBUTE,
    ):
        self.supports_attributes = supports_attributes
        self.allocatable = allocatable
        self.allocated = False
        self.lock = threading.Lock()
        self.writes: list[tuple[Stream, str, int]] = []
        self.flushes = 0
        self.attribute_changes: list[tuple[Stream, int]] = []
        self.default_queries: list[Stream] = []
        self._attributes = {Stream.OUT: default_attribute, Stream.ERR: default_attribute}

    def get_default_attribute(self, stream: Stream) -> int | None:
        self.default_queries.append(stream)
        if not self.supports_attributes:
            return None
        return self._attributes[stream]

    def set_attribute(self, stream: Stream, attribute: int) -> None:
        if not self.supports_attributes:
            return
        self._attributes[stream] = attribute
        self.attribute_changes.append((stream, attribute))

    def current_attribute(self, stream: Stream) -> int:
        return self._attributes[stream]

    def write_raw(self, stream: Stream, text: str, newline: bool = True) -> None:
        self.writes.append((stream, text + ("\n" if newline else ""), self._attributes[stream]))
        self.flushes += 1

    def allocate_terminal(self) -> None:
        if not self.allocatable:
            raise OSError("no terminal available")
        self.allocated = True

    def output(self, stream: Stream) -> str:
        """Everything written to a stream, concatenated."""
        return "".join(text for target, text, _ in self.writes if target is stream)
