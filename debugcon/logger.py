"""
The console logger: colorized, optionally timestamped lines on stdout/stderr.

ConsoleLogger offers four ways to write a line:

    print(fmt, *args)    stdout, no prefix
    success(fmt, *args)  stdout, "[+] " in bright green
    info(fmt, *args)     stdout, "[*] " in bright cyan
    error(fmt, *args)    stderr, "[-] " in bright red

Every call goes through the same sequence:
  1. Format the body with str.format. A template/argument mismatch raises
     LogFormatError before anything is written.
  2. Take the terminal's lock. There is one lock for both streams because both
     usually end up on the same terminal, and a stderr line landing in the
     middle of a stdout line is just as unreadable as two stdout lines mixing.
     The lock belongs to the terminal, not the logger, so several loggers on
     one terminal (or on the default consoles) still write whole lines.
  3. Write "[HH:MM:SS.mmm] " if timestamps are on.
  4. For prefixed calls: switch to the prefix color, write the prefix, switch
     back to the stream's default color.
  5. Write the body and a newline. The terminal flushes on every write, so the
     line is visible to readers of the stream as soon as the call returns.

Default colors are captured once, in __init__, before anything is colored.
Streams that can't be colored (redirected to a file or pipe) get the neutral
attribute as their default and are never sent set_attribute calls.

Getting a logger:
  Most code should accept a ConsoleLogger as a parameter. At the process
  boundary, ConsoleLogger.instance() (or get_logger()) returns the lazily
  created process-wide logger built from debugcon.config.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from .attributes import ERROR_ATTRIBUTE, INFO_ATTRIBUTE, NEUTRAL_ATTRIBUTE, SUCCESS_ATTRIBUTE
from .config import FORCE_CONSOLE_ALLOCATION, TIMESTAMPS_ENABLED
from .errors import ConsoleAllocationError, LogFormatError
from .terminal import RichTerminal, Stream, Terminal

SUCCESS_PREFIX = "[+] "
INFO_PREFIX = "[*] "
ERROR_PREFIX = "[-] "


@dataclass(frozen=True)
class LogRecord:
    """One line on its way to a stream."""

    stream: Stream
    body: str
    prefix: str | None = None
    prefix_attribute: int | None = None
    newline: bool = True


def make_timestamp(now: datetime | None = None) -> str:
    """Render local wall-clock time as HH:MM:SS.mmm"""
    now = now or datetime.now()
    return f"{now:%H:%M:%S}.{now.microsecond // 1000:03d}"


def format_message(fmt: str, *args: Any, **kwargs: Any) -> str:
    """Format a message template, raising LogFormatError on mismatch."""
    try:
        return fmt.format(*args, **kwargs)
    except (IndexError, KeyError, ValueError, AttributeError, TypeError) as e:
        raise LogFormatError(f"Could not format log message {fmt!r}: {e}") from e


class ConsoleLogger:
    """Thread-safe colorized logger writing to stdout and stderr."""

    _instance: ClassVar[ConsoleLogger | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        terminal: Terminal | None = None,
        *,
        force_console_allocation: bool = False,
        timestamps: bool = False,
    ):
        """Build a logger on `terminal` (a RichTerminal on the default consoles if None).

        Timestamps are off unless asked for, matching the DEBUGCON_TIMESTAMPS
        default that instance() reads.
        """
        self._terminal: Terminal = terminal if terminal is not None else RichTerminal()
        self._timestamps = timestamps
        self._lock = self._terminal.lock

        if force_console_allocation:
            try:
                self._terminal.allocate_terminal()
            except OSError as e:
                raise ConsoleAllocationError(f"Could not allocate a console: {e}") from e

        self._defaults: dict[Stream, int] = {}
        self._colors: dict[Stream, bool] = {}
        for stream in Stream:
            attribute = self._terminal.get_default_attribute(stream)
            self._colors[stream] = attribute is not None
            self._defaults[stream] = NEUTRAL_ATTRIBUTE if attribute is None else attribute

    @classmethod
    def instance(cls) -> ConsoleLogger:
        """Return the process-wide logger, creating it on first use.

        Concurrent first calls are serialized on a class-level lock and
        re-check under it, so exactly one logger is ever built. If building it
        fails (ConsoleAllocationError), nothing is stored and the next call
        tries again.
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls(
                        RichTerminal(),
                        force_console_allocation=FORCE_CONSOLE_ALLOCATION,
                        timestamps=TIMESTAMPS_ENABLED,
                    )
        return cls._instance

    @property
    def terminal(self) -> Terminal:
        return self._terminal

    @property
    def timestamps(self) -> bool:
        return self._timestamps

    def default_attribute(self, stream: Stream) -> int:
        """The attribute captured for a stream when the logger was created."""
        return self._defaults[stream]

    def colors_enabled(self, stream: Stream) -> bool:
        return self._colors[stream]

    def print(self, fmt: str, *args: Any, **kwargs: Any) -> None:
        """Write a plain line to stdout."""
        self._emit(LogRecord(Stream.OUT, format_message(fmt, *args, **kwargs)))

    def success(self, fmt: str, *args: Any, **kwargs: Any) -> None:
        """Write a "[+] " line to stdout."""
        body = format_message(fmt, *args, **kwargs)
        self._emit(LogRecord(Stream.OUT, body, SUCCESS_PREFIX, SUCCESS_ATTRIBUTE))

    def info(self, fmt: str, *args: Any, **kwargs: Any) -> None:
        """Write a "[*] " line to stdout."""
        body = format_message(fmt, *args, **kwargs)
        self._emit(LogRecord(Stream.OUT, body, INFO_PREFIX, INFO_ATTRIBUTE))

    def error(self, fmt: str, *args: Any, **kwargs: Any) -> None:
        """Write a "[-] " line to stderr."""
        body = format_message(fmt, *args, **kwargs)
        self._emit(LogRecord(Stream.ERR, body, ERROR_PREFIX, ERROR_ATTRIBUTE))

    def _emit(self, record: LogRecord) -> None:
        terminal = self._terminal
        stream = record.stream
        with self._lock:
            if self._timestamps:
                terminal.write_raw(stream, f"[{make_timestamp()}] ", newline=False)

            if record.prefix is not None:
                colored = self._colors[stream] and record.prefix_attribute is not None
                if colored:
                    terminal.set_attribute(stream, record.prefix_attribute)
                try:
                    terminal.write_raw(stream, record.prefix, newline=False)
                finally:
                    if colored:
                        terminal.set_attribute(stream, self._defaults[stream])

            terminal.write_raw(stream, record.body, newline=record.newline)


def get_logger() -> ConsoleLogger:
    """Return the process-wide ConsoleLogger."""
    return ConsoleLogger.instance()
