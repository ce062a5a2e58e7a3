"""debugcon - Thread-safe colorized console logger for stdout and stderr"""

from .attributes import (
    ERROR_ATTRIBUTE,
    FOREGROUND_BLUE,
    FOREGROUND_GREEN,
    FOREGROUND_INTENSITY,
    FOREGROUND_RED,
    INFO_ATTRIBUTE,
    NEUTRAL_ATTRIBUTE,
    SUCCESS_ATTRIBUTE,
    attribute_style,
    foreground,
)
from .config import (
    CONFIG_FILE,
    DEBUGCON_DIR,
    DEFAULT_CONFIG,
    FORCE_CONSOLE_ALLOCATION,
    TIMESTAMPS_ENABLED,
    get_bool_setting,
    get_setting,
    load_config,
)
from .console import console, create_console, error_console
from .errors import ConsoleAllocationError, DebugConsoleError, LogFormatError
from .logger import (
    ERROR_PREFIX,
    INFO_PREFIX,
    SUCCESS_PREFIX,
    ConsoleLogger,
    LogRecord,
    format_message,
    get_logger,
    make_timestamp,
)
from .terminal import MemoryTerminal, RichTerminal, Stream, Terminal

__all__ = [
    # Attributes
    "ERROR_ATTRIBUTE",
    "FOREGROUND_BLUE",
    "FOREGROUND_GREEN",
    "FOREGROUND_INTENSITY",
    "FOREGROUND_RED",
    "INFO_ATTRIBUTE",
    "NEUTRAL_ATTRIBUTE",
    "SUCCESS_ATTRIBUTE",
    "attribute_style",
    "foreground",
    # Config
    "CONFIG_FILE",
    "DEBUGCON_DIR",
    "DEFAULT_CONFIG",
    "FORCE_CONSOLE_ALLOCATION",
    "TIMESTAMPS_ENABLED",
    "get_bool_setting",
    "get_setting",
    "load_config",
    # Console
    "console",
    "create_console",
    "error_console",
    # Errors
    "ConsoleAllocationError",
    "DebugConsoleError",
    "LogFormatError",
    # Logger
    "ERROR_PREFIX",
    "INFO_PREFIX",
    "SUCCESS_PREFIX",
    "ConsoleLogger",
    "LogRecord",
    "format_message",
    "get_logger",
    "make_timestamp",
    # Terminal
    "MemoryTerminal",
    "RichTerminal",
    "Stream",
    "Terminal",
]
