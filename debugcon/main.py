import sys

from rich.markup import escape

from .console import error_console
from .errors import ConsoleAllocationError
from .logger import ConsoleLogger

# Exit status used when no console could be attached, matching what a shell
# reports for a process killed by SIGABRT.
EXIT_NO_CONSOLE = 134
EXIT_UNIMPLEMENTED = 1


def main():
    try:
        logger = ConsoleLogger.instance()
    except ConsoleAllocationError as e:
        error_console.print(f"[bold red]✗ {escape(str(e))}[/bold red]")
        sys.exit(EXIT_NO_CONSOLE)

    logger.success("Allocated console!")

    logger.error("Unimplemented!")
    sys.exit(EXIT_UNIMPLEMENTED)
