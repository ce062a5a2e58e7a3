"""
Display attributes and their mapping onto Rich styles.

A display attribute is a small integer bitmask using the classic console
convention: one bit per color channel plus an intensity bit. The logger only
ever deals in these integers; RichTerminal turns them into Rich `Style`
objects at write time.

    bit 0 (0x1)  blue
    bit 1 (0x2)  green
    bit 2 (0x4)  red
    bit 3 (0x8)  intensity (bright)

ANSI numbers its 16 base colors differently (red=1, green=2, blue=4, +8 for
the bright variants), so `ansi_color_number` does the channel shuffle.
"""

from rich.color import Color
from rich.style import Style

FOREGROUND_BLUE = 0x0001
FOREGROUND_GREEN = 0x0002
FOREGROUND_RED = 0x0004
FOREGROUND_INTENSITY = 0x0008

# Plain (non-bright) white: the fallback when a stream cannot report its own
# default color.
NEUTRAL_ATTRIBUTE = FOREGROUND_RED | FOREGROUND_GREEN | FOREGROUND_BLUE


def foreground(red: bool, green: bool, blue: bool, bright: bool = True) -> int:
    """Compute a foreground attribute from channel flags."""
    value = 0
    if red:
        value |= FOREGROUND_RED
    if green:
        value |= FOREGROUND_GREEN
    if blue:
        value |= FOREGROUND_BLUE
    if bright:
        value |= FOREGROUND_INTENSITY
    return value


def ansi_color_number(attribute: int) -> int:
    """Return the ANSI 16-color number (0-15) for an attribute."""
    number = 0
    if attribute & FOREGROUND_RED:
        number |= 1
    if attribute & FOREGROUND_GREEN:
        number |= 2
    if attribute & FOREGROUND_BLUE:
        number |= 4
    if attribute & FOREGROUND_INTENSITY:
        number += 8
    return number


def attribute_style(attribute: int) -> Style:
    """Map an attribute onto a Rich style with the matching foreground color."""
    return Style(color=Color.from_ansi(ansi_color_number(attribute)))


# Prefix colors used by the logger.
SUCCESS_ATTRIBUTE = foreground(False, True, False)
INFO_ATTRIBUTE = foreground(False, True, True)
ERROR_ATTRIBUTE = foreground(True, False, False)
