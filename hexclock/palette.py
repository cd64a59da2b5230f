"""
Fixed color palette for the hex clock
Each color carries a 24-bit RGB value for status-bar markup and an ANSI
foreground approximation for terminals.
"""

from enum import Enum

from colorama import Fore


class Color(Enum):
    GRAY = "gray"
    LIGHT_GRAY = "light_gray"
    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"
    CYAN = "cyan"


RGB = {
    Color.GRAY: 0x999999,
    Color.LIGHT_GRAY: 0xCCCCCC,
    Color.RED: 0xFF0000,
    Color.YELLOW: 0xFF00FF,
    Color.BLUE: 0x0000FF,
    Color.GREEN: 0x00FF00,
    Color.CYAN: 0x00FFFF,
}

# Closest ANSI foreground for each palette entry
ANSI_FOREGROUND = {
    Color.GRAY: Fore.LIGHTBLACK_EX,
    Color.LIGHT_GRAY: Fore.WHITE,
    Color.RED: Fore.RED,
    Color.YELLOW: Fore.YELLOW,
    Color.BLUE: Fore.BLUE,
    Color.GREEN: Fore.GREEN,
    Color.CYAN: Fore.CYAN,
}


def hex_rgb(color: Color) -> str:
    """Return the color as exactly six lowercase hex digits, e.g. '999999'."""
    return f"{RGB[color]:06x}"


def ansi_foreground(color: Color) -> str:
    """Return the colorama foreground code closest to the color."""
    return ANSI_FOREGROUND[color]
