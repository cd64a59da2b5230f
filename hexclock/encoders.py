"""
Output encodings for colored byte segments

xmobar -> <fc=#RRGGBB>HH</fc> markup tags
term   -> plain uppercase hex
color  -> ANSI colored hex via colorama
"""

from enum import Enum
from typing import Iterable, Tuple

from colorama import Style

from .palette import Color, ansi_foreground, hex_rgb


class RenderMode(Enum):
    MARKUP = "xmobar"
    PLAIN = "term"
    ANSI = "color"

    @classmethod
    def tokens(cls):
        """Command line tokens, in declaration order."""
        return [mode.value for mode in cls]


def hex2(value: int) -> str:
    """Two uppercase hex digits, zero padded."""
    return f"{value:02X}"


def markup_tag(color: Color, text: str) -> str:
    """Wrap text in a status bar <fc> color tag."""
    return f"<fc=#{hex_rgb(color)}>{text}</fc>"


def ansi_text(color: Color, text: str) -> str:
    """Color text for a terminal, resetting afterwards."""
    return ansi_foreground(color) + text + Style.RESET_ALL


def encode(mode: RenderMode, color: Color, value: int) -> str:
    """Render a single (color, byte) pair."""
    if mode is RenderMode.MARKUP:
        return markup_tag(color, hex2(value))
    if mode is RenderMode.PLAIN:
        return hex2(value)
    return ansi_text(color, hex2(value) + " ")


def render(mode: RenderMode, pairs: Iterable[Tuple[Color, int]]) -> str:
    """Render a full line of (color, byte) pairs."""
    pairs = list(pairs)
    if mode is RenderMode.PLAIN:
        return " ".join(encode(mode, color, value) for color, value in pairs)
    if mode is RenderMode.MARKUP:
        return "".join(encode(mode, color, value) + " " for color, value in pairs)
    # ANSI pairs carry their own trailing space inside the color span
    return "".join(encode(mode, color, value) for color, value in pairs)
