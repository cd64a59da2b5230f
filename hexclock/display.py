"""
In-place refreshing display for the hex clock
Each second the line is rewritten, followed by a carriage return so the
next refresh overwrites it.
"""

import sys
import time
from typing import Callable, Iterable, Optional, TextIO

from colorama.ansi import CSI

from .clock import next_rollover
from .encoders import RenderMode, render
from .segments import Scheme, segments

HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"


def render_line(timestamp: int, mode: RenderMode, rollover: bool = False) -> str:
    """Render a timestamp as one display line."""
    line = render(mode, segments(timestamp, Scheme.FOUR_TONE))
    if not rollover:
        return line
    countdown = render(mode, segments(next_rollover(timestamp), Scheme.TWO_TONE))
    separator = " | " if mode is RenderMode.PLAIN else "| "
    return line + separator + countdown


class ClockDisplay:
    """Writes clock lines to a text sink, one per distinct second."""

    def __init__(self, mode: RenderMode, sink: Optional[TextIO] = None, interval: float = 1.0,
                 rollover: bool = False, sleep: Callable[[float], None] = time.sleep):
        self.mode = mode
        self.sink = sink if sink is not None else sys.stdout
        self.interval = interval
        self.rollover = rollover
        self.sleep = sleep
        self.cursor_hidden = False

    def hide_cursor(self):
        """Hide the terminal cursor; only the first call writes anything."""
        if not self.cursor_hidden:
            self.sink.write(HIDE_CURSOR)
            self.cursor_hidden = True

    def restore(self):
        """Show the cursor again if we hid it."""
        if self.cursor_hidden:
            self.sink.write(SHOW_CURSOR)
            self.sink.flush()
            self.cursor_hidden = False

    def show(self, timestamp: int):
        """Write one refresh and return the cursor to the line start."""
        self.sink.write(render_line(timestamp, self.mode, self.rollover))
        if self.mode is RenderMode.ANSI:
            self.hide_cursor()
        self.sink.flush()
        self.sink.write("\r")

    def run(self, clock: Iterable[int]):
        """Render every timestamp the clock yields. Never returns on its own."""
        for timestamp in clock:
            self.show(timestamp)
            self.sleep(self.interval)
