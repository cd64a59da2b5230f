"""
Clock source producing distinct whole-second 32-bit timestamps
"""

import time
from typing import Callable, Iterator, Optional

MAX_TIMESTAMP = 0xFFFFFFFF
ROLLOVER_PERIOD = 0x10000


class ClockSkew(Exception):
    """Wall clock reads a time before the epoch."""


class TimestampOverflow(Exception):
    """Seconds since the epoch no longer fit in 32 bits."""


def epoch_seconds(now: float) -> int:
    """Convert a wall clock reading into a 32-bit timestamp."""
    if now < 0:
        raise ClockSkew(f"clock reads {now:.3f}s before the epoch")
    seconds = int(now)
    if seconds > MAX_TIMESTAMP:
        raise TimestampOverflow(f"{seconds} does not fit in 32 bits")
    return seconds


def next_rollover(timestamp: int) -> int:
    """Seconds left until the low two bytes of the timestamp wrap to zero."""
    return ROLLOVER_PERIOD - (timestamp % ROLLOVER_PERIOD)


class SecondsClock:
    """Iterates over wall clock seconds, skipping repeats.

    A reading before the epoch is skipped and the clock polls again.
    TimestampOverflow is never caught here.
    """

    def __init__(self, source: Callable[[], float] = time.time,
                 poll_interval: float = 0.05,
                 sleep: Callable[[float], None] = time.sleep):
        self.source = source
        self.poll_interval = poll_interval
        self.sleep = sleep
        self.last: Optional[int] = None

    def poll(self) -> Optional[int]:
        """Read the clock once; None if the reading is skewed or not newer."""
        try:
            seconds = epoch_seconds(self.source())
        except ClockSkew:
            return None
        if self.last is not None and seconds <= self.last:
            return None
        self.last = seconds
        return seconds

    def __iter__(self) -> Iterator[int]:
        while True:
            seconds = self.poll()
            if seconds is None:
                self.sleep(self.poll_interval)
                continue
            yield seconds
