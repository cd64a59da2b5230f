#!/usr/bin/env python3
"""
Hex Clock
Shows the current Unix time as colored hexadecimal bytes, refreshed in place.

Usage: hexclock {xmobar,term,color} [--interval SECONDS] [--once] [--rollover]

Modes:
- xmobar: <fc=#RRGGBB>HH</fc> markup for a status bar
- term:   plain hex for monochrome terminals
- color:  ANSI colored hex
"""

import argparse
import signal
import sys
import time
from typing import List, Optional, TextIO

import colorama
from rich.console import Console

from .clock import ClockSkew, SecondsClock, TimestampOverflow, epoch_seconds
from .display import ClockDisplay, render_line
from .encoders import RenderMode

TIME_TRAVEL_NOTICE = "time-travelling"

console = Console(stderr=True, highlight=False)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="hexclock",
        description="Terminal and status bar clock showing Unix time as hex bytes",
    )
    parser.add_argument("mode", choices=RenderMode.tokens(),
                        help="Output form: xmobar markup, plain term hex or ANSI color")
    parser.add_argument("-i", "--interval", type=float, default=1.0,
                        help="Seconds to sleep between refreshes (default: 1.0)")
    parser.add_argument("--once", action="store_true",
                        help="Print a single line and exit")
    parser.add_argument("--rollover", action="store_true",
                        help="Also show seconds left until the low two bytes wrap")
    return parser


def print_once(mode: RenderMode, rollover: bool = False, stream: Optional[TextIO] = None):
    """Print the current time as one newline-terminated line."""
    stream = stream if stream is not None else sys.stdout
    try:
        timestamp = epoch_seconds(time.time())
    except ClockSkew:
        stream.write(TIME_TRAVEL_NOTICE + "\n")
    else:
        stream.write(render_line(timestamp, mode, rollover) + "\n")
    stream.flush()


def stop(signum, frame):
    """Treat termination signals like Ctrl+C."""
    raise KeyboardInterrupt


def install_signal_handlers():
    """Route SIGTERM and SIGHUP through the KeyboardInterrupt exit path.

    Returns the previous handlers so they can be put back.
    """
    previous = {}
    for name in ("SIGTERM", "SIGHUP"):
        if hasattr(signal, name):
            signum = getattr(signal, name)
            previous[signum] = signal.signal(signum, stop)
    return previous


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the hex clock"""
    args = build_parser().parse_args(argv)
    if args.interval < 0:
        console.print("[red]Error: --interval must not be negative[/red]")
        return 2

    mode = RenderMode(args.mode)
    if mode is RenderMode.ANSI:
        # Windows console fix only; escape codes reach pipes untouched
        colorama.just_fix_windows_console()

    display = ClockDisplay(mode, interval=args.interval, rollover=args.rollover)
    previous = {}
    try:
        if args.once:
            print_once(mode, args.rollover)
        else:
            previous = install_signal_handlers()
            display.run(SecondsClock())
    except KeyboardInterrupt:
        display.restore()
        return 0
    except TimestampOverflow as e:
        display.restore()
        console.print(f"[red]Error: time overflowed: {e}[/red]")
        return 1
    except OSError as e:
        console.print(f"[red]Error: cannot write output: {e}[/red]")
        return 1
    finally:
        for signum, handler in previous.items():
            if handler is not None:
                signal.signal(signum, handler)
    return 0


if __name__ == "__main__":
    sys.exit(main())
