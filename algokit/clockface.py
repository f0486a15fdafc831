"""Big block-digit clock and dial reading."""

from __future__ import annotations

import argparse
import time
from datetime import datetime

DIGIT_PATTERNS = (
    " ### #   ##   ##   # ### ",
    "  #   ##    #    #    #  ",
    "#####    #######    #####",
    "#####    #  ###    ######",
    "#    # #  #####  #    #  ",
    "######    #####    ######",
    "######    ######   ######",
    "#####   #    #   #    #  ",
    "######   #######   ######",
    "######   ######    ######",
)
"""5x5 glyphs for the digits 0-9, row by row."""

COLON_PATTERN = "       #         #       "

_WIDTH = 5
_HEIGHT = 5
_CLEAR = "\033[2J\033[H"


def _row(pattern: str, row: int) -> str:
    return pattern[row * _WIDTH : (row + 1) * _WIDTH]


def render_time(hour: int, minute: int, second: int) -> str:
    """The time as five lines of block digits, HH:MM:SS."""
    if not 0 <= hour <= 23:
        raise ValueError(f"hour out of range: {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"minute out of range: {minute}")
    if not 0 <= second <= 60:
        raise ValueError(f"second out of range: {second}")
    pairs = [divmod(hour, 10), divmod(minute, 10), divmod(second, 10)]
    lines = []
    for row in range(_HEIGHT):
        groups = [
            _row(DIGIT_PATTERNS[tens], row) + " " + _row(DIGIT_PATTERNS[units], row)
            for tens, units in pairs
        ]
        lines.append(_row(COLON_PATTERN, row).join(groups))
    return "\n".join(lines)


def format_timestamp(moment: datetime) -> str:
    """'[day month year hour:minute:second]' without zero padding."""
    return (
        f"[{moment.day} {moment.month} {moment.year} "
        f"{moment.hour}:{moment.minute}:{moment.second}]"
    )


def dial_time(phase: int, hour_hand: int, minute_hand: int) -> str:
    """Read a dial: phase 1 is morning, 2 evening; the minute hand counts fives."""
    suffixes = {1: "AM", 2: "PM"}
    if phase not in suffixes:
        raise ValueError(f"invalid phase {phase!r}")
    if not (hour_hand < 13 and minute_hand < 13):
        raise ValueError("hand positions must be below 13")
    return f"{hour_hand}:{5 * minute_hand} {suffixes[phase]}"


def main(argv: list[str] | None = None) -> int:
    """Show the current time in block digits, refreshing every second."""
    parser = argparse.ArgumentParser(description="Block-digit clock.")
    parser.add_argument(
        "--ticks", type=int, default=None, help="stop after this many refreshes"
    )
    args = parser.parse_args(argv)
    shown = 0
    try:
        while args.ticks is None or shown < args.ticks:
            now = datetime.now()
            print(_CLEAR + render_time(now.hour, now.minute, now.second), flush=True)
            time.sleep(1)
            shown += 1
    except KeyboardInterrupt:
        pass
    return 0