"""Text progress display with a rolling download rate."""

from __future__ import annotations

import enum
import math
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, TextIO

_BAR_WIDTH = 20


class Outcome(enum.IntEnum):
    """How a transfer ended."""

    ABORTED = 0
    INCOMPLETE = 1
    DONE = 2


def progress_bar(chars: int, percent: float) -> str:
    """Return the bar line: *chars* of 20 filled, then the percentage."""
    filled = max(0, min(int(chars), _BAR_WIDTH))
    bar = "#" * filled + "-" * (_BAR_WIDTH - filled)
    return f"\r{bar} {percent:.1f}%"


def _now() -> int:
    return int(time.time())


@dataclass
class Progress:
    """Progress display that redraws at most once per second."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)
    clock: Callable[[], int] = _now
    start_time: int = 0
    last_time: int = 0
    last_percent: float = 0.0
    last_downloaded: int = 0

    def update(self, percent: float, downloaded: int) -> None:
        """Record *percent* done and *downloaded* bytes, redrawing if time passed."""
        now = self.clock()
        if now == self.last_time:
            return
        passed = now - self.last_time if self.last_time else 0
        if not self.last_time:
            self.start_time = now
        self.last_time = now

        parts = [progress_bar(int(percent * (_BAR_WIDTH / 100.0)), percent)]

        if passed:
            rate = float(downloaded - self.last_downloaded)
            step = percent - self.last_percent
            seconds_left = self._seconds_left(percent, step)
            if passed != 1:
                rate /= passed
                if seconds_left is not None:
                    seconds_left *= passed
            parts.append(f" {rate / 1000.0:.1f} kBps ")
            if seconds_left is not None and seconds_left < 60 * 1000:
                minutes = int(seconds_left / 60)
                seconds = seconds_left - minutes * 60
                parts.append(f"{minutes}:{seconds:02d} ETA  ")
            else:
                parts.append("        \n")

        self.last_downloaded = downloaded
        self.last_percent = percent
        self.stream.write("".join(parts))
        self.stream.flush()

    @staticmethod
    def _seconds_left(percent: float, step: float) -> int | None:
        if step == 0:
            return None
        estimate = (100.0 - percent) / step
        if not math.isfinite(estimate):
            return None
        return int(estimate)

    def end(self, outcome: Outcome) -> None:
        """Draw the final line for a transfer that ended with *outcome*."""
        outcome = Outcome(outcome)
        if outcome is Outcome.DONE:
            line = progress_bar(_BAR_WIDTH, 100.0)
        else:
            line = progress_bar(
                int(self.last_percent * (_BAR_WIDTH / 100.0)), self.last_percent
            )
        rate = float(self.last_downloaded) / (self.last_time - self.start_time + 0.5)
        line += f" {rate / 1000.0:.1f} kBps "
        if outcome is Outcome.DONE:
            line += "DONE    \n\n"
        elif outcome is Outcome.ABORTED:
            line += "aborted    \n\n"
        else:
            line += "        \n\n"
        self.stream.write(line)
        self.stream.flush()