"""A stopwatch that records time-of-day marks and reports durations."""

from __future__ import annotations

from collections.abc import Callable
from itertools import pairwise

from .clock import TimeOfDay

ZERO_DURATION = "00:00:00:000"
_SECONDS_PER_DAY = 86400.0


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as HH:MM:SS:mmm.

    A negative duration is taken to have crossed midnight and wraps by one day.
    """
    t = seconds
    if t < 0:
        t += _SECONDS_PER_DAY
    hours = int(t / 3600)
    t -= hours * 3600
    minutes = int(t / 60)
    t -= minutes * 60
    whole = int(t)
    millis = int((t - whole) * 1000)
    return f"{hours:02d}:{minutes:02d}:{whole:02d}:{millis:03d}"


class Timer:
    """Stopwatch keeping a list of time marks, starting with its start time."""

    def __init__(self, clock: Callable[[], TimeOfDay] = TimeOfDay.now) -> None:
        self._clock = clock
        self._start = clock()
        self._end: TimeOfDay | None = None
        self._records: list[TimeOfDay] = [self._start]

    @property
    def stopped(self) -> bool:
        """Whether :meth:`stop` has been called since the last start."""
        return self._end is not None

    def register(self) -> None:
        """Add a mark with the current time."""
        self._records.append(self._clock())

    def stop(self) -> None:
        """Record the end time and add a final mark."""
        self._end = self._clock()
        self.register()

    def reset(self) -> None:
        """Start again from now, discarding all marks."""
        self._start = self._clock()
        self._end = None
        self._records = [self._start]

    def duration_between(self, i: int, j: int) -> str:
        """Formatted duration between marks ``i`` and ``j``; zero if the indexes are invalid."""
        if 0 <= i < j < len(self._records):
            delta = self._records[j].total_seconds() - self._records[i].total_seconds()
            return format_duration(delta)
        return ZERO_DURATION

    def elapsed(self) -> str:
        """Formatted duration from the first mark to the last."""
        return self.duration_between(0, len(self._records) - 1)

    def start_text(self) -> str:
        """Start time as HH:MM:SS:mmm."""
        return self._start.to_text()

    def end_text(self) -> str:
        """End time if stopped, otherwise the current time."""
        if self._end is not None:
            return self._end.to_text()
        return self._clock().to_text()

    def records(self) -> tuple[TimeOfDay, ...]:
        """All marks, oldest first."""
        return tuple(self._records)

    def average_per_process(self) -> str:
        """Average interval between marks, leaving out the final (stop) mark."""
        count = len(self._records)
        if count <= 2:
            return ZERO_DURATION
        total = sum(
            later.total_seconds() - earlier.total_seconds()
            for earlier, later in pairwise(self._records[:-1])
        )
        return format_duration(total / (count - 2))

    def duration_seconds(self) -> float:
        """Seconds from start to end, or to now when still running."""
        end = self._end if self._end is not None else self._clock()
        return end.total_seconds() - self._start.total_seconds()