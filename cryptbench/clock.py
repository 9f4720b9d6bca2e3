"""Wall-clock time of day with millisecond resolution."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TimeOfDay:
    """A local time of day: hours, minutes, seconds and milliseconds."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self) -> None:
        limits = (
            ("hours", self.hours, 23),
            ("minutes", self.minutes, 59),
            ("seconds", self.seconds, 60),
            ("milliseconds", self.milliseconds, 999),
        )
        for name, value, upper in limits:
            if not 0 <= value <= upper:
                raise ValueError(f"{name} must be between 0 and {upper}, got {value}")

    @classmethod
    def now(cls) -> "TimeOfDay":
        """Capture the current local time."""
        moment = datetime.now()
        return cls(
            moment.hour,
            moment.minute,
            moment.second,
            moment.microsecond // 1000,
        )

    def to_text(self) -> str:
        """Format as HH:MM:SS:mmm."""
        return (
            f"{self.hours:02d}:{self.minutes:02d}:"
            f"{self.seconds:02d}:{self.milliseconds:03d}"
        )

    def total_seconds(self) -> float:
        """Seconds elapsed since midnight."""
        return (
            self.hours * 3600.0
            + self.minutes * 60.0
            + self.seconds
            + self.milliseconds / 1000.0
        )