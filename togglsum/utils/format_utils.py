"""Formatting utility functions for togglsum."""
from dataclasses import dataclass

SECONDS_PER_DAY = 24 * 3600


@dataclass(frozen=True, order=True)
class Duration:
    """A signed span of time in whole seconds."""

    seconds: int = 0

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds + other.seconds)

    @property
    def is_negative(self) -> bool:
        return self.seconds < 0

    def split(self) -> (int, int, int):
        """Split the absolute span into hours, minutes and seconds."""
        return split_seconds(abs(self.seconds))


def decode_duration(raw: int) -> Duration:
    """Turn a Toggl duration (signed whole seconds) into a Duration.

    Args:
        raw: Number of seconds, negative for entries that are still running

    Returns:
        Duration of exactly ``raw`` seconds
    """
    return Duration(int(raw))


def encode_duration(duration: Duration) -> int:
    """Turn a Duration back into signed whole seconds.

    Args:
        duration: Duration to convert

    Returns:
        Number of whole seconds
    """
    return duration.seconds


def split_seconds(seconds: int) -> (int, int, int):
    """Split a non-negative number of seconds into hours, minutes and seconds.

    Args:
        seconds: Number of seconds

    Returns:
        Tuple of (hours, minutes, seconds)
    """
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return hours, minutes, (seconds % 3600) % 60


def format_seconds(seconds: int) -> str:
    """Format seconds as HH:MM:SS.

    Args:
        seconds: Number of seconds (can be negative)

    Returns:
        Formatted time string (with leading '-' if negative)
    """
    sign = "-" if seconds < 0 else ""
    h, m, s = split_seconds(abs(seconds))
    return f"{sign}{h:02}:{m:02}:{s:02}"


def format_clock(seconds: int) -> str:
    """Format seconds as a time of day, wrapping at 24 hours.

    Args:
        seconds: Number of seconds, negative values are not a valid span

    Returns:
        Formatted time string (HH:MM:SS), or '--:--:--' for negative input
    """
    if seconds < 0:
        return "--:--:--"
    return format_seconds(seconds % SECONDS_PER_DAY)
