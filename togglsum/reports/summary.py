"""Summing up selected time entries and rendering what they are worth."""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence
from tabulate import tabulate

from .time_entry import TimeEntry
from ..utils.format_utils import Duration, encode_duration, format_seconds, format_clock

RATE_PER_HOUR = Decimal("26")
CURRENCY_SYMBOL = "€"
CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Summary:
    """Total duration of a set of selected entries."""

    total: Duration = Duration()
    count: int = 0
    skipped_running: int = 0

    @property
    def total_sec(self) -> int:
        return encode_duration(self.total)


def fold_entries(entries: Sequence[TimeEntry]) -> Summary:
    """Add up the durations of the given entries.

    Running entries carry a negative placeholder instead of an elapsed time,
    so they count as zero and are reported in ``skipped_running``.

    Args:
        entries: Selected time entries

    Returns:
        Summary of the entries
    """
    total = Duration()
    count = 0
    skipped = 0
    for entry in entries:
        count += 1
        if entry.is_running:
            skipped += 1
            continue
        total += entry.duration
    return Summary(total, count, skipped)


def money_for(total_sec: int, rate_per_hour: Decimal = RATE_PER_HOUR) -> Decimal:
    """Get the value of a duration, counting full hours and minutes only.

    Args:
        total_sec: Duration in seconds
        rate_per_hour: Currency units per hour

    Returns:
        Amount rounded to cents (negative for negative durations)
    """
    rate = Decimal(rate_per_hour)
    hours, minutes, _ = Duration(total_sec).split()
    money = hours * rate + rate / 60 * minutes
    if total_sec < 0:
        money = -money
    return money.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_summary(summary: Summary, rate_per_hour: Decimal = RATE_PER_HOUR,
                   currency: str = CURRENCY_SYMBOL) -> str:
    """Render the summary line.

    Args:
        summary: Summary to render
        rate_per_hour: Currency units per hour
        currency: Currency symbol appended to the amount

    Returns:
        "Total time: HH:MM:SS which is worth X.XX€"
    """
    total_sec = summary.total_sec
    money = money_for(total_sec, rate_per_hour)
    return f"Total time: {format_seconds(total_sec)} which is worth {money:.2f}{currency}"


def selection_table(entries: Sequence[TimeEntry]) -> str:
    """Render the selected entries as a table.

    Args:
        entries: Selected time entries

    Returns:
        Table text with date, duration and description columns
    """
    rows = [
        [i, entry.start_date, format_clock(entry.duration_sec), entry.description or ""]
        for i, entry in enumerate(entries, start=1)
    ]
    return tabulate(rows, headers=["#", "Date", "Duration", "Description"], tablefmt="github")
