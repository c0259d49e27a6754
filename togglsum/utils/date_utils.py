"""Date utility functions for togglsum."""
from datetime import datetime, date, timezone, timedelta
from typing import Optional

WINDOW_DAYS = 89


def iso_date(dt: date) -> str:
    """Format a date or datetime as YYYY-MM-DD.

    Args:
        dt: Date to format

    Returns:
        ISO calendar date string
    """
    return dt.strftime("%Y-%m-%d")


def fetch_window(now: Optional[datetime] = None, days: int = WINDOW_DAYS) -> (datetime, datetime):
    """Get the window of time entries to fetch.

    Args:
        now: Reference time (defaults to the current UTC time)
        days: Number of days to look back

    Returns:
        Tuple of (start, end)
    """
    end = now or datetime.now(timezone.utc)
    return end - timedelta(days=days), end


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp from the API into an aware UTC datetime.

    Args:
        value: Timestamp string (e.g. "2024-01-15T08:00:00Z" or "...+00:00")

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValueError: If the string is not a valid timestamp
    """
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
