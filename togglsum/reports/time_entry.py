"""TimeEntry class for representing Toggl time entries."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any

from ..errors import EntryDecodeError
from ..utils.date_utils import iso_date, parse_timestamp
from ..utils.format_utils import Duration, decode_duration, encode_duration, format_clock

NO_DESCRIPTION = "no description"


@dataclass(frozen=True)
class TimeEntry:
    """A single time entry as returned by the Toggl API."""

    start: datetime
    duration: Duration
    description: Optional[str]
    project_id: Optional[int]
    stop: Optional[datetime]
    id: int

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TimeEntry":
        """Build a TimeEntry from one element of the time entries response.

        Args:
            data: Raw entry data from the Toggl API

        Returns:
            The decoded entry

        Raises:
            EntryDecodeError: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise EntryDecodeError(f"Expected a time entry object, got {type(data).__name__}")

        entry_id = data.get("id")
        if not _is_int(entry_id):
            raise EntryDecodeError(f"Time entry has no valid id: {entry_id!r}")

        raw_duration = data.get("duration")
        if not _is_int(raw_duration):
            raise EntryDecodeError(f"Time entry {entry_id}: duration must be an integer, got {raw_duration!r}")
        duration = decode_duration(raw_duration)

        project_id = data.get("project_id")
        if project_id is not None and not _is_int(project_id):
            raise EntryDecodeError(f"Time entry {entry_id}: project_id must be an integer, got {project_id!r}")

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise EntryDecodeError(f"Time entry {entry_id}: description must be a string")

        start = _timestamp(data.get("start"), "start", entry_id)
        stop = _timestamp(data["stop"], "stop", entry_id) if data.get("stop") is not None else None

        return cls(start=start, duration=duration, description=description,
                   project_id=project_id, stop=stop, id=entry_id)

    @property
    def duration_sec(self) -> int:
        """Duration in whole seconds (negative while running)."""
        return encode_duration(self.duration)

    @property
    def is_running(self) -> bool:
        return self.duration.is_negative

    @property
    def start_date(self) -> str:
        return iso_date(self.start)

    def display(self) -> str:
        """Get the label used for this entry in the selection list.

        Returns:
            "YYYY-MM-DD: HH:MM:SS - description"
        """
        description = NO_DESCRIPTION if self.description is None else self.description
        return f"{self.start_date}: {format_clock(self.duration_sec)} - {description}"

    def __str__(self) -> str:
        return self.display()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _timestamp(value: Any, field: str, entry_id: Any) -> datetime:
    if not isinstance(value, str):
        raise EntryDecodeError(f"Time entry {entry_id}: {field} must be a timestamp string, got {value!r}")
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise EntryDecodeError(f"Time entry {entry_id}: invalid {field} timestamp {value!r}: {e}")
