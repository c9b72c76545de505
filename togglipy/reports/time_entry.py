"""TimeEntry class for representing Toggl time entries."""
from datetime import date
from typing import Optional, Dict, Any, List
from ..utils.date_utils import extract_date
from ..utils.format_utils import format_hm


class TimeEntry:
    """Class representing a Toggl time entry."""

    def __init__(self, entry_data: Dict[str, Any]):
        """Initialize a TimeEntry.

        Args:
            entry_data: Raw entry data from the Toggl API
        """
        self.raw_data = entry_data
        self.id = entry_data.get("id")
        self.project_id = entry_data.get("project_id")
        self.description = entry_data.get("description")
        self.tags: List[str] = entry_data.get("tags") or []
        self.start: str = entry_data["start"]
        self.stop: Optional[str] = entry_data.get("stop")
        self.duration: int = entry_data.get("duration", 0)

    @classmethod
    def from_raw(cls, entries: List[Dict[str, Any]]) -> List["TimeEntry"]:
        """Wrap raw API entries, sorted by start time."""
        return [cls(e) for e in sorted(entries, key=lambda x: x["start"])]

    @property
    def is_running(self) -> bool:
        """Toggl reports running timers with a negative duration."""
        return self.duration < 0

    @property
    def date(self) -> date:
        """Local calendar date of the start time."""
        return extract_date(self.start)

    @property
    def duration_hm(self) -> str:
        """Get formatted duration.

        Returns:
            Formatted duration (HH:MM), empty for running entries
        """
        return "" if self.is_running else format_hm(self.duration)

    def __repr__(self) -> str:
        return f"TimeEntry(project_id={self.project_id!r}, start={self.start!r}, duration={self.duration!r})"
