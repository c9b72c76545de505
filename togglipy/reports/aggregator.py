"""Aggregation of time entries into per-project, per-day summaries.

Entries are grouped by project and calendar day, descriptions are cleaned,
deduplicated and concatenated, durations are summed into rounded hours, and
the flat result is pivoted into a day-first and a project-first view.
"""
import unicodedata
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

from .time_entry import TimeEntry
from ..utils.date_utils import extract_date
from ..utils.format_utils import round_hours, seconds_to_hours

NO_PROJECT_NAME = "No Project"
DESCRIPTION_SEPARATOR = " / \n"


class NoProject(Enum):
    """Grouping key for entries that are not assigned to a project."""
    NO_PROJECT = "no-project"


class ProjectDaySummary(NamedTuple):
    project_id: Optional[int]
    project_name: str
    date: date
    total_hours: float
    descriptions: str


class DaySummary(NamedTuple):
    date: date
    day_name: str
    projects: List[ProjectDaySummary]


class DayEntry(NamedTuple):
    date: date
    day_name: str
    total_hours: float
    descriptions: str


class ProjectSummary(NamedTuple):
    project_id: Optional[int]
    project_name: str
    days: List[DayEntry]
    total_hours: float


GroupKey = Tuple[Union[int, NoProject], date]


def name_sort_key(name: str) -> Tuple[str, str, str]:
    """Order names like a locale compare: base letters, then accents, then lowercase first."""
    base = "".join(c for c in unicodedata.normalize("NFKD", name) if not unicodedata.combining(c))
    return (base.casefold(), name.casefold(), name.swapcase())


def _as_time_entry(entry: Union[TimeEntry, Dict[str, Any]]) -> TimeEntry:
    return entry if isinstance(entry, TimeEntry) else TimeEntry(entry)


def filter_running_entries(entries: Iterable[TimeEntry]) -> List[TimeEntry]:
    """Drop entries whose timer is still running (negative duration)."""
    return [e for e in entries if e.duration >= 0]


def group_by_project_and_day(entries: Iterable[TimeEntry],
                             date_of: Callable[[str], date] = extract_date) -> Dict[GroupKey, List[TimeEntry]]:
    """Group entries by (project, calendar date).

    Args:
        entries: Entries that already passed filter_running_entries
        date_of: Resolves an entry's start timestamp to its local date

    Returns:
        Insertion-ordered dict of (project_id or NoProject.NO_PROJECT, date) -> entries
    """
    grouped: Dict[GroupKey, List[TimeEntry]] = {}
    for entry in entries:
        project_key = entry.project_id if entry.project_id is not None else NoProject.NO_PROJECT
        key = (project_key, date_of(entry.start))
        grouped.setdefault(key, []).append(entry)
    return grouped


def process_descriptions(entries: Iterable[TimeEntry]) -> str:
    """Join the distinct, non-blank descriptions of a group in first-seen order."""
    descriptions: List[str] = []
    for entry in entries:
        desc = entry.description
        if desc is None or not desc.strip():
            continue
        if desc not in descriptions:
            descriptions.append(desc)
    return DESCRIPTION_SEPARATOR.join(descriptions)


def calculate_total_hours(entries: Iterable[TimeEntry]) -> float:
    """Sum the durations of a group in hours, rounded once to 2 decimals."""
    total_seconds = sum(Decimal(str(e.duration)) for e in entries)
    return seconds_to_hours(total_seconds)


def resolve_project_name(project_id: Optional[int], projects_by_id: Mapping[Any, Any]) -> str:
    """Look up a project's name, falling back to NO_PROJECT_NAME."""
    if project_id is None or project_id not in projects_by_id:
        return NO_PROJECT_NAME
    project = projects_by_id[project_id]
    if isinstance(project, Mapping):
        return project.get("name") or NO_PROJECT_NAME
    return getattr(project, "name", None) or NO_PROJECT_NAME


def aggregate_time_entries(entries: Iterable[Union[TimeEntry, Dict[str, Any]]],
                           projects_by_id: Mapping[Any, Any],
                           date_of: Callable[[str], date] = extract_date) -> List[ProjectDaySummary]:
    """Aggregate time entries into one summary per project and day.

    Args:
        entries: TimeEntry objects or raw Toggl entry dicts
        projects_by_id: Project ID -> project (dict with "name" or object with .name)
        date_of: Resolves an entry's start timestamp to its local date

    Returns:
        Unordered list of ProjectDaySummary
    """
    time_entries = filter_running_entries(_as_time_entry(e) for e in entries)
    summaries = []
    for (project_key, day), group in group_by_project_and_day(time_entries, date_of).items():
        project_id = None if project_key is NoProject.NO_PROJECT else project_key
        summaries.append(ProjectDaySummary(
            project_id=project_id,
            project_name=resolve_project_name(project_id, projects_by_id),
            date=day,
            total_hours=calculate_total_hours(group),
            descriptions=process_descriptions(group),
        ))
    return summaries


def organize_by_day(summaries: Iterable[ProjectDaySummary], all_dates: Iterable[date],
                    day_names: Mapping[date, str]) -> List[DaySummary]:
    """Pivot summaries by day.

    Every date in all_dates gets a DaySummary, in the given order, even when no
    summary falls on it. Projects within a day are sorted by name.
    """
    summaries = list(summaries)
    day_summaries = []
    for day in all_dates:
        projects = sorted((s for s in summaries if s.date == day),
                          key=lambda s: name_sort_key(s.project_name) + (str(s.project_id),))
        day_summaries.append(DaySummary(date=day, day_name=day_names.get(day) or "", projects=projects))
    return day_summaries


def organize_by_project(summaries: Iterable[ProjectDaySummary], all_dates: Iterable[date],
                        day_names: Mapping[date, str]) -> List[ProjectSummary]:
    """Pivot summaries by project.

    Only projects present in summaries are listed; days without activity for a
    project are not filled in. Entries without a project all merge into one
    summary. The project total re-rounds the sum of the rounded day totals.
    """
    by_project: Dict[Tuple[Optional[int], str], List[ProjectDaySummary]] = {}
    for summary in summaries:
        by_project.setdefault((summary.project_id, summary.project_name), []).append(summary)

    project_summaries = []
    for (project_id, project_name), project_days in by_project.items():
        days = [
            DayEntry(date=pd.date, day_name=day_names.get(pd.date) or "",
                     total_hours=pd.total_hours, descriptions=pd.descriptions)
            for pd in sorted(project_days, key=lambda pd: pd.date)
        ]
        total = sum(Decimal(str(d.total_hours)) for d in days)
        project_summaries.append(ProjectSummary(
            project_id=project_id,
            project_name=project_name,
            days=days,
            total_hours=round_hours(Decimal(total)),
        ))

    return sorted(project_summaries, key=lambda p: name_sort_key(p.project_name) + (str(p.project_id),))
