"""Report generation modules for togglipy."""

from .time_entry import TimeEntry
from .aggregator import (
    ProjectDaySummary, DaySummary, DayEntry, ProjectSummary, NoProject,
    aggregate_time_entries, organize_by_day, organize_by_project
)
from .report_generator import ReportGenerator

__all__ = [
    'TimeEntry', 'ProjectDaySummary', 'DaySummary', 'DayEntry', 'ProjectSummary', 'NoProject',
    'aggregate_time_entries', 'organize_by_day', 'organize_by_project', 'ReportGenerator'
]
