"""Utility modules for togglipy."""

from .date_utils import (
    DateRange, extract_date, get_dates_in_range, get_day_name, get_day_names,
    get_named_range, to_swiss_format, day_str
)
from .format_utils import round_hours, seconds_to_hours, format_hours, format_hm, hours_to_hm, table_cell
from .file_utils import write_csv, write_markdown, write_html, render_html

__all__ = [
    'DateRange', 'extract_date', 'get_dates_in_range', 'get_day_name', 'get_day_names',
    'get_named_range', 'to_swiss_format', 'day_str',
    'round_hours', 'seconds_to_hours', 'format_hours', 'format_hm', 'hours_to_hm', 'table_cell',
    'write_csv', 'write_markdown', 'write_html', 'render_html'
]
