"""Main module for the togglipy package."""
import os
import sys
import argparse
from datetime import datetime, date
from typing import Optional
import requests
from dotenv import load_dotenv

from .api.client import TogglClient
from .utils.date_utils import (
    DateRange, NAMED_RANGES, get_named_range, get_dates_in_range, get_day_names, day_str, to_swiss_format
)
from .utils.file_utils import write_markdown, write_html
from .reports.time_entry import TimeEntry
from .reports.aggregator import aggregate_time_entries, organize_by_day, organize_by_project
from .reports.report_generator import ReportGenerator, VIEWS

ENV_FILE = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'togglipy.env')


# --- Environment Setup ---
def load_environment():
    """Load environment variables from the togglipy.env file, if there is one."""
    if os.path.exists(ENV_FILE):
        load_dotenv(ENV_FILE)


def get_env_var(key: str, required: bool = True) -> Optional[str]:
    """Get an environment variable or exit if not found.

    Args:
        key: Environment variable name
        required: Exit when the variable is missing

    Returns:
        Environment variable value

    Raises:
        SystemExit: If a required environment variable is not found
    """
    value = os.getenv(key)
    if not value and required:
        print(f"Set {key} in your environment or togglipy.env.")
        sys.exit(1)
    return value


# --- CLI Logic ---
def parse_date(value: str) -> date:
    """argparse type for YYYY-MM-DD dates."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Summarize Toggl Track time entries by project and day.",
        epilog="""
Examples:
    # Show last week grouped by day (default)
  togglipy
    ---
    # Show the current month grouped by project
  togglipy --range current-month --view by-project
    ---
    # Custom range, both views, exported to HTML and CSV files with prefix 'jan'
  togglipy --start 2026-01-01 --end 2026-01-31 --view both --html jan.html --csv jan
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="togglipy"
    )
    parser.add_argument('-l', '--list-projects', action='store_true', help='List projects with their IDs')
    parser.add_argument('--range', choices=NAMED_RANGES, default='last-week', help='Named date range (default: last-week)')
    parser.add_argument('--start', type=parse_date, help='Start date (YYYY-MM-DD), overrides --range')
    parser.add_argument('--end', type=parse_date, help='End date (YYYY-MM-DD), defaults to --start')
    parser.add_argument('--view', choices=VIEWS, default='by-day', help='Report view (default: by-day)')
    parser.add_argument('--csv', help='Export tables to CSV (provide filename prefix)')
    parser.add_argument('--md', help='Export output as markdown to the given file path')
    parser.add_argument('--html', help='Export output as a standalone HTML page to the given file path')
    parser.add_argument('--overwrite', action='store_true', help='Explicitly overwrite the markdown file if it exists (DANGEROUS)')
    args = parser.parse_args(argv)

    if args.end and not args.start:
        parser.error("--end requires --start")
    if args.start and args.end and args.end < args.start:
        parser.error("--end must not be before --start")
    return args


def resolve_date_range(range_name: str, start: Optional[date] = None, end: Optional[date] = None,
                       today: Optional[date] = None) -> DateRange:
    """Pick the explicit start/end dates if given, otherwise the named range."""
    if start:
        return DateRange(start, end or start)
    return get_named_range(range_name, today)


def make_client() -> TogglClient:
    return TogglClient(get_env_var("TOGGL_API_TOKEN"), get_env_var("TOGGL_WORKSPACE_ID", required=False))


def list_projects() -> None:
    """List the user's projects."""
    client = make_client()
    projects = client.fetch_all_projects()

    print("\nProjects:")
    for p in sorted(projects, key=lambda p: p.get("name") or ""):
        status = "" if p.get("active", True) else " (archived)"
        print(f"  Name: {p.get('name')}, ID: {p.get('id')}{status}")


def summary_interface(date_range: DateRange, view: str = "by-day", csv_prefix: Optional[str] = None,
                      md_path: Optional[str] = None, html_path: Optional[str] = None,
                      overwrite: bool = False) -> None:
    """Fetch, aggregate and report the time entries of a date range.

    Args:
        date_range: Dates to report on
        view: Report view (by-day, by-project, both)
        csv_prefix: Prefix for CSV files
        md_path: Path to export markdown
        html_path: Path to export HTML
        overwrite: Whether to overwrite existing markdown file
    """
    start_date, end_date = date_range
    print(f"📅 Range: {day_str(start_date)} → {day_str(end_date)}")

    client = make_client()
    raw_entries = client.fetch_time_entries(start_date, end_date)
    if not raw_entries:
        print(f"\n⚠️  No time entries found for {day_str(start_date)} to {day_str(end_date)}")

    print(f"📊 Found {len(raw_entries)} time entries")
    entries = TimeEntry.from_raw(raw_entries)
    running = [e for e in entries if e.is_running]
    if running:
        print(f"[INFO] Skipping {len(running)} running time entr{'y' if len(running) == 1 else 'ies'}")

    projects_by_id = client.get_projects_by_id(raw_entries)

    all_dates = get_dates_in_range(start_date, end_date)
    day_names = get_day_names(all_dates)
    summaries = aggregate_time_entries(entries, projects_by_id)
    day_summaries = organize_by_day(summaries, all_dates, day_names)
    project_summaries = organize_by_project(summaries, all_dates, day_names)

    report_generator = ReportGenerator(day_summaries, project_summaries, date_range)
    report = report_generator.generate_report(view, csv_prefix)

    if md_path or html_path:
        if md_path:
            write_markdown(md_path, f"\n{report}\n", start_date, end_date, overwrite)
            print(f"[SUCCESS] Markdown output written to '{md_path}'")
        if html_path:
            title = f"Time Summary {to_swiss_format(start_date)} - {to_swiss_format(end_date)}"
            write_html(html_path, f"# {title}\n{report}", title)
            print(f"[SUCCESS] HTML output written to '{html_path}'")
    else:
        print(report)


def main(argv=None) -> None:
    """Main entry point."""
    load_environment()
    args = parse_args(argv)

    try:
        if args.list_projects:
            list_projects()
        else:
            date_range = resolve_date_range(args.range, args.start, args.end)
            summary_interface(date_range, args.view, args.csv, args.md, args.html, args.overwrite)
    except requests.RequestException as e:
        print(f"[ERROR] {e}")
        sys.exit(2)


if __name__ == "__main__":
    main()
