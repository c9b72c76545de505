"""
togglipy: A CLI tool for summarizing Toggl Track time entries by project and day.

- Fetches time entries and projects from the Toggl Track API
- Groups entries by project and day, merging descriptions and rounding hours
- Shows a day-first and a project-first view
- Exports to CSV, Markdown and HTML
- Can be used as a CLI (via `python -m togglipy` or `togglipy` if installed as a package)
"""

__version__ = "0.1.0"
