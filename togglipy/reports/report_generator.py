"""ReportGenerator class for rendering the day and project views."""
from typing import List, Optional
from tabulate import tabulate
from io import StringIO

from .aggregator import DaySummary, ProjectSummary
from ..utils.date_utils import DateRange, to_swiss_format
from ..utils.format_utils import format_hours, hours_to_hm, round_hours, table_cell

VIEWS = ['by-day', 'by-project', 'both']


class ReportGenerator:
    """Class for rendering aggregated summaries as Markdown tables."""

    def __init__(self, day_summaries: List[DaySummary], project_summaries: List[ProjectSummary],
                 date_range: DateRange):
        """Initialize a ReportGenerator.

        Args:
            day_summaries: Output of organize_by_day
            project_summaries: Output of organize_by_project
            date_range: The range the summaries cover
        """
        self.day_summaries = day_summaries
        self.project_summaries = project_summaries
        self.date_range = date_range
        self.date_range_str = f"{to_swiss_format(date_range.start)} - {to_swiss_format(date_range.end)}"
        self.total_hours = round_hours(sum(p.total_hours for p in project_summaries))

    def generate_report(self, view: str = "by-day", csv_prefix: Optional[str] = None) -> str:
        """Generate a complete report.

        Args:
            view: by-day, by-project or both
            csv_prefix: Prefix for CSV files (optional)

        Returns:
            Report as a string

        Raises:
            ValueError: If the view is unknown
        """
        if view not in VIEWS:
            raise ValueError(f"Unknown view '{view}', expected one of: {', '.join(VIEWS)}")

        output = StringIO()
        if view in ("by-day", "both"):
            output.write(self.generate_day_view(csv_prefix))
        if view in ("by-project", "both"):
            output.write(self.generate_project_view(csv_prefix))
        output.write(self.generate_totals_table(csv_prefix))
        return output.getvalue()

    def generate_day_view(self, csv_prefix: Optional[str] = None) -> str:
        """Render one section per day, including days without entries."""
        output = StringIO()
        headers = ["Project", "Hours", "H:MM", "Descriptions"]
        csv_rows = []

        print(f"\n## By Day {self.date_range_str}", file=output)
        for day in self.day_summaries:
            print(f"\n### {day.day_name} {to_swiss_format(day.date)}", file=output)
            if not day.projects:
                print("\n_No entries_", file=output)
                continue

            rows = []
            for p in day.projects:
                rows.append([table_cell(p.project_name), format_hours(p.total_hours), hours_to_hm(p.total_hours),
                             table_cell(p.descriptions)])
                csv_rows.append([day.date.isoformat(), day.day_name, p.project_name,
                                 format_hours(p.total_hours), p.descriptions])
            day_total = round_hours(sum(p.total_hours for p in day.projects))
            print(file=output)
            print(tabulate(rows, headers=headers, tablefmt="github", disable_numparse=True), file=output)
            print(f"\n**Total: {format_hours(day_total)} h**", file=output)

        if csv_prefix:
            from ..utils.file_utils import write_csv
            write_csv(f"{csv_prefix}_by_day.csv", ["Date", "Day", "Project", "Hours", "Descriptions"], csv_rows)

        return output.getvalue()

    def generate_project_view(self, csv_prefix: Optional[str] = None) -> str:
        """Render one section per project that has activity in the range."""
        output = StringIO()
        headers = ["Day", "Date", "Hours", "H:MM", "Descriptions"]
        csv_rows = []

        print(f"\n## By Project {self.date_range_str}", file=output)
        if not self.project_summaries:
            print("\n_No entries_", file=output)

        for project in self.project_summaries:
            print(f"\n### {table_cell(project.project_name)} ({format_hours(project.total_hours)} h)", file=output)
            rows = []
            for d in project.days:
                rows.append([d.day_name, to_swiss_format(d.date), format_hours(d.total_hours),
                             hours_to_hm(d.total_hours), table_cell(d.descriptions)])
                csv_rows.append([project.project_name, d.date.isoformat(), d.day_name,
                                 format_hours(d.total_hours), d.descriptions])
            print(file=output)
            print(tabulate(rows, headers=headers, tablefmt="github", disable_numparse=True), file=output)

        if csv_prefix:
            from ..utils.file_utils import write_csv
            write_csv(f"{csv_prefix}_by_project.csv", ["Project", "Date", "Day", "Hours", "Descriptions"], csv_rows)

        return output.getvalue()

    def generate_totals_table(self, csv_prefix: Optional[str] = None) -> str:
        """Render hours per project and the grand total."""
        output = StringIO()
        # project_summaries already come sorted from organize_by_project
        totals_table = [
            [p.project_name, format_hours(p.total_hours), hours_to_hm(p.total_hours)]
            for p in self.project_summaries
        ]
        totals_table.append(["ΣTotal", format_hours(self.total_hours), hours_to_hm(self.total_hours)])
        md_rows = [[table_cell(row[0])] + row[1:] for row in totals_table]

        print(f"\n## Totals {self.date_range_str}\n", file=output)
        print(tabulate(md_rows, headers=["Project", "Hours", "H:MM"], tablefmt="github",
                       disable_numparse=True), file=output)

        if csv_prefix:
            from ..utils.file_utils import write_csv
            write_csv(f"{csv_prefix}_totals.csv", ["Project", "Hours", "H:MM"], totals_table)

        print(file=output)
        return output.getvalue()
