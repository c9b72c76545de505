import sys
import os
import unittest
from unittest.mock import patch
from datetime import date
from io import StringIO

import requests

# Add the parent directory to sys.path to import the togglipy package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from togglipy.__main__ import summary_interface, main, parse_args, resolve_date_range, get_env_var
from togglipy.utils.date_utils import DateRange


class TestTogglipyFunctionality(unittest.TestCase):
    """Test the complete functionality of the togglipy package."""

    def setUp(self):
        """Set up test fixtures."""
        self.env_patcher = patch.dict('os.environ', {
            'TOGGL_API_TOKEN': 'test_api_token',
            'TOGGL_WORKSPACE_ID': 'test_workspace_id',
        })
        self.env_patcher.start()

        self.mock_entries = [
            {"id": 1, "project_id": 101, "start": "2026-01-12T09:00:00", "stop": "2026-01-12T10:00:00",
             "duration": 3600, "description": "Landing page"},
            {"id": 2, "project_id": 101, "start": "2026-01-12T10:00:00", "stop": "2026-01-12T10:30:00",
             "duration": 1800, "description": "Landing page"},
            {"id": 3, "project_id": 102, "start": "2026-01-14T13:00:00", "stop": "2026-01-14T14:30:00",
             "duration": 5400, "description": "Auth endpoint"},
            {"id": 4, "project_id": None, "start": "2026-01-15T08:00:00", "stop": "2026-01-15T08:15:00",
             "duration": 900, "description": None},
            {"id": 5, "project_id": 102, "start": "2026-01-16T16:00:00", "stop": None,
             "duration": -1768579200, "description": "Still running"},
        ]
        self.projects_by_id = {
            101: {"id": 101, "name": "Website", "active": True},
            102: {"id": 102, "name": "Backend", "active": True},
        }
        self.week = DateRange(date(2026, 1, 12), date(2026, 1, 18))

    def tearDown(self):
        """Tear down test fixtures."""
        self.env_patcher.stop()

    @patch('togglipy.api.client.TogglClient.fetch_time_entries')
    @patch('togglipy.api.client.TogglClient.get_projects_by_id')
    @patch('sys.stdout', new_callable=StringIO)
    def test_summary_interface_by_day(self, mock_stdout, mock_get_projects, mock_get_entries):
        """Test the summary_interface function with the day view."""
        mock_get_entries.return_value = self.mock_entries
        mock_get_projects.return_value = self.projects_by_id

        summary_interface(self.week, view="by-day")

        output = mock_stdout.getvalue()
        self.assertIn("📊 Found 5 time entries", output)
        self.assertIn("[INFO] Skipping 1 running time entry", output)
        self.assertIn("## By Day", output)
        self.assertIn("### Monday 12.01.2026", output)
        self.assertIn("### Sunday 18.01.2026", output)
        self.assertIn("No Project", output)
        self.assertNotIn("Still running", output)
        mock_get_entries.assert_called_once_with(date(2026, 1, 12), date(2026, 1, 18))

    @patch('togglipy.api.client.TogglClient.fetch_time_entries')
    @patch('togglipy.api.client.TogglClient.get_projects_by_id')
    @patch('sys.stdout', new_callable=StringIO)
    def test_summary_interface_by_project(self, mock_stdout, mock_get_projects, mock_get_entries):
        """Test the summary_interface function with the project view."""
        mock_get_entries.return_value = self.mock_entries
        mock_get_projects.return_value = self.projects_by_id

        summary_interface(self.week, view="by-project")

        output = mock_stdout.getvalue()
        self.assertIn("### Backend (1.50 h)", output)
        self.assertIn("### Website (1.50 h)", output)
        self.assertIn("### No Project (0.25 h)", output)
        self.assertLess(output.index("### Backend"), output.index("### No Project"))
        self.assertNotIn("## By Day", output)

    @patch('togglipy.api.client.TogglClient.fetch_time_entries')
    @patch('togglipy.api.client.TogglClient.get_projects_by_id')
    @patch('sys.stdout', new_callable=StringIO)
    def test_summary_interface_without_entries(self, mock_stdout, mock_get_projects, mock_get_entries):
        mock_get_entries.return_value = []
        mock_get_projects.return_value = {}

        summary_interface(self.week, view="both")

        output = mock_stdout.getvalue()
        self.assertIn("⚠️  No time entries found", output)
        self.assertEqual(output.count("_No entries_"), 8)

    @patch('togglipy.api.client.TogglClient.fetch_time_entries')
    @patch('togglipy.api.client.TogglClient.get_projects_by_id')
    @patch('togglipy.__main__.write_html')
    @patch('togglipy.__main__.write_markdown')
    @patch('sys.stdout', new_callable=StringIO)
    def test_file_exports(self, mock_stdout, mock_write_markdown, mock_write_html,
                          mock_get_projects, mock_get_entries):
        mock_get_entries.return_value = self.mock_entries
        mock_get_projects.return_value = self.projects_by_id

        summary_interface(self.week, view="both", md_path="out.md", html_path="out.html", overwrite=True)

        md_args = mock_write_markdown.call_args.args
        self.assertEqual(md_args[0], "out.md")
        self.assertIn("## By Project", md_args[1])
        self.assertEqual(md_args[2:], (date(2026, 1, 12), date(2026, 1, 18), True))
        self.assertEqual(mock_write_html.call_args.args[0], "out.html")
        self.assertEqual(mock_write_html.call_args.args[2], "Time Summary 12.01.2026 - 18.01.2026")

        output = mock_stdout.getvalue()
        self.assertIn("[SUCCESS] Markdown output written to 'out.md'", output)
        self.assertNotIn("## By Day", output)

    @patch('togglipy.api.client.TogglClient.fetch_time_entries')
    @patch('togglipy.__main__.load_environment')
    @patch('sys.stdout', new_callable=StringIO)
    def test_main_reports_api_errors(self, mock_stdout, mock_load_env, mock_get_entries):
        mock_get_entries.side_effect = requests.RequestException("Toggl API request failed: 403")

        with self.assertRaises(SystemExit) as ctx:
            main(["--start", "2026-01-12", "--end", "2026-01-18"])

        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("[ERROR] Toggl API request failed: 403", mock_stdout.getvalue())

    @patch('togglipy.api.client.TogglClient.fetch_all_projects')
    @patch('togglipy.__main__.load_environment')
    @patch('sys.stdout', new_callable=StringIO)
    def test_list_projects(self, mock_stdout, mock_load_env, mock_fetch_projects):
        mock_fetch_projects.return_value = [
            {"id": 102, "name": "Backend", "active": True},
            {"id": 101, "name": "Archive", "active": False},
        ]
        main(["--list-projects"])

        output = mock_stdout.getvalue()
        self.assertIn("Name: Archive, ID: 101 (archived)", output)
        self.assertLess(output.index("Archive"), output.index("Backend"))

    @patch('sys.stdout', new_callable=StringIO)
    def test_missing_token_exits(self, mock_stdout):
        with patch.dict('os.environ', {'TOGGL_API_TOKEN': ''}):
            with self.assertRaises(SystemExit) as ctx:
                get_env_var("TOGGL_API_TOKEN")
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Set TOGGL_API_TOKEN", mock_stdout.getvalue())

    def test_parse_args(self):
        args = parse_args([])
        self.assertEqual(args.range, "last-week")
        self.assertEqual(args.view, "by-day")

        args = parse_args(["--start", "2026-01-12", "--view", "both", "--csv", "jan"])
        self.assertEqual(args.start, date(2026, 1, 12))
        self.assertIsNone(args.end)
        self.assertEqual(args.csv, "jan")

    @patch('sys.stderr', new_callable=StringIO)
    def test_parse_args_rejects_bad_dates(self, mock_stderr):
        test_cases = [
            ["--start", "2026-13-01"],
            ["--start", "2026-01-18", "--end", "2026-01-12"],
            ["--end", "2026-01-12"],
        ]
        for argv in test_cases:
            with self.subTest(argv=argv):
                with self.assertRaises(SystemExit):
                    parse_args(argv)

    def test_resolve_date_range(self):
        self.assertEqual(resolve_date_range("last-week", date(2026, 1, 12), None),
                         DateRange(date(2026, 1, 12), date(2026, 1, 12)))
        self.assertEqual(resolve_date_range("current-month", today=date(2026, 2, 10)),
                         DateRange(date(2026, 2, 1), date(2026, 2, 28)))


if __name__ == '__main__':
    unittest.main()
