"""
TogglClient: A client for interacting with the Toggl Track API v9.
"""
import requests
from typing import Optional, Dict, Any, List
from datetime import date, timedelta


class TogglClient:
    """A client for interacting with the Toggl Track API."""

    def __init__(self, api_token: str, workspace_id: Optional[str] = None):
        """Initialize the TogglClient.

        Args:
            api_token: Toggl API token
            workspace_id: Toggl workspace ID (optional, needed for single project lookups)

        Raises:
            ValueError: If no API token is given
        """
        if not api_token:
            raise ValueError("Toggl API token is required")
        self.api_token = api_token
        self.workspace_id = workspace_id
        self.base_url = "https://api.track.toggl.com/api/v9"

    @property
    def auth(self):
        """Basic auth pair: Toggl takes the token as username and 'api_token' as password."""
        return (self.api_token, "api_token")

    def api_get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        """Make a GET request to the Toggl API.

        Args:
            endpoint: API path below the base URL (e.g. "/me/projects")
            params: Query parameters (optional)

        Returns:
            API response as JSON

        Raises:
            requests.RequestException: If the API request fails
        """
        url = f"{self.base_url}{endpoint}"
        headers = {"Content-Type": "application/json"}
        try:
            resp = requests.get(url, headers=headers, params=params, auth=self.auth)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as e:
            raise requests.RequestException(f"Toggl API request failed: {e}")

    def fetch_time_entries(self, start_date: date, end_date: date) -> List[Dict[str, Any]]:
        """Get time entries for the specified date range.

        Args:
            start_date: Start date
            end_date: End date (inclusive)

        Returns:
            List of raw time entries
        """
        # Toggl treats end_date as exclusive
        params = {
            "start_date": start_date.isoformat(),
            "end_date": (end_date + timedelta(days=1)).isoformat(),
        }
        return self.api_get("/me/time_entries", params) or []

    def fetch_project(self, project_id: int) -> Dict[str, Any]:
        """Get a single project.

        Args:
            project_id: Project ID

        Returns:
            Project details

        Raises:
            ValueError: If the client has no workspace ID
        """
        if not self.workspace_id:
            raise ValueError("A workspace ID is required to fetch a single project")
        return self.api_get(f"/workspaces/{self.workspace_id}/projects/{project_id}")

    def fetch_all_projects(self) -> List[Dict[str, Any]]:
        """Get all projects of the authenticated user.

        Returns:
            List of projects
        """
        return self.api_get("/me/projects") or []

    def get_projects_by_id(self, entries: Optional[List[Dict[str, Any]]] = None) -> Dict[int, Dict[str, Any]]:
        """Get a mapping of project IDs to projects.

        Args:
            entries: Time entries; when given and none of them has a project,
                no request is made

        Returns:
            Dict of project_id -> project
        """
        if entries is not None and not any(e.get("project_id") for e in entries):
            return {}
        projects = self.fetch_all_projects()
        return {p["id"]: p for p in projects if p.get("id") is not None}
