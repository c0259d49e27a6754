"""
TogglClient: A client for the Toggl Track v9 API.
"""
import requests
from typing import Optional, Any, List
from datetime import date

from ..errors import FetchError, EntryDecodeError
from ..reports.time_entry import TimeEntry
from ..utils.date_utils import iso_date

BASE_URL = "https://api.track.toggl.com/api/v9/"
REQUEST_TIMEOUT = 30


class TogglClient:
    """A client for interacting with the Toggl API."""

    def __init__(self, api_key: str, session: Optional[requests.Session] = None):
        """Initialize the TogglClient.

        Args:
            api_key: Toggl API token
            session: HTTP session to use (optional)
        """
        self.api_key = api_key
        self.base_url = BASE_URL
        self.session = session or requests.Session()

    def api_get(self, uri: str, params: Optional[dict] = None) -> Any:
        """Make an authenticated GET request to the Toggl API.

        Args:
            uri: Resource path relative to the base URL
            params: Query parameters (optional)

        Returns:
            API response as JSON

        Raises:
            FetchError: If the API request fails
            EntryDecodeError: If the response is not JSON
        """
        try:
            resp = self.session.get(
                f"{self.base_url}{uri}",
                headers={"Content-Type": "application/json"},
                auth=(self.api_key, "api_token"),
                params=params,
                timeout=REQUEST_TIMEOUT,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"API request failed: {e}")

        try:
            return resp.json()
        except ValueError as e:
            raise EntryDecodeError(f"API response is not valid JSON: {e}")

    def get_time_entries(self, start_date: date, end_date: date) -> List[TimeEntry]:
        """Get the time entries of the current user for the specified date range.

        Args:
            start_date: Start date
            end_date: End date

        Returns:
            List of time entries in the order the API returned them

        Raises:
            FetchError: If the API request fails
            EntryDecodeError: If the response cannot be decoded
        """
        params = {
            "start_date": iso_date(start_date),
            "end_date": iso_date(end_date),
        }
        data = self.api_get("me/time_entries", params)
        if not isinstance(data, list):
            raise EntryDecodeError(f"Expected a list of time entries, got {type(data).__name__}")
        return [TimeEntry.from_api(e) for e in data]
