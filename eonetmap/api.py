"""Builder and executor of requests to the natural events service."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from eonetmap.models import ApiRequest

logger = logging.getLogger(__name__)

BASE_URL = "https://eonet.gsfc.nasa.gov/api/v3"


class Api:
    """Holds the request currently being prepared and sends it on demand."""

    def __init__(self, timeout: float = 30.0) -> None:
        self._key = ""
        self._current = ApiRequest()
        self.timeout = timeout

    @property
    def api_key(self) -> str:
        """The key last passed to :meth:`set_api_key`."""
        return self._key

    def set_category(self, category_id: str) -> None:
        """Prepare a request for open events of one category."""
        self._current.url = f"{BASE_URL}/events"
        self._current.params = {"status": "open", "category": category_id}

    def set_api_key(self, api_key: str) -> None:
        """Store the key and send it as a bearer token."""
        self._key = api_key
        self._current.headers["Authorization"] = f"Bearer {api_key}"

    def set_limit(self, count: int) -> None:
        """Limit the number of returned items."""
        self._current.params["limit"] = str(count)

    def request_events(self, status: str) -> None:
        """Prepare a request for events with the given status."""
        self._current.url = f"{BASE_URL}/events"
        self._current.params = {"status": status}

    def request_events_days(self, days: int) -> None:
        """Prepare a request for events of the last ``days`` days."""
        self._current.url = f"{BASE_URL}/events"
        self._current.params = {"days": str(days)}

    def request_category_by_id(self, category_id: str, status: str) -> None:
        """Prepare a request for the events of one category."""
        self._current.url = f"{BASE_URL}/categories/{category_id}"
        self._current.params = {"status": status}

    def request_sources(self) -> None:
        """Prepare a request for the list of sources."""
        self._current.url = f"{BASE_URL}/sources"
        self._current.params = {}

    def request_magnitudes(self) -> None:
        """Prepare a request for the list of magnitudes."""
        self._current.url = f"{BASE_URL}/magnitudes"
        self._current.params = {}

    def request_categories(self) -> None:
        """Prepare a request for the list of categories."""
        self._current.url = f"{BASE_URL}/categories"
        self._current.params = {}

    def request_single_event(self, event_id: str) -> None:
        """Prepare a request for a single event."""
        self._current.url = f"{BASE_URL}/events/{event_id}"
        self._current.params = {}

    def current_request(self) -> ApiRequest:
        """Return a copy of the request being prepared."""
        return ApiRequest(
            url=self._current.url,
            params=dict(self._current.params),
            headers=dict(self._current.headers),
        )

    def get_data(self) -> Any:
        """Send the prepared request and return the decoded JSON body.

        An empty object is returned when the request fails, the status is
        not 200 or the body is not valid JSON.
        """
        try:
            response = requests.get(
                self._current.url,
                params=self._current.params,
                headers=self._current.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("HTTP request failed: %s", exc)
            return {}

        if response.status_code != 200:
            logger.error("HTTP error: %s", response.status_code)
            return {}

        try:
            return json.loads(response.text)
        except ValueError as exc:
            logger.error("JSON parsing error: %s", exc)
            return {}