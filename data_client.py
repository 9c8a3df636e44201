import threading
from datetime import datetime
from typing import Callable, Dict, Optional, Tuple

import requests

from campaign_config import POLL_INTERVAL_SECONDS

STATUS_LOADING = "loading"
STATUS_ERROR = "error"
STATUS_READY = "ready"


class CampaignFetchError(Exception):
    """Raised when the campaigns endpoint cannot be read."""


class CampaignDataClient:
    def __init__(self, api_url: str, session: Optional[requests.Session] = None):
        """
        Reads the campaign dataset from the backend endpoint.

        The client starts in the loading state. Every refresh either replaces
        the whole dataset (ready) or records a human readable message (error).
        When responses resolve out of order, the last one to resolve wins.

        Args:
            api_url: Endpoint returning the ``{"reports": [...]}`` payload.
            session: Optional ``requests.Session`` used for the GET calls.
        """
        self.api_url = api_url
        self.session = session if session is not None else requests.Session()
        self._lock = threading.Lock()
        self._status = STATUS_LOADING
        self._data = None
        self._error = None
        self.last_loaded_at = None
        self.request_count = 0

    @property
    def status(self) -> str:
        with self._lock:
            return self._status

    @property
    def data(self) -> Optional[Dict]:
        with self._lock:
            return self._data

    @property
    def error(self) -> Optional[str]:
        with self._lock:
            return self._error

    def snapshot(self) -> Tuple[str, Optional[Dict], Optional[str]]:
        with self._lock:
            return self._status, self._data, self._error

    def fetch_campaigns(self) -> Dict:
        with self._lock:
            self.request_count += 1
        try:
            response = self.session.get(self.api_url)
        except requests.exceptions.RequestException as e:
            raise CampaignFetchError(f"Network error connecting to the campaign service: {e}") from e

        if not response.ok:
            raise CampaignFetchError(f"Failed to fetch data: {response.status_code} {response.reason}")

        try:
            return response.json()
        except ValueError as e:
            raise CampaignFetchError(f"Failed to decode the campaign data. The response might not be valid JSON: {e}") from e

    def refresh(self) -> bool:
        """Fetches the dataset once. Returns True when the dataset was replaced."""
        try:
            data = self.fetch_campaigns()
        except CampaignFetchError as e:
            print(f"Error fetching campaign data: {e}")
            with self._lock:
                self._status = STATUS_ERROR
                self._error = str(e)
            return False

        print(f"Campaign data loaded from {self.api_url}")
        with self._lock:
            self._data = data
            self._error = None
            self._status = STATUS_READY
            self.last_loaded_at = datetime.now()
        return True


class PollingTask:
    def __init__(self, callback: Callable[[], object], interval_seconds: float = POLL_INTERVAL_SECONDS):
        """
        Calls ``callback`` every ``interval_seconds`` on a daemon timer thread.

        The next tick is scheduled before the callback runs, so a slow callback
        never delays the following one. Once cancelled the task cannot be
        restarted.
        """
        self.callback = callback
        self.interval_seconds = interval_seconds
        self._lock = threading.Lock()
        self._timer = None
        self._cancelled = False
        self.tick_count = 0

    @property
    def running(self) -> bool:
        with self._lock:
            return self._timer is not None and not self._cancelled

    def start(self):
        with self._lock:
            if self._cancelled:
                raise RuntimeError("PollingTask was cancelled and cannot be restarted.")
            if self._timer is not None:
                return
            self._schedule()

    def cancel(self):
        with self._lock:
            self._cancelled = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _schedule(self):
        self._timer = threading.Timer(self.interval_seconds, self._tick)
        self._timer.daemon = True
        self._timer.start()

    def _tick(self):
        with self._lock:
            if self._cancelled:
                return
            self.tick_count += 1
            self._schedule()
        self.callback()
