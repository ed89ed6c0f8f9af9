"""Client for fetching raw CSV text over HTTP or from disk."""

from pathlib import Path
from typing import Optional

import requests

# Timeout for HTTP requests in seconds
REQUEST_TIMEOUT = 30

# Default headers for dataset requests
HEADERS = {
    "User-Agent": "ufc-dashboard/0.1",
    "Accept": "text/csv,text/plain;q=0.9,*/*;q=0.8",
}


class DataLoadError(Exception):
    """Raised when a dataset resource cannot be fetched."""


def is_url(source: str) -> bool:
    """Check whether a source points at an HTTP(S) resource."""
    return source.startswith(("http://", "https://"))


class DatasetClient:
    """Fetches dataset text from URLs or local files."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """Initialize client with an optional pre-configured session."""
        self.session = session or requests.Session()
        self.session.headers.update(HEADERS)
        self.timeout = timeout

    def get_text(self, url: str) -> str:
        """Fetch URL and return the response body as text."""
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.text

    def read_file(self, path: str) -> str:
        """Read a local CSV file."""
        return Path(path).read_text(encoding="utf-8")

    def fetch(self, source: str, label: str = "data") -> str:
        """
        Fetch raw text for a dataset.

        Args:
            source: URL or file path
            label: Human-readable dataset name for error messages

        Raises:
            DataLoadError: If the resource cannot be retrieved
        """
        try:
            if is_url(source):
                return self.get_text(source)
            return self.read_file(source)
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise DataLoadError(f"Failed to load {label}: {status}") from e
        except (requests.RequestException, OSError, UnicodeDecodeError) as e:
            raise DataLoadError(f"Failed to load {label}: {e}") from e
