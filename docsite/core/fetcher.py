"""HTTP checks for external links."""

import time
from typing import Optional

import requests


class Fetcher:
    """HTTP fetcher with rate limiting and retry logic."""

    def __init__(self, delay: float = 1.0, max_retries: int = 3, timeout: float = 30):
        self.delay = delay
        self.max_retries = max_retries
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": "docsite-link-checker/0.3"
        })
        self._last_request_time: Optional[float] = None

    def _rate_limit(self) -> None:
        """Enforce rate limiting between requests."""
        if self._last_request_time is not None:
            elapsed = time.time() - self._last_request_time
            if elapsed < self.delay:
                time.sleep(self.delay - elapsed)
        self._last_request_time = time.time()

    def _request(self, method: str, url: str) -> requests.Response:
        for attempt in range(self.max_retries):
            self._rate_limit()
            try:
                return self.session.request(
                    method, url, timeout=self.timeout, allow_redirects=True
                )
            except requests.RequestException as e:
                if attempt == self.max_retries - 1:
                    raise
                print(f"Retry {attempt + 1}/{self.max_retries} for {url}: {e}")
                time.sleep(2 ** attempt)  # Exponential backoff

        raise requests.RequestException(f"No attempts made for {url}")

    def check_url(self, url: str) -> int:
        """
        Return the final HTTP status code for a URL.

        Tries HEAD first and falls back to GET for servers that reject HEAD.

        Raises:
            requests.RequestException: If every attempt fails
        """
        response = self._request("HEAD", url)
        if response.status_code in (405, 501):
            response = self._request("GET", url)
        return response.status_code
