"""Elasticsearch HTTP client.

Posts search bodies to the ``_search`` endpoint with retry/backoff on
transient failures. Composition and response parsing live elsewhere.
"""

from __future__ import annotations

import random
import time
from typing import Any, Mapping

import requests

from ElasticQuery.utils.log import log

DEFAULT_URL = "http://localhost:9200"
DEFAULT_TIMEOUT = 30.0
MAX_ATTEMPTS = 4
BASE_PAUSE = 0.5
MAX_SLEEP = 8.0

RETRYABLE_STATUS = {429, 500, 502, 503, 504}

HEADERS = {
    "User-Agent": "elastic-query/0.1",
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class ElasticsearchClient:
    """Low-level HTTP client for Elasticsearch search requests."""

    def __init__(
        self,
        base_url: str = DEFAULT_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self._session = requests.Session()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> ElasticsearchClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def search_url(self, index: str | None = None) -> str:
        if index:
            return f"{self.base_url}/{index.strip('/')}/_search"
        return f"{self.base_url}/_search"

    def search(
        self,
        body: Mapping[str, Any],
        *,
        index: str | None = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        """Run a search and return the decoded JSON response.

        Args:
            body: Search request body.
            index: Index (or comma separated indices / alias) to search.
            timeout: Optional per-request timeout in seconds.

        Returns:
            Decoded response mapping.

        Raises:
            requests.RequestException: Last error after retries, or the first
                non-retryable HTTP error.
        """
        url = self.search_url(index)
        log.debug("Elasticsearch search: url=%s body=%s", url, body)
        response = self._post_with_retry(url, body=body, timeout=timeout or self.timeout)
        response.raise_for_status()
        log.debug("Elasticsearch response ok: status=%s bytes=%s", response.status_code, len(response.content))
        return response.json()

    def _post_with_retry(self, url: str, *, body: Mapping[str, Any], timeout: float) -> requests.Response:
        """Issue POST with retries for transient failures."""
        last_error: Exception | None = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                response = self._session.post(url, json=dict(body), headers=HEADERS, timeout=timeout)
                if response.status_code in RETRYABLE_STATUS:
                    raise requests.HTTPError(f"HTTP {response.status_code}", response=response)
                return response
            except (requests.Timeout, requests.ConnectionError, requests.HTTPError) as error:
                last_error = error
                if isinstance(error, requests.HTTPError):
                    status_code = getattr(error.response, "status_code", None)
                    if status_code not in RETRYABLE_STATUS:
                        raise
                if attempt < self.max_attempts:
                    delay = min(BASE_PAUSE * (2 ** (attempt - 1)) + random.uniform(0, 0.3), MAX_SLEEP)
                    log.debug(
                        "Elasticsearch retry attempt=%d/%d delay=%.2fs error=%s",
                        attempt,
                        self.max_attempts,
                        delay,
                        error,
                    )
                    time.sleep(delay)

        assert last_error is not None
        raise last_error
