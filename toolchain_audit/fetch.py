"""
Latest-release lookup from upstream release metadata.

Both tracked upstreams (Deno and Rust) publish GitHub releases, so the only
remote source is the GitHub "latest release" endpoint.
"""

from __future__ import annotations

import json
import logging
import os
import urllib.request
from typing import Any

logger = logging.getLogger(__name__)

USER_AGENT = "toolchain-audit/1.0"
GITHUB_API = "https://api.github.com"


class CollectionError(Exception):
    """Raised when latest-version collection fails."""
    pass


class NetworkError(CollectionError):
    """Raised when network requests fail."""
    pass


class ParseError(CollectionError):
    """Raised when response parsing fails."""
    pass


def http_get(url: str, timeout: float | None = None, headers: dict[str, str] | None = None) -> bytes:
    """Perform HTTP GET request.

    Args:
        url: URL to fetch
        timeout: Timeout in seconds, or None for no timeout
        headers: Optional HTTP headers

    Returns:
        Response body as bytes

    Raises:
        NetworkError: If request fails
    """
    request_headers = {"User-Agent": USER_AGENT}
    if headers:
        request_headers.update(headers)

    req = urllib.request.Request(url, headers=request_headers)
    kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        with urllib.request.urlopen(req, **kwargs) as response:
            return response.read()
    except Exception as e:
        raise NetworkError(f"Failed to fetch {url}: {e}") from e


def fetch_json(url: str, timeout: float | None = None, headers: dict[str, str] | None = None) -> Any:
    """Fetch a URL and decode its body as JSON.

    Raises:
        NetworkError: If request fails
        ParseError: If the body is not valid JSON
    """
    body = http_get(url, timeout=timeout, headers=headers)
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise ParseError(f"Invalid JSON from {url}: {e}") from e


class ReleaseFetcher:
    """
    Looks up the latest release tag of a GitHub repository.

    Attributes:
        timeout: Request timeout in seconds, or None
        token: Optional GitHub token (defaults to $GITHUB_TOKEN)
    """

    def __init__(self, timeout: float | None = None, token: str | None = None):
        self.timeout = timeout
        self.token = token if token is not None else os.environ.get("GITHUB_TOKEN", "")

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def latest_release(self, owner: str, repo: str) -> Any:
        """Return the decoded body of the repository's latest-release endpoint."""
        url = f"{GITHUB_API}/repos/{owner}/{repo}/releases/latest"
        logger.debug(f"Fetching latest release: {url}")
        return fetch_json(url, timeout=self.timeout, headers=self._headers())

