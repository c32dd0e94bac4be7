"""GitHub contents/raw client using httpx.

Every call opens its own httpx.Client and closes it before returning.
"""

import logging

import httpx

from .models import ApiResponse
from .settings import Settings

logging.getLogger("httpx").setLevel(logging.ERROR)
logging.getLogger("httpcore").setLevel(logging.ERROR)


class RepoClient:
    """Thin client for the contents listing API and raw file downloads."""

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None):
        self.settings = settings
        self._transport = transport
        self.requests = 0

    @property
    def headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.settings.user_agent,
            "Accept": "application/vnd.github+json",
        }
        if self.settings.github_token:
            headers["Authorization"] = f"token {self.settings.github_token}"
        return headers

    def _get(self, url: str) -> httpx.Response:
        self.requests += 1
        with httpx.Client(headers=self.headers, transport=self._transport) as client:
            resp = client.get(url)

        if not 200 <= resp.status_code < 300:
            raise httpx.HTTPStatusError(
                f"GitHub API error {resp.status_code} for {url}",
                request=resp.request,
                response=resp,
            )
        return resp

    def list_contents(self, url: str | None = None) -> ApiResponse:
        """Fetch one page of a directory listing.

        Args:
            url: Listing URL; defaults to the repository root contents endpoint.

        Returns:
            ApiResponse with the decoded JSON array and the raw Link header.

        Raises:
            httpx.HTTPStatusError: on a non-2xx status.
            ValueError: if the body is not a JSON array.
        """
        url = url or self.settings.contents_url
        resp = self._get(url)
        try:
            body = resp.json()
        except ValueError as e:
            raise ValueError(f"Invalid JSON in listing from {url}: {e}") from e
        if not isinstance(body, list):
            raise ValueError(f"Expected a JSON array from {url}, got {type(body).__name__}")
        return ApiResponse(status=resp.status_code, body=body, link=resp.headers.get("link"))

    def get_raw(self, path: str) -> str:
        """Download a file's raw text by repository-relative path."""
        return self._get(self.settings.raw_url(path)).text
