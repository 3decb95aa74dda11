"""GitHub REST API adapter — implements the RepoSource port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

import httpx

from repo_aggregator.domain.entities import EntryKind, RepoMetadata, TreeEntry
from repo_aggregator.domain.exceptions import (
    RateLimitError,
    RemoteAccessDeniedError,
    RemoteNotFoundError,
    RemoteSourceError,
)

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_USER_AGENT = "repo-aggregator/1.0"


class GitHubRestAdapter:
    """Concrete RepoSource backed by the GitHub v3 contents API."""

    def __init__(
        self,
        client: httpx.Client,
        token: str | None = None,
        api_url: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": _USER_AGENT,
        }
        self._raw_headers: dict[str, str] = {"User-Agent": _USER_AGENT}
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"
            self._raw_headers["Authorization"] = f"Bearer {token}"

    def get_repository(self, owner: str, name: str) -> RepoMetadata:
        """GET /repos/{owner}/{name} → RepoMetadata with canonical casing."""
        resp = self._api_get(f"/repos/{quote(owner)}/{quote(name)}")
        try:
            data = resp.json()
            return RepoMetadata(
                owner=(data.get("owner") or {}).get("login", owner),
                name=data.get("name", name),
                default_branch=data.get("default_branch", "main"),
            )
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise _malformed(resp, exc) from exc

    def list_directory(self, owner: str, name: str, path: str) -> list[TreeEntry] | None:
        """GET /repos/{owner}/{name}/contents/{path} → [TreeEntry], or None on 404."""
        endpoint = f"/repos/{quote(owner)}/{quote(name)}/contents"
        if path:
            endpoint += "/" + quote(path.strip("/"), safe="/")
        try:
            resp = self._api_get(endpoint)
        except RemoteNotFoundError:
            logger.debug("Contents listing 404 for %s/%s:%s", owner, name, path or "/")
            return None

        try:
            data: Any = resp.json()
            # A file path yields a single object rather than a list.
            items = data if isinstance(data, list) else [data]
            return [_to_entry(item) for item in items]
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise _malformed(resp, exc) from exc

    def fetch_content(self, download_ref: str) -> str:
        """GET the raw download URL and return its text."""
        try:
            resp = self._client.get(download_ref, headers=self._raw_headers)
        except httpx.HTTPError as exc:
            raise RemoteSourceError(
                f"Network error fetching {download_ref}: {exc}"
            ) from exc

        if resp.status_code == 200:
            return resp.text

        raise _status_error(resp, download_ref)

    def _api_get(self, endpoint: str) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._api_url}{endpoint}"
        try:
            resp = self._client.get(url, headers=self._api_headers)
        except httpx.HTTPError as exc:
            raise RemoteSourceError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code == 200:
            return resp

        raise _status_error(resp, url)


def _status_error(resp: httpx.Response, url: str) -> RemoteSourceError:
    """Translate a non-200 response into the matching domain error."""
    status = resp.status_code

    if status == 404:
        return RemoteNotFoundError(f"Not found: {url}", status_code=status)

    if status == 403:
        remaining = resp.headers.get("x-ratelimit-remaining", "")
        if remaining == "0":
            reset_raw = resp.headers.get("x-ratelimit-reset", "")
            try:
                reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                    "%Y-%m-%d %H:%M:%S UTC"
                )
            except (ValueError, OSError):
                reset_str = reset_raw or "unknown"
            return RateLimitError(
                f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                "Set the GITHUB_TOKEN environment variable to increase the limit.",
                status_code=status,
            )
        return RemoteAccessDeniedError(
            f"Access denied for {url}. The repository may be private.",
            status_code=status,
        )

    if status == 429:
        return RateLimitError("GitHub API rate limit exceeded (HTTP 429).", status_code=status)

    return RemoteSourceError(f"GitHub returned HTTP {status} for {url}", status_code=status)


def _malformed(resp: httpx.Response, exc: Exception) -> RemoteSourceError:
    return RemoteSourceError(
        f"Malformed response from {resp.request.url}: {exc!r}", status_code=resp.status_code
    )


def _to_entry(item: dict[str, Any]) -> TreeEntry:
    kind = EntryKind.DIRECTORY if item.get("type") == "dir" else EntryKind.FILE
    return TreeEntry(
        path=item["path"],
        kind=kind,
        download_ref=item.get("download_url") if kind is EntryKind.FILE else None,
    )
