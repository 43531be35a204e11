"""
Time entry client for Employee Time Visualizer.

PURPOSE: Fetch raw time entries from the remote time source over HTTP.

LIFECYCLE:
The client owns one httpx.Client. Create it once per run, use it as a
context manager (or call close()), and pass it into the pipeline. A
caller-supplied httpx.Client stays owned by the caller.

ERROR HANDLING STRATEGY:
Every failure mode surfaces as FetchError:
- Transport error or timeout
- Non-2xx status
- Body is not JSON, or not a JSON array
- A record is missing a timestamp or has an unparseable one

USAGE:
    with TimeEntryClient() as client:
        entries = client.fetch_entries()

    # Testing with httpx.MockTransport
    http = httpx.Client(transport=httpx.MockTransport(handler))
    client = TimeEntryClient(http_client=http)
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from .config import Config
from .errors import FetchError
from .models import TimeEntry

__all__ = ["TimeEntryClient"]

logger = logging.getLogger(__name__)


class TimeEntryClient:
    """
    HTTP client for the time-entry source.

    Sends a single GET with the static access code as the 'code' query
    parameter and parses the JSON array into TimeEntry objects. No
    retries: a failed fetch ends the run.
    """

    def __init__(
        self,
        url: str | None = None,
        access_code: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            url: Endpoint returning the JSON array. Default: Config.API_URL.
            access_code: Static token sent as ?code=. Default:
                Config.API_CODE. An empty string sends no code.
            timeout: Request timeout in seconds. Default:
                Config.REQUEST_TIMEOUT_SECONDS.
            http_client: Pre-built httpx.Client. When given, the caller
                owns its lifecycle and close() leaves it open.

        Example:
            >>> with TimeEntryClient(timeout=10) as client:
            ...     entries = client.fetch_entries()
        """
        self.url = url or Config.API_URL
        self.access_code = Config.API_CODE if access_code is None else access_code
        self.timeout = Config.REQUEST_TIMEOUT_SECONDS if timeout is None else timeout
        self._owns_client = http_client is None
        self._http: httpx.Client = http_client or httpx.Client(
            timeout=self.timeout,
            follow_redirects=True,
        )

    def __enter__(self) -> TimeEntryClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying httpx.Client if this instance created it."""
        if self._owns_client:
            self._http.close()

    def _request_params(self) -> dict[str, str]:
        return {"code": self.access_code} if self.access_code else {}

    def fetch_raw(self) -> list[dict[str, Any]]:
        """
        Fetch the raw JSON array from the time source.

        Returns:
            List of JSON objects exactly as delivered.

        Raises:
            FetchError: On transport errors, timeouts, non-2xx status,
                invalid JSON, or a body that is not an array of objects.
        """
        try:
            resp = self._http.get(self.url, params=self._request_params(), timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"Time source returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Time source request failed: {exc}") from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise FetchError(f"Time source returned invalid JSON: {exc}") from exc

        if payload is None:
            return []
        if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
            raise FetchError("Time source returned JSON that is not an array of objects")
        return payload

    def fetch_entries(self) -> list[TimeEntry]:
        """
        Fetch and parse all time entries, soft-deleted ones included.

        Filtering of deleted entries is left to the aggregator, so the
        returned list mirrors the source.

        Business context: This is the only network call in a run; every
        other stage works on the list it returns.

        Returns:
            TimeEntry objects in source order. Empty list when the source
            has no records (a JSON null body counts as empty).

        Raises:
            FetchError: If the request fails or any record is malformed.

        Example:
            >>> with TimeEntryClient() as client:
            ...     entries = client.fetch_entries()
            >>> isinstance(entries[0], TimeEntry)
            True
        """
        raw = self.fetch_raw()
        entries: list[TimeEntry] = []
        for index, record in enumerate(raw):
            try:
                entries.append(TimeEntry.from_dict(record))
            except ValueError as exc:
                raise FetchError(f"Malformed time entry at index {index}: {exc}") from exc

        logger.info(f"Fetched {len(entries)} time entries from {self.url}")
        return entries
