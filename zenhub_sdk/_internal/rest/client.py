"""REST dispatcher for the ZenHub API."""

import json
import sys
import threading
import time
from typing import Any

import httpx
from pydantic import BaseModel

from zenhub_sdk._internal.rest.ratelimit import RATE_LIMIT_STATUS, RateLimitSignal
from zenhub_sdk.exceptions import (
    ZenHubConfigError,
    ZenHubConnectionError,
    ZenHubHTTPError,
    ZenHubParseError,
    ZenHubRateLimitError,
)

DEFAULT_ENDPOINT = "https://api.zenhub.com/p1"
DEFAULT_MAX_RETRIES = 3


class RestDispatcher:
    """Single call path for every ZenHub REST operation.

    Injects the authentication header, retries rate-limited (403) responses
    after the server-advertised reset time, and normalizes the response body
    into a parsed JSON value, None for an empty body, or an exception.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        *,
        api_key: str | None,
        endpoint: str = DEFAULT_ENDPOINT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        debug: bool = False,
    ) -> None:
        """Initialize the REST dispatcher.

        Args:
            http_client: The httpx client requests are sent through.
            api_key: The ZenHub API token sent as x-authentication-token.
            endpoint: The REST API base URL, including the version prefix.
            max_retries: How many times a rate-limited request is retried.
            debug: Enable debug logging to stderr.

        Raises:
            ZenHubConfigError: max_retries is negative.
        """
        if max_retries < 0:
            raise ZenHubConfigError(f"max_retries must be >= 0, got {max_retries}")
        self._http_client = http_client
        self._api_key = api_key
        self.endpoint = endpoint
        self._max_retries = max_retries
        self._debug = debug
        self._call_count = 0
        self._call_count_lock = threading.Lock()

    @property
    def call_count(self) -> int:
        """Number of REST requests issued so far, retries included."""
        return self._call_count

    @property
    def max_retries(self) -> int:
        """Retries allowed for a rate-limited request."""
        return self._max_retries

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[zenhub-sdk:rest] {message}", file=sys.stderr)

    def _get_headers(self) -> dict[str, str]:
        """Get request headers with the authentication token."""
        return {
            "x-authentication-token": self._api_key,  # type: ignore[dict-item]
            "Content-Type": "application/json",
        }

    def _count_call(self) -> None:
        """Increment the call counter; safe across threads."""
        with self._call_count_lock:
            self._call_count += 1

    def _send(self, method: str, path: str, body: Any) -> httpx.Response:
        """Send one request attempt."""
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", exclude_none=True)
        try:
            return self._http_client.request(
                method,
                f"{self.endpoint}{path}",
                json=body,
                headers=self._get_headers(),
            )
        except httpx.TransportError as e:
            self._log_debug(f"{method} {path} failed before a response: {e}")
            raise ZenHubConnectionError(f"ZenHub: Error during {method} {path}: {e}") from e

    def call(self, method: str, path: str, body: Any = None) -> Any | None:
        """Send a request and return its parsed JSON body.

        Args:
            method: HTTP verb (GET, POST, PUT, PATCH, DELETE).
            path: Path relative to the endpoint, identifiers already filled in.
            body: Optional JSON-serializable body or pydantic model.

        Returns:
            The parsed JSON body, or None when the response body is empty.

        Raises:
            ZenHubConfigError: No API key is configured.
            ZenHubConnectionError: The transport failed.
            ZenHubRateLimitError: Still rate limited after the last retry.
            ZenHubHTTPError: The response status is >= 400.
            ZenHubParseError: The response body is not valid JSON.
        """
        if not self._api_key:
            raise ZenHubConfigError("ZenHub API key is not configured")

        for attempt in range(self._max_retries + 1):
            self._count_call()
            response = self._send(method, path, body)
            status = response.status_code
            rate_limited = False

            if status == RATE_LIMIT_STATUS:
                delay_ms = RateLimitSignal.from_response(response).delay_ms
                self._log_debug(f"{method} {path} rate limited (attempt {attempt})")
                if delay_ms is not None:
                    if attempt < self._max_retries:
                        self._log_debug(f"Waiting {delay_ms:.0f}ms before retrying")
                        time.sleep(max(delay_ms, 0) / 1000)
                        continue
                    rate_limited = True
                    self._log_debug(f"Giving up after {attempt + 1} attempts")
                else:
                    self._log_debug("Rate-limit headers missing or malformed, not retrying")

            if status >= 400:
                self._log_debug(f"{method} {path} failed with status {status}")
                error_cls = ZenHubRateLimitError if rate_limited else ZenHubHTTPError
                raise error_cls(method, path, status, response.text)

            text = response.text
            if not text:
                return None
            try:
                return json.loads(text)
            except json.JSONDecodeError as e:
                raise ZenHubParseError(method, path, str(e), text) from e
