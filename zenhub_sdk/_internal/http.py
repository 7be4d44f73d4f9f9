"""Shared HTTP client configuration."""

import httpx

from zenhub_sdk._version import __version__

DEFAULT_TIMEOUT_MS = 30_000


def create_http_client(
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout_ms: Request timeout in milliseconds.
        transport: Optional transport to send requests through
            (e.g. ``httpx.MockTransport`` in tests).

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout_ms / 1000,
        transport=transport,
        headers={"User-Agent": f"zenhub-sdk/{__version__}"},
    )
