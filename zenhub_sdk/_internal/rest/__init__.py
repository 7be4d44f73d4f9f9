"""REST dispatch for the versioned ZenHub API."""

from zenhub_sdk._internal.rest.client import DEFAULT_ENDPOINT, DEFAULT_MAX_RETRIES, RestDispatcher
from zenhub_sdk._internal.rest.ratelimit import RateLimitSignal

__all__ = [
    "DEFAULT_ENDPOINT",
    "DEFAULT_MAX_RETRIES",
    "RestDispatcher",
    "RateLimitSignal",
]
