"""Rate-limit signal parsed from a ZenHub REST response."""

import math
import threading
from dataclasses import dataclass
from datetime import timezone
from email.utils import parsedate_to_datetime

import httpx

RATE_LIMIT_STATUS = 403
RESET_HEADER = "x-ratelimit-reset"
DATE_HEADER = "date"

# Added on top of the server-advertised wait to absorb clock skew.
GRACE_MS = 100

# Longest timed wait the platform supports; time.sleep overflows past it.
MAX_DELAY_MS = threading.TIMEOUT_MAX * 1000


def _parse_reset(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        reset = float(value)
    except ValueError:
        return None
    return reset if math.isfinite(reset) else None


def _parse_date(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    # "-0000" parses to a naive datetime; HTTP dates are always UTC.
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


@dataclass(frozen=True)
class RateLimitSignal:
    """Reset time and server time of a rate-limited response, in Unix seconds.

    Either field is None when its header is missing or malformed.
    """

    reset_at: float | None
    server_time: float | None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "RateLimitSignal":
        return cls(
            reset_at=_parse_reset(response.headers.get(RESET_HEADER)),
            server_time=_parse_date(response.headers.get(DATE_HEADER)),
        )

    @property
    def delay_ms(self) -> float | None:
        """Milliseconds to wait before retrying, or None if not computable.

        A wait too long to sleep for counts as not computable.
        """
        if self.reset_at is None or self.server_time is None:
            return None
        delay = self.reset_at * 1000 - self.server_time * 1000 + GRACE_MS
        if not math.isfinite(delay) or delay > MAX_DELAY_MS:
            return None
        return delay
