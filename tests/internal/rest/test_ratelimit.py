"""Tests for RateLimitSignal."""

import httpx
import pytest

from zenhub_sdk._internal.rest.ratelimit import GRACE_MS, RateLimitSignal

# 1700000000 == Tue, 14 Nov 2023 22:13:20 GMT
SERVER_DATE = "Tue, 14 Nov 2023 22:13:20 GMT"


class TestRateLimitSignalFromResponse:
    """Tests for RateLimitSignal.from_response()."""

    def test_parses_both_headers(self):
        """Should parse reset seconds and the HTTP date."""
        response = httpx.Response(
            403, headers={"x-ratelimit-reset": "1700000060", "date": SERVER_DATE}
        )

        signal = RateLimitSignal.from_response(response)

        assert signal.reset_at == 1700000060
        assert signal.server_time == 1700000000

    def test_header_lookup_is_case_insensitive(self):
        """Should find headers regardless of case."""
        response = httpx.Response(
            403, headers={"X-RateLimit-Reset": "1700000060", "Date": SERVER_DATE}
        )

        assert RateLimitSignal.from_response(response).delay_ms == 60_000 + GRACE_MS

    def test_missing_headers(self):
        """Should leave both fields None when headers are absent."""
        signal = RateLimitSignal.from_response(httpx.Response(403))

        assert signal.reset_at is None
        assert signal.server_time is None

    @pytest.mark.parametrize("reset", ["", "soon", "nan", "inf"])
    def test_malformed_reset(self, reset):
        """Should treat a non-numeric reset header as missing."""
        response = httpx.Response(403, headers={"x-ratelimit-reset": reset, "date": SERVER_DATE})

        assert RateLimitSignal.from_response(response).reset_at is None

    def test_minus_zero_zone_is_utc(self):
        """Should read a "-0000" date as UTC, not local time."""
        response = httpx.Response(
            403,
            headers={"x-ratelimit-reset": "1700000060", "date": "Tue, 14 Nov 2023 22:13:20 -0000"},
        )

        signal = RateLimitSignal.from_response(response)

        assert signal.server_time == 1700000000
        assert signal.delay_ms == 60_000 + GRACE_MS

    def test_malformed_date(self):
        """Should treat an unparseable date header as missing."""
        response = httpx.Response(
            403, headers={"x-ratelimit-reset": "1700000060", "date": "yesterday"}
        )

        assert RateLimitSignal.from_response(response).server_time is None


class TestRateLimitSignalDelay:
    """Tests for RateLimitSignal.delay_ms."""

    def test_delay_adds_grace_margin(self):
        """Should be reset - server time, in ms, plus 100ms."""
        signal = RateLimitSignal(reset_at=1700000005, server_time=1700000000)

        assert signal.delay_ms == 5_100

    def test_delay_can_be_negative(self):
        """Should not clamp; the dispatcher decides how to sleep."""
        signal = RateLimitSignal(reset_at=1699999990, server_time=1700000000)

        assert signal.delay_ms == -9_900

    @pytest.mark.parametrize("reset_at", [1e300, 1e306])
    def test_delay_too_long_to_sleep(self, reset_at):
        """Should be None when the wait is beyond what time.sleep accepts."""
        assert RateLimitSignal(reset_at=reset_at, server_time=1700000000).delay_ms is None

    @pytest.mark.parametrize(
        ("reset_at", "server_time"),
        [(None, 1700000000.0), (1700000005.0, None), (None, None)],
    )
    def test_delay_not_computable(self, reset_at, server_time):
        """Should be None when either input is missing."""
        assert RateLimitSignal(reset_at=reset_at, server_time=server_time).delay_ms is None
