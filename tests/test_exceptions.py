"""Tests for public exceptions."""

import pytest

from zenhub_sdk.exceptions import (
    ZenHubAPIError,
    ZenHubConfigError,
    ZenHubConnectionError,
    ZenHubError,
    ZenHubGraphQLError,
    ZenHubHTTPError,
    ZenHubParseError,
    ZenHubRateLimitError,
)


class TestZenHubError:
    """Tests for base ZenHubError."""

    def test_is_exception(self):
        """ZenHubError should be an Exception."""
        assert issubclass(ZenHubError, Exception)

    @pytest.mark.parametrize(
        "error_cls",
        [
            ZenHubConfigError,
            ZenHubConnectionError,
            ZenHubAPIError,
            ZenHubHTTPError,
            ZenHubRateLimitError,
            ZenHubParseError,
            ZenHubGraphQLError,
        ],
    )
    def test_all_errors_inherit_from_base(self, error_cls):
        """Every SDK error should be catchable as ZenHubError."""
        assert issubclass(error_cls, ZenHubError)


class TestZenHubAPIError:
    """Tests for ZenHubAPIError."""

    def test_with_message_only(self):
        """Should create error with message only."""
        error = ZenHubAPIError("API request failed")
        assert str(error) == "API request failed"
        assert error.status_code is None

    def test_with_status_code(self):
        """Should store status code."""
        error = ZenHubAPIError("Not found", status_code=404)
        assert error.status_code == 404


class TestZenHubHTTPError:
    """Tests for ZenHubHTTPError."""

    def test_rest_fields(self):
        """Should carry method, path, status and body."""
        error = ZenHubHTTPError("GET", "/repositories/1/board", 404, "Not Found")

        assert error.method == "GET"
        assert error.path == "/repositories/1/board"
        assert error.status_code == 404
        assert error.body == "Not Found"
        assert error.query is None
        assert str(error) == "ZenHub: Error during GET /repositories/1/board: Status 404: Not Found"

    def test_graphql_fields(self):
        """Should mention the query when one is given."""
        error = ZenHubHTTPError("POST", "http://test/graphql", 500, "oops", query="query { a }")

        assert error.query == "query { a }"
        assert "query { a }" in str(error)

    def test_rate_limit_error_is_http_error(self):
        """ZenHubRateLimitError should be catchable as ZenHubHTTPError."""
        with pytest.raises(ZenHubHTTPError):
            raise ZenHubRateLimitError("GET", "/x", 403, "")


class TestZenHubParseError:
    """Tests for ZenHubParseError."""

    def test_fields(self):
        """Should carry method, path, parser message and raw text."""
        error = ZenHubParseError("GET", "/x", "Expecting value", "<html>")

        assert error.method == "GET"
        assert error.path == "/x"
        assert error.parser_message == "Expecting value"
        assert error.body == "<html>"
        assert error.status_code is None
        assert "Expecting value" in str(error)


class TestZenHubGraphQLError:
    """Tests for ZenHubGraphQLError."""

    def test_fields(self):
        """Should carry query, variables and errors."""
        error = ZenHubGraphQLError(
            "query { a }", {"id": 1}, [{"message": "x"}, {"message": "y"}]
        )

        assert error.query == "query { a }"
        assert error.variables == {"id": 1}
        assert error.messages == ["x", "y"]
        assert '[{"message": "x"}, {"message": "y"}]' in str(error)
