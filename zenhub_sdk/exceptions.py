"""Public exceptions for the ZenHub SDK."""

import json
from typing import Any


class ZenHubError(Exception):
    """Base exception for all ZenHub SDK errors."""


class ZenHubConfigError(ZenHubError):
    """Configuration error (missing API key, invalid config)."""


class ZenHubConnectionError(ZenHubError):
    """The request never produced a response (connect error, timeout)."""


class ZenHubAPIError(ZenHubError):
    """Error from the ZenHub API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ZenHubHTTPError(ZenHubAPIError):
    """The API answered with status >= 400.

    For GraphQL failures `method` is always "POST", `path` is the GraphQL
    endpoint and `query` holds the document that was sent.
    """

    def __init__(
        self,
        method: str,
        path: str,
        status_code: int,
        body: str,
        *,
        query: str | None = None,
    ) -> None:
        if query is None:
            message = f"ZenHub: Error during {method} {path}: Status {status_code}: {body}"
        else:
            message = f"ZenHub: Error during GraphQL query {query!r}: Status {status_code}: {body}"
        super().__init__(message, status_code=status_code)
        self.method = method
        self.path = path
        self.body = body
        self.query = query


class ZenHubRateLimitError(ZenHubHTTPError):
    """A rate-limited (403) request that was still limited after the last retry."""


class ZenHubParseError(ZenHubAPIError):
    """The response body could not be parsed as JSON."""

    def __init__(self, method: str, path: str, message: str, body: str) -> None:
        super().__init__(
            f"ZenHub: Error parsing response of {method} {path}: {message}: {body}"
        )
        self.method = method
        self.path = path
        self.parser_message = message
        self.body = body


class ZenHubGraphQLError(ZenHubAPIError):
    """The GraphQL response envelope carried a non-empty errors list."""

    def __init__(
        self,
        query: str,
        variables: dict[str, Any],
        errors: list[dict[str, Any]],
    ) -> None:
        serialized = json.dumps(errors, default=str)
        super().__init__(
            f"ZenHub: GraphQL error in query {query!r} "
            f"with variables {json.dumps(variables, default=str)}: {serialized}"
        )
        self.query = query
        self.variables = variables
        self.errors = errors

    @property
    def messages(self) -> list[str]:
        """The `message` field of every error entry."""
        return [str(error.get("message") or "") for error in self.errors]
