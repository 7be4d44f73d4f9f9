"""GraphQL dispatcher for the ZenHub API."""

import json
import sys
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from zenhub_sdk._internal.graphql.models import ExecutionResult
from zenhub_sdk.exceptions import (
    ZenHubConfigError,
    ZenHubConnectionError,
    ZenHubGraphQLError,
    ZenHubHTTPError,
    ZenHubParseError,
)

DEFAULT_GRAPHQL_ENDPOINT = "https://api.zenhub.com/public/graphql"


def normalize_query(document: str) -> str:
    """Collapse newlines and runs of spaces so a document fits on one line."""
    return " ".join(document.split())


class GraphQLDispatcher:
    """Single call path for every ZenHub GraphQL operation.

    There is no retry here: a rate-limited GraphQL call surfaces as a
    ZenHubHTTPError.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        *,
        graphql_key: str | None,
        endpoint: str = DEFAULT_GRAPHQL_ENDPOINT,
        debug: bool = False,
    ) -> None:
        """Initialize the GraphQL dispatcher.

        Args:
            http_client: The httpx client requests are sent through.
            graphql_key: Bearer token for the GraphQL API.
            endpoint: The GraphQL endpoint URL.
            debug: Enable debug logging to stderr.
        """
        self._http_client = http_client
        self._graphql_key = graphql_key
        self.endpoint = endpoint
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[zenhub-sdk:graphql] {message}", file=sys.stderr)

    def _get_headers(self) -> dict[str, str]:
        """Get request headers with authorization."""
        return {
            "Authorization": f"Bearer {self._graphql_key}",
            "Content-Type": "application/json",
        }

    def _parse(self, text: str) -> ExecutionResult:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise ZenHubParseError("POST", self.endpoint, str(e), text) from e
        if not isinstance(payload, dict):
            raise ZenHubParseError(
                "POST", self.endpoint, "GraphQL response was not a JSON object", text
            )
        try:
            return ExecutionResult.model_validate(payload)
        except ValidationError as e:
            raise ZenHubParseError("POST", self.endpoint, str(e), text) from e

    def query(
        self,
        document: str,
        variables: dict[str, Any] | None = None,
        *,
        response_model: type[BaseModel] | None = None,
    ) -> Any:
        """Run a query or mutation and return the envelope's data.

        Args:
            document: The GraphQL query or mutation.
            variables: Variables referenced by the document.
            response_model: Optional pydantic model the data is validated into.

        Returns:
            The `data` field of the response, or an instance of
            `response_model` built from it.

        Raises:
            ZenHubConfigError: No GraphQL key is configured.
            ZenHubConnectionError: The transport failed.
            ZenHubHTTPError: The response status is >= 400.
            ZenHubParseError: The body is not a GraphQL response envelope.
            ZenHubGraphQLError: The envelope carries at least one error, even
                if partial data came with it.
        """
        if not self._graphql_key:
            raise ZenHubConfigError("ZenHub GraphQL key is not configured")

        variables = variables or {}
        try:
            response = self._http_client.post(
                self.endpoint,
                json={"query": document, "variables": variables},
                headers=self._get_headers(),
            )
        except httpx.TransportError as e:
            self._log_debug(f"Query failed before a response: {e}")
            raise ZenHubConnectionError(f"ZenHub: Error during GraphQL query: {e}") from e

        if response.status_code >= 400:
            self._log_debug(f"Query failed with status {response.status_code}")
            raise ZenHubHTTPError(
                "POST",
                self.endpoint,
                response.status_code,
                response.text,
                query=document,
            )

        result = self._parse(response.text)
        if result.errors:
            self._log_debug(f"Query returned {len(result.errors)} error(s)")
            raise ZenHubGraphQLError(
                normalize_query(document),
                variables,
                result.errors,
            )

        if response_model is not None:
            return response_model.model_validate(result.data or {})
        return result.data
