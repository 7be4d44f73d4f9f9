"""GraphQL dispatch for the ZenHub public GraphQL API."""

from zenhub_sdk._internal.graphql.client import (
    DEFAULT_GRAPHQL_ENDPOINT,
    GraphQLDispatcher,
    normalize_query,
)
from zenhub_sdk._internal.graphql.models import ExecutionResult

__all__ = [
    "DEFAULT_GRAPHQL_ENDPOINT",
    "GraphQLDispatcher",
    "normalize_query",
    "ExecutionResult",
]
