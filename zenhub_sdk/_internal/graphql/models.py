"""Pydantic models for the GraphQL execution-result envelope."""

from typing import Any

from pydantic import BaseModel


class ExecutionResult(BaseModel):
    """GraphQL response envelope.

    `data` and `errors` may both be present. Any error entry makes the whole
    result a failure. Error entries are kept exactly as the service sent
    them; none of their fields (not even `message`) is required.
    """

    data: dict[str, Any] | None = None
    errors: list[dict[str, Any]] | None = None

    model_config = {"extra": "allow"}
