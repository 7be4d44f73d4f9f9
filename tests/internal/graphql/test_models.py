"""Tests for GraphQL envelope models."""

import pytest
from pydantic import ValidationError

from zenhub_sdk._internal.graphql.models import ExecutionResult


class TestExecutionResult:
    """Tests for ExecutionResult model."""

    def test_data_only(self):
        """Should parse a successful envelope."""
        result = ExecutionResult.model_validate({"data": {"viewer": {"id": "u1"}}})

        assert result.data == {"viewer": {"id": "u1"}}
        assert result.errors is None

    def test_errors_with_partial_data(self):
        """Should keep both data and errors."""
        result = ExecutionResult.model_validate(
            {"data": {"a": None}, "errors": [{"message": "boom", "path": ["a"]}]}
        )

        assert result.data == {"a": None}
        assert result.errors == [{"message": "boom", "path": ["a"]}]

    @pytest.mark.parametrize(
        "entry",
        [
            {"code": "RATE_LIMITED"},
            {"message": None},
            {"message": "x", "locations": "line 1", "path": "a.b"},
        ],
    )
    def test_error_entries_are_not_validated(self, entry):
        """Should keep error entries as sent, whatever their fields."""
        result = ExecutionResult.model_validate({"errors": [entry]})

        assert result.errors == [entry]

    def test_allows_extensions_key(self):
        """Should accept top-level extensions."""
        result = ExecutionResult.model_validate({"data": {}, "extensions": {"cost": 1}})

        assert result.data == {}

    def test_non_list_errors_rejected(self):
        """Should reject an envelope whose errors is not a list."""
        with pytest.raises(ValidationError):
            ExecutionResult.model_validate({"errors": "boom"})
