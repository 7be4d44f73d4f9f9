"""Public models for the ZenHub SDK."""

from zenhub_sdk.models.requests import (
    Dependency,
    IssueRef,
    ReleaseReport,
    ReleaseReportUpdate,
)

__all__ = ["Dependency", "IssueRef", "ReleaseReport", "ReleaseReportUpdate"]
