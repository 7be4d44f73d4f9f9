"""Pydantic models for ZenHub REST request bodies.

Response bodies are returned as parsed JSON and are not modelled here.
"""

from pydantic import BaseModel

# =============================================================================
# Issues
# =============================================================================


class IssueRef(BaseModel):
    """Reference to a GitHub issue by repository ID and issue number."""

    repo_id: int
    issue_number: int


class Dependency(BaseModel):
    """A blocking relationship between two issues."""

    blocking: IssueRef
    blocked: IssueRef


# =============================================================================
# Release Reports
# =============================================================================


class ReleaseReport(BaseModel):
    """Payload for creating a release report.

    Required fields:
        title: Title of the release
        start_date: ISO 8601 date the release starts
        desired_end_date: ISO 8601 date the release should end

    Optional fields:
        description: Description of the release
        repositories: IDs of additional repositories to include
    """

    title: str
    description: str | None = None
    start_date: str
    desired_end_date: str
    repositories: list[int] | None = None


class ReleaseReportUpdate(BaseModel):
    """Payload for editing a release report.

    All fields are optional - only provided fields are updated.
    """

    title: str | None = None
    description: str | None = None
    start_date: str | None = None
    desired_end_date: str | None = None
    repositories: list[int] | None = None
    state: str | None = None
