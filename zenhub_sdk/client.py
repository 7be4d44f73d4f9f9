"""ZenHub client for the REST and GraphQL APIs.

Example:
    from zenhub_sdk import ZenHub
    from zenhub_sdk.models import IssueRef

    with ZenHub(api_key="your-api-key") as zenhub:
        issue = zenhub.get_issue_data(repo_id=123, issue_number=7)
        zenhub.add_to_epic(123, 1, [IssueRef(repo_id=123, issue_number=7)])
        sprint = zenhub.get_active_sprint("workspace-id")
"""

import os
from collections.abc import Sequence
from typing import Any

import httpx

from zenhub_sdk._internal.graphql import DEFAULT_GRAPHQL_ENDPOINT, GraphQLDispatcher
from zenhub_sdk._internal.graphql.queries import (
    ACTIVE_SPRINT_QUERY,
    ADD_ISSUES_TO_SPRINTS_MUTATION,
    ISSUE_BY_INFO_QUERY,
    PIPELINES_QUERY,
    REMOVE_ISSUES_FROM_SPRINTS_MUTATION,
    SPRINTS_QUERY,
)
from zenhub_sdk._internal.http import DEFAULT_TIMEOUT_MS, create_http_client
from zenhub_sdk._internal.rest import DEFAULT_ENDPOINT, DEFAULT_MAX_RETRIES, RestDispatcher
from zenhub_sdk.models import Dependency, IssueRef, ReleaseReport, ReleaseReportUpdate


def _dump_issues(issues: Sequence[IssueRef]) -> list[dict[str, int]]:
    return [issue.model_dump() for issue in issues]


class ZenHub:
    """Client for the ZenHub REST and GraphQL APIs.

    Every REST method goes through one `RestDispatcher` (authentication,
    rate-limit retry, body parsing) and every GraphQL method through one
    `GraphQLDispatcher`. Methods return the parsed response unmodified; REST
    methods return None when the service answers with an empty body.

    Use `ZenHub.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        graphql_key: str | None = None,
        endpoint: str = DEFAULT_ENDPOINT,
        graphql_endpoint: str = DEFAULT_GRAPHQL_ENDPOINT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        http_client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the ZenHub client.

        Args:
            api_key: REST API token.
            graphql_key: GraphQL API token. Defaults to `api_key`.
            endpoint: REST API base URL, including the /p1 prefix.
            graphql_endpoint: GraphQL API URL.
            max_retries: Retries for a rate-limited REST request.
            timeout_ms: Request timeout in milliseconds.
            debug: Enable debug logging to stderr.
            http_client: Optional httpx client to send requests through.
                It is not closed by `close()`.
            transport: Optional httpx transport for the client this SDK
                creates. Ignored when `http_client` is given.
        """
        self._owns_http_client = http_client is None
        self._http_client = http_client or create_http_client(
            timeout_ms=timeout_ms, transport=transport
        )
        self._rest = RestDispatcher(
            self._http_client,
            api_key=api_key,
            endpoint=endpoint,
            max_retries=max_retries,
            debug=debug,
        )
        self._graphql = GraphQLDispatcher(
            self._http_client,
            graphql_key=graphql_key or api_key,
            endpoint=graphql_endpoint,
            debug=debug,
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "ZenHub":
        """Create a ZenHub client from environment variables.

        Environment variables:
            ZENHUB_API_KEY: The REST API token.
            ZENHUB_GQL_TOKEN: The GraphQL API token (defaults to ZENHUB_API_KEY).
            ZENHUB_ENDPOINT: The REST API base URL.
            ZENHUB_GRAPHQL_ENDPOINT: The GraphQL API URL.
            ZENHUB_MAX_RETRIES: Retries for rate-limited REST requests.
            ZENHUB_TIMEOUT_MS: Request timeout in milliseconds.
            ZENHUB_DEBUG: Set to "1" to enable debug logging.

        Args:
            **overrides: Constructor arguments that take precedence over
                the environment (e.g. `http_client`).

        Returns:
            A configured ZenHub client.
        """
        kwargs: dict[str, Any] = {
            "api_key": os.environ.get("ZENHUB_API_KEY"),
            "graphql_key": os.environ.get("ZENHUB_GQL_TOKEN"),
            "endpoint": os.environ.get("ZENHUB_ENDPOINT", DEFAULT_ENDPOINT),
            "graphql_endpoint": os.environ.get(
                "ZENHUB_GRAPHQL_ENDPOINT", DEFAULT_GRAPHQL_ENDPOINT
            ),
            "max_retries": int(os.environ.get("ZENHUB_MAX_RETRIES", str(DEFAULT_MAX_RETRIES))),
            "timeout_ms": int(os.environ.get("ZENHUB_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
            "debug": os.environ.get("ZENHUB_DEBUG", "") == "1",
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def endpoint(self) -> str:
        """The REST API base URL (including /p1)."""
        return self._rest.endpoint

    @endpoint.setter
    def endpoint(self, value: str) -> None:
        self._rest.endpoint = value

    @property
    def graphql_endpoint(self) -> str:
        """The GraphQL API URL."""
        return self._graphql.endpoint

    @graphql_endpoint.setter
    def graphql_endpoint(self, value: str) -> None:
        self._graphql.endpoint = value

    @property
    def call_count(self) -> int:
        """REST requests issued by this client, retries included."""
        return self._rest.call_count

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "ZenHub":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # =========================================================================
    # Dispatch
    # =========================================================================

    def api_call(self, method: str, path: str, body: Any = None) -> Any:
        """Send a REST request to `<endpoint><path>`. See `RestDispatcher.call`."""
        return self._rest.call(method, path, body)

    def graphql(
        self,
        document: str,
        variables: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Run a GraphQL document. See `GraphQLDispatcher.query`."""
        return self._graphql.query(document, variables, **kwargs)

    # =========================================================================
    # Issues
    # =========================================================================

    def get_issue_data(self, repo_id: int, issue_number: int) -> Any:
        """Get an issue's ZenHub data (estimate, pipelines, epic flag).

        Args:
            repo_id: GitHub repository ID.
            issue_number: Issue number within the repository.

        Returns:
            The parsed issue data.
        """
        return self.api_call("GET", f"/repositories/{repo_id}/issues/{issue_number}")

    def get_issue_events(self, repo_id: int, issue_number: int) -> Any:
        """Get the ZenHub event history of an issue (estimate and pipeline changes)."""
        return self.api_call("GET", f"/repositories/{repo_id}/issues/{issue_number}/events")

    def change_pipeline(
        self, repo_id: int, issue_number: int, pipeline_id: str, position: str | int
    ) -> Any:
        """Move an issue to a pipeline.

        Args:
            repo_id: GitHub repository ID.
            issue_number: Issue number within the repository.
            pipeline_id: ID of the target pipeline.
            position: "top", "bottom" or a 0-based index within the pipeline.

        Returns:
            None; the service answers with an empty body.
        """
        return self.api_call(
            "POST",
            f"/repositories/{repo_id}/issues/{issue_number}/moves",
            {"pipeline_id": pipeline_id, "position": position},
        )

    def set_estimate(self, repo_id: int, issue_number: int, estimate: float) -> Any:
        """Set the estimate of an issue.

        Args:
            repo_id: GitHub repository ID.
            issue_number: Issue number within the repository.
            estimate: Estimate value, one of the repository's estimate options.

        Returns:
            The updated estimate.
        """
        return self.api_call(
            "PUT",
            f"/repositories/{repo_id}/issues/{issue_number}/estimate",
            {"estimate": estimate},
        )

    # =========================================================================
    # Boards
    # =========================================================================

    def get_board(self, repo_id: int) -> Any:
        """Get the board of a repository: its pipelines and their issues."""
        return self.api_call("GET", f"/repositories/{repo_id}/board")

    # =========================================================================
    # Epics
    # =========================================================================

    def get_epics(self, repo_id: int) -> Any:
        """List the epics of a repository."""
        return self.api_call("GET", f"/repositories/{repo_id}/epics")

    def get_epic_data(self, repo_id: int, epic_id: int) -> Any:
        """Get an epic with its issues, estimates and pipeline.

        Args:
            repo_id: GitHub repository ID.
            epic_id: Issue number of the epic.

        Returns:
            The parsed epic data.
        """
        return self.api_call("GET", f"/repositories/{repo_id}/epics/{epic_id}")

    def convert_to_epic(
        self, repo_id: int, issue_number: int, issues: Sequence[IssueRef]
    ) -> Any:
        """Convert an issue to an epic.

        Args:
            repo_id: GitHub repository ID.
            issue_number: Issue to convert.
            issues: Issues to add to the new epic.

        Returns:
            None; the service answers with an empty body.
        """
        return self.api_call(
            "POST",
            f"/repositories/{repo_id}/issues/{issue_number}/convert_to_epic",
            {"issues": _dump_issues(issues)},
        )

    def convert_to_issue(self, repo_id: int, issue_number: int) -> Any:
        """Convert an epic back to a regular issue."""
        return self.api_call(
            "POST", f"/repositories/{repo_id}/epics/{issue_number}/convert_to_issue"
        )

    def add_to_epic(self, repo_id: int, epic_number: int, issues: Sequence[IssueRef]) -> Any:
        """Add issues to an epic.

        Args:
            repo_id: GitHub repository ID of the epic.
            epic_number: Issue number of the epic.
            issues: Issues to add; they may live in other repositories.

        Returns:
            The issues that were added.
        """
        return self.api_call(
            "POST",
            f"/repositories/{repo_id}/epics/{epic_number}/update_issues",
            {"add_issues": _dump_issues(issues)},
        )

    def remove_from_epic(
        self, repo_id: int, epic_number: int, issues: Sequence[IssueRef]
    ) -> Any:
        """Remove issues from an epic.

        Args:
            repo_id: GitHub repository ID of the epic.
            epic_number: Issue number of the epic.
            issues: Issues to remove.

        Returns:
            The issues that were removed.
        """
        return self.api_call(
            "POST",
            f"/repositories/{repo_id}/epics/{epic_number}/update_issues",
            {"remove_issues": _dump_issues(issues)},
        )

    # =========================================================================
    # Milestones
    # =========================================================================

    def get_milestone_start_date(self, repo_id: int, milestone_number: int) -> Any:
        """Get the start and due dates of a milestone."""
        return self.api_call(
            "GET", f"/repositories/{repo_id}/milestones/{milestone_number}/start_date"
        )

    def set_milestone_start_date(
        self, repo_id: int, milestone_number: int, start_date: str
    ) -> Any:
        """Set the start date of a milestone.

        Args:
            repo_id: GitHub repository ID.
            milestone_number: Milestone number within the repository.
            start_date: ISO 8601 timestamp.

        Returns:
            The milestone's start date as stored.
        """
        return self.api_call(
            "POST",
            f"/repositories/{repo_id}/milestones/{milestone_number}/start_date",
            {"start_date": start_date},
        )

    # =========================================================================
    # Dependencies
    # =========================================================================

    def get_dependencies(self, repo_id: int) -> Any:
        """List the blocking relationships that involve a repository."""
        return self.api_call("GET", f"/repositories/{repo_id}/dependencies")

    def create_dependency(self, blocking: IssueRef, blocked: IssueRef) -> Any:
        """Mark one issue as blocking another.

        Args:
            blocking: The issue that blocks.
            blocked: The issue that is blocked.

        Returns:
            The created dependency.
        """
        return self.api_call(
            "POST", "/dependencies", Dependency(blocking=blocking, blocked=blocked)
        )

    def remove_dependency(self, blocking: IssueRef, blocked: IssueRef) -> Any:
        """Remove a blocking relationship. See `create_dependency`."""
        return self.api_call(
            "DELETE", "/dependencies", Dependency(blocking=blocking, blocked=blocked)
        )

    # =========================================================================
    # Release Reports
    # =========================================================================

    def create_release_report(self, repo_id: int, report: ReleaseReport) -> Any:
        """Create a release report.

        Args:
            repo_id: GitHub repository the release belongs to.
            report: Title, dates and optional extra repositories.

        Returns:
            The created release report, including its `release_id`.
        """
        return self.api_call("POST", f"/repositories/{repo_id}/reports/release", report)

    def get_release_report(self, release_id: str) -> Any:
        """Get a release report by ID."""
        return self.api_call("GET", f"/reports/release/{release_id}")

    def get_release_reports_for_repo(self, repo_id: int) -> Any:
        """List the release reports of a repository."""
        return self.api_call("GET", f"/repositories/{repo_id}/reports/releases")

    def edit_release_report(self, release_id: str, report: ReleaseReportUpdate) -> Any:
        """Edit a release report.

        Args:
            release_id: ID of the release report.
            report: Fields to change; unset fields are left alone.

        Returns:
            The updated release report.
        """
        return self.api_call("PATCH", f"/reports/release/{release_id}", report)

    def add_repo_to_release_report(self, release_id: str, repo_id: int) -> Any:
        """Add a repository to a release report."""
        return self.api_call(
            "POST", f"/reports/release/{release_id}/repository/add", {"repo_id": repo_id}
        )

    def remove_repo_from_release_report(self, release_id: str, repo_id: int) -> Any:
        """Remove a repository from a release report."""
        return self.api_call(
            "POST", f"/reports/release/{release_id}/repository/remove", {"repo_id": repo_id}
        )

    def get_release_report_issues(self, release_id: str) -> Any:
        """List the issues in a release report."""
        return self.api_call("GET", f"/reports/release/{release_id}/issues")

    def add_issues_to_release_report(
        self, release_id: str, issues: Sequence[IssueRef]
    ) -> Any:
        """Add issues to a release report.

        Args:
            release_id: ID of the release report.
            issues: Issues to add.

        Returns:
            The issues that were added and removed.
        """
        return self.api_call(
            "PATCH",
            f"/reports/release/{release_id}/issues",
            {"add_issues": _dump_issues(issues), "remove_issues": []},
        )

    def remove_issues_from_release_report(
        self, release_id: str, issues: Sequence[IssueRef]
    ) -> Any:
        """Remove issues from a release report. See `add_issues_to_release_report`."""
        return self.api_call(
            "PATCH",
            f"/reports/release/{release_id}/issues",
            {"add_issues": [], "remove_issues": _dump_issues(issues)},
        )

    # =========================================================================
    # Sprints & Workspaces (GraphQL)
    # =========================================================================

    def get_active_sprint(self, workspace_id: str) -> dict[str, Any] | None:
        """Get the active sprint of a workspace.

        Args:
            workspace_id: ZenHub workspace ID.

        Returns:
            The sprint (id, name, state, startAt, endAt), or None if the
            workspace has no active sprint.
        """
        data = self.graphql(ACTIVE_SPRINT_QUERY, {"workspaceId": workspace_id})
        workspace = (data or {}).get("workspace") or {}
        return workspace.get("activeSprint")

    def get_zenhub_issue_id(self, repository_gh_id: int, issue_number: int) -> str | None:
        """Look up ZenHub's GraphQL ID for a GitHub issue.

        Args:
            repository_gh_id: GitHub repository ID.
            issue_number: Issue number within the repository.

        Returns:
            The ZenHub issue ID, or None if ZenHub does not know the issue.
        """
        data = self.graphql(
            ISSUE_BY_INFO_QUERY,
            {"repositoryGhId": repository_gh_id, "issueNumber": issue_number},
        )
        issue = (data or {}).get("issueByInfo") or {}
        return issue.get("id")

    def get_sprints(self, workspace_id: str, first: int = 25) -> Any:
        """List the first `first` sprints of a workspace."""
        return self.graphql(SPRINTS_QUERY, {"workspaceId": workspace_id, "first": first})

    def get_pipelines(self, workspace_id: str) -> Any:
        """List the pipelines of a workspace."""
        return self.graphql(PIPELINES_QUERY, {"workspaceId": workspace_id})

    def add_issues_to_sprints(
        self, issue_ids: Sequence[str], sprint_ids: Sequence[str]
    ) -> Any:
        """Add issues to sprints.

        Args:
            issue_ids: ZenHub issue IDs (see `get_zenhub_issue_id`).
            sprint_ids: ZenHub sprint IDs.

        Returns:
            The mutation's data.
        """
        return self.graphql(
            ADD_ISSUES_TO_SPRINTS_MUTATION,
            {"input": {"issueIds": list(issue_ids), "sprintIds": list(sprint_ids)}},
        )

    def remove_issues_from_sprints(
        self, issue_ids: Sequence[str], sprint_ids: Sequence[str]
    ) -> Any:
        """Remove issues from sprints. See `add_issues_to_sprints`."""
        return self.graphql(
            REMOVE_ISSUES_FROM_SPRINTS_MUTATION,
            {"input": {"issueIds": list(issue_ids), "sprintIds": list(sprint_ids)}},
        )


def get_client() -> ZenHub:
    """Get a ZenHub client configured from environment variables.

    Returns:
        A configured ZenHub instance.
    """
    return ZenHub.from_env()
