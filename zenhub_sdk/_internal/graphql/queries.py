"""GraphQL documents used by `ZenHub`."""

ACTIVE_SPRINT_QUERY = """
query ActiveSprint($workspaceId: ID!) {
  workspace(id: $workspaceId) {
    activeSprint {
      id
      name
      state
      startAt
      endAt
    }
  }
}
"""

ISSUE_BY_INFO_QUERY = """
query IssueByInfo($repositoryGhId: Int!, $issueNumber: Int!) {
  issueByInfo(repositoryGhId: $repositoryGhId, issueNumber: $issueNumber) {
    id
  }
}
"""

SPRINTS_QUERY = """
query Sprints($workspaceId: ID!, $first: Int!) {
  workspace(id: $workspaceId) {
    sprints(first: $first) {
      nodes {
        id
        name
        state
        startAt
        endAt
      }
    }
  }
}
"""

PIPELINES_QUERY = """
query Pipelines($workspaceId: ID!) {
  workspace(id: $workspaceId) {
    pipelinesConnection {
      nodes {
        id
        name
      }
    }
  }
}
"""

ADD_ISSUES_TO_SPRINTS_MUTATION = """
mutation AddIssuesToSprints($input: AddIssuesToSprintsInput!) {
  addIssuesToSprints(input: $input) {
    sprintIssues {
      id
    }
  }
}
"""

REMOVE_ISSUES_FROM_SPRINTS_MUTATION = """
mutation RemoveIssuesFromSprints($input: RemoveIssuesFromSprintsInput!) {
  removeIssuesFromSprints(input: $input) {
    sprints {
      id
    }
  }
}
"""
