"""ZenHub SDK for Python.

Client for the ZenHub REST API (issues, epics, boards, release reports) and
the ZenHub GraphQL API (sprints, pipelines, workspace queries).

Public API:
    ZenHub - Client for both API surfaces
    get_client - ZenHub client configured from environment variables
    zenhub_sdk.models - Request body models
    zenhub_sdk.exceptions - Error taxonomy
"""

from zenhub_sdk._version import __version__
from zenhub_sdk.client import ZenHub, get_client

__all__ = ["__version__", "ZenHub", "get_client"]
