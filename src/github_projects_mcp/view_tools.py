"""Project view tools: list views and fetch one by number."""

from __future__ import annotations

from typing import Any

from . import queries
from .errors import not_found
from .github_graphql_client import GitHubGraphQLClient
from .models import shape_view, to_page

DEFAULT_PAGE_SIZE = 20


async def list_project_views(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    project_id = arguments["projectId"]
    variables: dict[str, Any] = {"projectId": project_id, "first": arguments.get("first", DEFAULT_PAGE_SIZE)}
    if arguments.get("after") is not None:
        variables["after"] = arguments["after"]

    data = await client.request(queries.GET_PROJECT_VIEWS, variables)
    node = data.get("node")
    if not node:
        raise not_found("PROJECT_NOT_FOUND", f"Project {project_id} not found", projectId=project_id)

    return to_page("views", node["views"], shape_view)


async def get_project_view(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    project_id = arguments["projectId"]
    view_number = arguments["viewNumber"]

    data = await client.request(queries.GET_PROJECT_VIEW, {"projectId": project_id, "viewNumber": view_number})
    node = data.get("node")
    if not node:
        raise not_found("PROJECT_NOT_FOUND", f"Project {project_id} not found", projectId=project_id)

    view = node.get("view")
    if not view:
        raise not_found(
            "VIEW_NOT_FOUND",
            f"View #{view_number} not found in project {project_id}",
            projectId=project_id,
            viewNumber=view_number,
        )
    return {"view": shape_view(view)}
