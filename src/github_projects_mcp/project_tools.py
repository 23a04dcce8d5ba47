"""Project tools: list, get, create, update and delete Projects V2."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from . import mutations, queries
from .errors import ProjectsError, not_found
from .github_graphql_client import GitHubGraphQLClient
from .models import to_page

DEFAULT_PAGE_SIZE = 20

_UPDATABLE_PROJECT_FIELDS = ("title", "shortDescription", "readme", "closed", "public")


@dataclass(frozen=True, slots=True)
class _OwnerQueries:
    """Per owner type: the GraphQL root field and the documents rooted at it."""

    root: str
    not_found_code: str
    label: str
    id_query: str
    projects_query: str
    project_query: str


_OWNERS: dict[str, _OwnerQueries] = {
    "user": _OwnerQueries(
        root="user",
        not_found_code="USER_NOT_FOUND",
        label="User",
        id_query=queries.GET_USER_ID,
        projects_query=queries.GET_USER_PROJECTS,
        project_query=queries.GET_USER_PROJECT,
    ),
    "organization": _OwnerQueries(
        root="organization",
        not_found_code="ORG_NOT_FOUND",
        label="Organization",
        id_query=queries.GET_ORG_ID,
        projects_query=queries.GET_ORG_PROJECTS,
        project_query=queries.GET_ORG_PROJECT,
    ),
}


def _owner_queries(owner_type: str) -> _OwnerQueries:
    try:
        return _OWNERS[owner_type]
    except KeyError:
        raise ProjectsError(code="INVALID_OWNER_TYPE", message=f"Unsupported owner type: {owner_type}") from None


def _owner_missing(oq: _OwnerQueries, owner: str) -> ProjectsError:
    return not_found(oq.not_found_code, f"{oq.label} {owner} not found", owner=owner)


async def list_projects(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    owner = arguments["owner"]
    oq = _owner_queries(arguments["ownerType"])

    variables: dict[str, Any] = {"login": owner, "first": arguments.get("first", DEFAULT_PAGE_SIZE)}
    if arguments.get("after") is not None:
        variables["after"] = arguments["after"]

    data = await client.request(oq.projects_query, variables)
    owner_node = data.get(oq.root)
    if not owner_node:
        raise _owner_missing(oq, owner)

    return to_page("projects", owner_node["projectsV2"])


async def get_project(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    owner = arguments["owner"]
    owner_type = arguments["ownerType"]
    number = arguments["projectNumber"]
    oq = _owner_queries(owner_type)

    data = await client.request(oq.project_query, {"login": owner, "number": number})
    owner_node = data.get(oq.root)
    if not owner_node:
        raise _owner_missing(oq, owner)

    project = owner_node.get("projectV2")
    if not project:
        raise not_found(
            "PROJECT_NOT_FOUND",
            f"Project #{number} not found for {owner_type} {owner}",
            owner=owner,
            ownerType=owner_type,
            projectNumber=number,
        )
    return {"project": project}


async def create_project(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    """Resolve the owner's node id, then create the project under it."""
    owner = arguments["owner"]
    oq = _owner_queries(arguments["ownerType"])

    data = await client.request(oq.id_query, {"login": owner})
    owner_node = data.get(oq.root)
    if not owner_node or not owner_node.get("id"):
        raise _owner_missing(oq, owner)

    data = await client.request(
        mutations.CREATE_PROJECT,
        {"input": {"ownerId": owner_node["id"], "title": arguments["title"]}},
    )
    project = (data.get("createProjectV2") or {}).get("projectV2")
    if project is None:
        raise ProjectsError(code="CREATE_FAILED", message="Failed to create project")
    return {"project": project}


async def update_project(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    mutation_input: dict[str, Any] = {"projectId": arguments["projectId"]}
    for key in _UPDATABLE_PROJECT_FIELDS:
        if key in arguments:
            mutation_input[key] = arguments[key]

    data = await client.request(mutations.UPDATE_PROJECT, {"input": mutation_input})
    project = (data.get("updateProjectV2") or {}).get("projectV2")
    if project is None:
        raise ProjectsError(code="UPDATE_FAILED", message="Failed to update project")
    return {"project": project}


async def delete_project(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    data = await client.request(mutations.DELETE_PROJECT, {"input": {"projectId": arguments["projectId"]}})
    project = (data.get("deleteProjectV2") or {}).get("projectV2")
    if project is None:
        raise ProjectsError(code="DELETE_FAILED", message="Failed to delete project")
    return {"deletedProjectId": project.get("id")}
