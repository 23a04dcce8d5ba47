"""Project field tools: list, create, update and delete custom fields."""

from __future__ import annotations

from typing import Any

from . import mutations, queries
from .errors import ProjectsError, not_found
from .github_graphql_client import GitHubGraphQLClient
from .models import shape_field, to_page

DEFAULT_PAGE_SIZE = 50


async def list_project_fields(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    project_id = arguments["projectId"]
    variables: dict[str, Any] = {"projectId": project_id, "first": arguments.get("first", DEFAULT_PAGE_SIZE)}
    if arguments.get("after") is not None:
        variables["after"] = arguments["after"]

    data = await client.request(queries.GET_PROJECT_FIELDS, variables)
    node = data.get("node")
    if not node:
        raise not_found("PROJECT_NOT_FOUND", f"Project {project_id} not found", projectId=project_id)

    return to_page("fields", node["fields"], shape_field)


async def create_field(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    # singleSelectOptions is forwarded whenever given; GitHub rejects it for other data types.
    mutation_input: dict[str, Any] = {
        "projectId": arguments["projectId"],
        "name": arguments["name"],
        "dataType": arguments["dataType"],
    }
    if "singleSelectOptions" in arguments:
        mutation_input["singleSelectOptions"] = arguments["singleSelectOptions"]

    data = await client.request(mutations.CREATE_FIELD, {"input": mutation_input})
    field = (data.get("createProjectV2Field") or {}).get("projectV2Field")
    if field is None:
        raise ProjectsError(code="CREATE_FIELD_FAILED", message="Failed to create field")
    return {"field": shape_field(field)}


async def update_field(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    data = await client.request(
        mutations.UPDATE_FIELD,
        {"input": {"fieldId": arguments["fieldId"], "name": arguments["name"]}},
    )
    field = (data.get("updateProjectV2Field") or {}).get("projectV2Field")
    if field is None:
        raise ProjectsError(code="UPDATE_FIELD_FAILED", message="Failed to update field")
    return {"field": shape_field(field)}


async def delete_field(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    data = await client.request(mutations.DELETE_FIELD, {"input": {"fieldId": arguments["fieldId"]}})
    field = (data.get("deleteProjectV2Field") or {}).get("projectV2Field")
    if field is None:
        raise ProjectsError(code="DELETE_FIELD_FAILED", message="Failed to delete field")
    return {"deletedFieldId": field.get("id")}
