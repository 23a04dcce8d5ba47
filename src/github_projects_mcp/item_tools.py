"""Project item tools: list/get items, add drafts and existing content, set field values, remove."""

from __future__ import annotations

from typing import Any

from . import mutations, queries
from .errors import ProjectsError, not_found
from .github_graphql_client import GitHubGraphQLClient
from .models import shape_item, to_page

DEFAULT_PAGE_SIZE = 20


async def list_project_items(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    project_id = arguments["projectId"]
    variables: dict[str, Any] = {"projectId": project_id, "first": arguments.get("first", DEFAULT_PAGE_SIZE)}
    if arguments.get("after") is not None:
        variables["after"] = arguments["after"]

    data = await client.request(queries.GET_PROJECT_ITEMS, variables)
    node = data.get("node")
    if not node:
        raise not_found("PROJECT_NOT_FOUND", f"Project {project_id} not found", projectId=project_id)

    return to_page("items", node["items"], shape_item)


async def get_project_item(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    # Item node ids are global, so the lookup does not need the project.
    item_id = arguments["itemId"]
    data = await client.request(queries.GET_PROJECT_ITEM, {"itemId": item_id})
    node = data.get("node")
    if not node:
        raise not_found(
            "ITEM_NOT_FOUND",
            f"Item {item_id} not found",
            projectId=arguments.get("projectId"),
            itemId=item_id,
        )
    return {"item": shape_item(node)}


async def add_draft_issue(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    mutation_input: dict[str, Any] = {"projectId": arguments["projectId"], "title": arguments["title"]}
    if "body" in arguments:
        mutation_input["body"] = arguments["body"]
    if "assigneeIds" in arguments:
        mutation_input["assigneeIds"] = arguments["assigneeIds"]

    data = await client.request(mutations.ADD_DRAFT_ISSUE, {"input": mutation_input})
    item = (data.get("addProjectV2DraftIssue") or {}).get("projectItem")
    if item is None:
        raise ProjectsError(code="ADD_DRAFT_FAILED", message="Failed to add draft issue")
    return {"item": shape_item(item)}


async def add_existing_issue(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    data = await client.request(
        mutations.ADD_ITEM_BY_ID,
        {"input": {"projectId": arguments["projectId"], "contentId": arguments["contentId"]}},
    )
    item = (data.get("addProjectV2ItemById") or {}).get("item")
    if item is None:
        raise ProjectsError(code="ADD_ITEM_FAILED", message="Failed to add item to project")
    return {"item": shape_item(item)}


async def update_item_field(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    """Set a field value on an item.

    `value` is forwarded untouched: matching its populated member to the field's
    data type is left to GitHub.
    """
    data = await client.request(
        mutations.UPDATE_ITEM_FIELD_VALUE,
        {
            "input": {
                "projectId": arguments["projectId"],
                "itemId": arguments["itemId"],
                "fieldId": arguments["fieldId"],
                "value": arguments["value"],
            }
        },
    )
    item = (data.get("updateProjectV2ItemFieldValue") or {}).get("projectV2Item")
    if item is None:
        raise ProjectsError(code="UPDATE_FIELD_FAILED", message="Failed to update item field")
    return {"item": shape_item(item)}


async def remove_project_item(client: GitHubGraphQLClient, arguments: dict[str, Any]) -> dict[str, Any]:
    data = await client.request(
        mutations.DELETE_ITEM,
        {"input": {"projectId": arguments["projectId"], "itemId": arguments["itemId"]}},
    )
    deleted_item_id = (data.get("deleteProjectV2Item") or {}).get("deletedItemId")
    if deleted_item_id is None:
        raise ProjectsError(code="DELETE_ITEM_FAILED", message="Failed to remove item from project")
    return {"deletedItemId": deleted_item_id}
