"""Tool catalog and dispatch layer.

This module:
- defines the tool catalog (names, descriptions, input schemas)
- maps each tool name to its handler in one static registry
- builds a per-server runtime from host-provided config
- validates arguments, runs the handler and classifies every failure into an error payload
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from . import field_tools, item_tools, project_tools, view_tools
from .audit import FAILED, REJECTED, SUCCEEDED, AuditLogger, build_event, new_correlation_id
from .auth import AuthProvider, create_auth_provider
from .config import Config, ConfigOptions, load_config
from .errors import INTERNAL_ERROR, VALIDATION_ERROR, ProjectsError, internal_error, projects_error_to_result
from .github_graphql_client import GitHubGraphQLClient
from .validation import validate_arguments

logger = logging.getLogger(__name__)

Handler = Callable[[GitHubGraphQLClient, dict[str, Any]], Awaitable[dict[str, Any]]]

_OWNER = {"type": "string", "description": "The username or organization name"}
_OWNER_TYPE = {
    "type": "string",
    "enum": ["user", "organization"],
    "description": "Whether the owner is a user or organization",
}
_PROJECT_ID = {"type": "string", "description": "The global ID of the project"}
_ITEM_ID = {"type": "string", "description": "The global ID of the item"}
_FIELD_ID = {"type": "string", "description": "The global ID of the field"}
_AFTER = {"type": "string", "description": "Cursor for pagination (endCursor of the previous page)"}


def _first(what: str, default: int) -> dict[str, Any]:
    return {
        "type": "integer",
        "description": f"Number of {what} to return (default: {default}, max: 100)",
    }


TOOL_METADATA: dict[str, dict[str, Any]] = {
    "list_projects": {
        "description": "List GitHub Projects V2 for a user or organization.",
        "inputSchema": {
            "type": "object",
            "required": ["owner", "ownerType"],
            "properties": {
                "owner": _OWNER,
                "ownerType": _OWNER_TYPE,
                "first": _first("projects", project_tools.DEFAULT_PAGE_SIZE),
                "after": _AFTER,
            },
            "additionalProperties": False,
        },
    },
    "get_project": {
        "description": "Get detailed information about a specific GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["owner", "ownerType", "projectNumber"],
            "properties": {
                "owner": _OWNER,
                "ownerType": _OWNER_TYPE,
                "projectNumber": {"type": "integer", "description": "The project number"},
            },
            "additionalProperties": False,
        },
    },
    "create_project": {
        "description": "Create a new GitHub Project V2 owned by a user or organization.",
        "inputSchema": {
            "type": "object",
            "required": ["owner", "ownerType", "title"],
            "properties": {
                "owner": _OWNER,
                "ownerType": _OWNER_TYPE,
                "title": {"type": "string", "description": "The title of the project"},
            },
            "additionalProperties": False,
        },
    },
    "update_project": {
        "description": "Update a GitHub Project V2 (title, description, readme, visibility, or closed status).",
        "inputSchema": {
            "type": "object",
            "required": ["projectId"],
            "properties": {
                "projectId": _PROJECT_ID,
                "title": {"type": "string", "description": "New title for the project"},
                "shortDescription": {"type": "string", "description": "New short description"},
                "readme": {"type": "string", "description": "New readme content"},
                "closed": {"type": "boolean", "description": "Whether to close the project"},
                "public": {"type": "boolean", "description": "Whether the project is public"},
            },
            "additionalProperties": False,
        },
    },
    "delete_project": {
        "description": "Delete a GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["projectId"],
            "properties": {"projectId": _PROJECT_ID},
            "additionalProperties": False,
        },
    },
    "list_project_items": {
        "description": "List the items (issues, pull requests, draft issues) in a GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["projectId"],
            "properties": {
                "projectId": _PROJECT_ID,
                "first": _first("items", item_tools.DEFAULT_PAGE_SIZE),
                "after": _AFTER,
            },
            "additionalProperties": False,
        },
    },
    "get_project_item": {
        "description": "Get detailed information about a specific item in a GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["projectId", "itemId"],
            "properties": {"projectId": _PROJECT_ID, "itemId": _ITEM_ID},
            "additionalProperties": False,
        },
    },
    "add_draft_issue": {
        "description": "Add a new draft issue to a GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["projectId", "title"],
            "properties": {
                "projectId": _PROJECT_ID,
                "title": {"type": "string", "description": "Title of the draft issue"},
                "body": {"type": "string", "description": "Body content of the draft issue"},
                "assigneeIds": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Global IDs of the users to assign",
                },
            },
            "additionalProperties": False,
        },
    },
    "add_existing_issue": {
        "description": "Add an existing issue or pull request to a GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["projectId", "contentId"],
            "properties": {
                "projectId": _PROJECT_ID,
                "contentId": {
                    "type": "string",
                    "description": "The global ID of the issue or pull request to add",
                },
            },
            "additionalProperties": False,
        },
    },
    "update_item_field": {
        "description": (
            "Update a field value on an item in a GitHub Project V2. "
            "Populate the value member matching the field's data type."
        ),
        "inputSchema": {
            "type": "object",
            "required": ["projectId", "itemId", "fieldId", "value"],
            "properties": {
                "projectId": _PROJECT_ID,
                "itemId": _ITEM_ID,
                "fieldId": _FIELD_ID,
                "value": {
                    "type": "object",
                    "description": "The value to set",
                    "properties": {
                        "text": {"type": "string", "description": "Text value for TEXT fields"},
                        "number": {"type": "number", "description": "Number value for NUMBER fields"},
                        "date": {"type": "string", "description": "Date value (YYYY-MM-DD) for DATE fields"},
                        "singleSelectOptionId": {
                            "type": "string",
                            "description": "Option ID for SINGLE_SELECT fields",
                        },
                        "iterationId": {"type": "string", "description": "Iteration ID for ITERATION fields"},
                    },
                    "additionalProperties": False,
                },
            },
            "additionalProperties": False,
        },
    },
    "remove_project_item": {
        "description": "Remove an item from a GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["projectId", "itemId"],
            "properties": {"projectId": _PROJECT_ID, "itemId": _ITEM_ID},
            "additionalProperties": False,
        },
    },
    "list_project_fields": {
        "description": "List the fields of a GitHub Project V2, including single-select options and iterations.",
        "inputSchema": {
            "type": "object",
            "required": ["projectId"],
            "properties": {
                "projectId": _PROJECT_ID,
                "first": _first("fields", field_tools.DEFAULT_PAGE_SIZE),
                "after": _AFTER,
            },
            "additionalProperties": False,
        },
    },
    "create_field": {
        "description": "Create a new custom field in a GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["projectId", "name", "dataType"],
            "properties": {
                "projectId": _PROJECT_ID,
                "name": {"type": "string", "description": "Name of the field"},
                "dataType": {
                    "type": "string",
                    "enum": ["TEXT", "NUMBER", "DATE", "SINGLE_SELECT", "ITERATION"],
                    "description": "Type of field",
                },
                "singleSelectOptions": {
                    "type": "array",
                    "description": "Options for SINGLE_SELECT fields",
                    "items": {
                        "type": "object",
                        "required": ["name", "color"],
                        "properties": {
                            "name": {"type": "string"},
                            "color": {"type": "string"},
                            "description": {"type": "string"},
                        },
                        "additionalProperties": False,
                    },
                },
            },
            "additionalProperties": False,
        },
    },
    "update_field": {
        "description": "Rename a field in a GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["fieldId", "name"],
            "properties": {
                "fieldId": _FIELD_ID,
                "name": {"type": "string", "description": "New name for the field"},
            },
            "additionalProperties": False,
        },
    },
    "delete_field": {
        "description": "Delete a custom field from a GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["fieldId"],
            "properties": {"fieldId": _FIELD_ID},
            "additionalProperties": False,
        },
    },
    "list_project_views": {
        "description": "List the views (table, board, roadmap) of a GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["projectId"],
            "properties": {
                "projectId": _PROJECT_ID,
                "first": _first("views", view_tools.DEFAULT_PAGE_SIZE),
                "after": _AFTER,
            },
            "additionalProperties": False,
        },
    },
    "get_project_view": {
        "description": "Get detailed information about a specific view in a GitHub Project V2.",
        "inputSchema": {
            "type": "object",
            "required": ["projectId", "viewNumber"],
            "properties": {
                "projectId": _PROJECT_ID,
                "viewNumber": {"type": "integer", "description": "The view number"},
            },
            "additionalProperties": False,
        },
    },
}


_TOOL_FUNCS: dict[str, Handler] = {
    "list_projects": project_tools.list_projects,
    "get_project": project_tools.get_project,
    "create_project": project_tools.create_project,
    "update_project": project_tools.update_project,
    "delete_project": project_tools.delete_project,
    "list_project_items": item_tools.list_project_items,
    "get_project_item": item_tools.get_project_item,
    "add_draft_issue": item_tools.add_draft_issue,
    "add_existing_issue": item_tools.add_existing_issue,
    "update_item_field": item_tools.update_item_field,
    "remove_project_item": item_tools.remove_project_item,
    "list_project_fields": field_tools.list_project_fields,
    "create_field": field_tools.create_field,
    "update_field": field_tools.update_field,
    "delete_field": field_tools.delete_field,
    "list_project_views": view_tools.list_project_views,
    "get_project_view": view_tools.get_project_view,
}

if set(_TOOL_FUNCS) != set(TOOL_METADATA):  # pragma: no cover
    raise RuntimeError("Tool catalog and handler registry are out of sync")


@dataclass(frozen=True, slots=True)
class Runtime:
    """Per-server dependencies shared across tool calls (none of them hold call state)."""

    config: Config
    auth: AuthProvider
    graphql: GitHubGraphQLClient
    audit: AuditLogger


@dataclass(frozen=True, slots=True)
class ToolResponse:
    """The JSON-ready payload of one tool call and whether it is an error."""

    payload: dict[str, Any]
    is_error: bool = False


_RUNTIME: Runtime | None = None


def initialize_runtime(options: ConfigOptions | None = None) -> Runtime:
    """Initialize and cache the runtime from explicit options and the environment.

    Called at server startup (fail-fast), and lazily by dispatch_tool.
    """
    global _RUNTIME  # pylint: disable=global-statement
    if _RUNTIME is not None:
        return _RUNTIME

    config = load_config(options)
    auth = create_auth_provider(config.auth)
    graphql = GitHubGraphQLClient(auth=auth, api_url=config.api_url)

    _RUNTIME = Runtime(config=config, auth=auth, graphql=graphql, audit=AuditLogger())
    return _RUNTIME


def _outcome_for(code: str) -> str:
    return REJECTED if code == VALIDATION_ERROR else FAILED


async def dispatch_tool(name: str, arguments: dict[str, Any]) -> ToolResponse:
    """Dispatch a tool call.

    Never raises: every failure is classified into an error payload.
    """
    correlation_id = new_correlation_id()
    audit = _RUNTIME.audit if _RUNTIME is not None else AuditLogger()
    start = audit.measure_start()

    def _record(outcome: str, error_code: str | None = None) -> None:
        audit.write_event(
            build_event(
                correlation_id=correlation_id,
                tool=name,
                outcome=outcome,
                error_code=error_code,
                duration_ms=audit.measure_duration_ms(start),
            )
        )

    try:
        func = _TOOL_FUNCS.get(name)
        if func is None:
            raise LookupError(f"Unknown tool: {name}")

        validate_arguments(TOOL_METADATA[name]["inputSchema"], arguments)

        runtime = initialize_runtime()
        result = await func(runtime.graphql, arguments)

        _record(SUCCEEDED)
        return ToolResponse(payload=result)

    except ProjectsError as err:
        logger.warning("Tool %s failed: %s (%s)", name, err.message, err.code)
        _record(_outcome_for(err.code), err.code)
        return ToolResponse(payload=projects_error_to_result(err), is_error=True)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.warning("Tool %s failed with %s: %s", name, type(exc).__name__, exc)
        _record(FAILED, INTERNAL_ERROR)
        return ToolResponse(payload=internal_error(str(exc) or type(exc).__name__), is_error=True)
