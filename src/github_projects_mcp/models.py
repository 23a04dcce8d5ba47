"""Closed kinds for the polymorphic Projects V2 payloads.

Upstream nodes are passed through as plain mappings. Polymorphic nodes (item content,
item field values, field configurations) get an explicit `kind` discriminator derived
from `__typename`; a typename outside the known set raises UnexpectedResponseError
instead of being passed along untagged.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable


class UnexpectedResponseError(Exception):
    """GitHub returned a node outside the set of kinds this server understands."""


class ItemType(str, Enum):
    ISSUE = "ISSUE"
    PULL_REQUEST = "PULL_REQUEST"
    DRAFT_ISSUE = "DRAFT_ISSUE"
    REDACTED = "REDACTED"


class ContentKind(str, Enum):
    DRAFT_ISSUE = "draft_issue"
    ISSUE = "issue"
    PULL_REQUEST = "pull_request"


class FieldValueKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    SINGLE_SELECT = "single_select"
    ITERATION = "iteration"
    # Value types whose payload this server does not select (labels, users, ...).
    UNSUPPORTED = "unsupported"


class FieldKind(str, Enum):
    FIELD = "field"
    SINGLE_SELECT = "single_select"
    ITERATION = "iteration"


class ViewLayout(str, Enum):
    TABLE_LAYOUT = "TABLE_LAYOUT"
    BOARD_LAYOUT = "BOARD_LAYOUT"
    ROADMAP_LAYOUT = "ROADMAP_LAYOUT"


_CONTENT_KINDS: dict[str, ContentKind] = {
    "DraftIssue": ContentKind.DRAFT_ISSUE,
    "Issue": ContentKind.ISSUE,
    "PullRequest": ContentKind.PULL_REQUEST,
}

_FIELD_VALUE_KINDS: dict[str, FieldValueKind] = {
    "ProjectV2ItemFieldTextValue": FieldValueKind.TEXT,
    "ProjectV2ItemFieldNumberValue": FieldValueKind.NUMBER,
    "ProjectV2ItemFieldDateValue": FieldValueKind.DATE,
    "ProjectV2ItemFieldSingleSelectValue": FieldValueKind.SINGLE_SELECT,
    "ProjectV2ItemFieldIterationValue": FieldValueKind.ITERATION,
    "ProjectV2ItemFieldLabelValue": FieldValueKind.UNSUPPORTED,
    "ProjectV2ItemFieldMilestoneValue": FieldValueKind.UNSUPPORTED,
    "ProjectV2ItemFieldPullRequestValue": FieldValueKind.UNSUPPORTED,
    "ProjectV2ItemFieldRepositoryValue": FieldValueKind.UNSUPPORTED,
    "ProjectV2ItemFieldReviewerValue": FieldValueKind.UNSUPPORTED,
    "ProjectV2ItemFieldUserValue": FieldValueKind.UNSUPPORTED,
}

_FIELD_KINDS: dict[str, FieldKind] = {
    "ProjectV2Field": FieldKind.FIELD,
    "ProjectV2SingleSelectField": FieldKind.SINGLE_SELECT,
    "ProjectV2IterationField": FieldKind.ITERATION,
}


def _lookup(table: dict[str, Any], node: dict[str, Any], what: str) -> Any:
    typename = node.get("__typename")
    try:
        return table[typename]
    except KeyError:
        raise UnexpectedResponseError(f"Unexpected {what} type: {typename}") from None


def content_kind(content: dict[str, Any]) -> ContentKind:
    return _lookup(_CONTENT_KINDS, content, "item content")


def field_value_kind(value: dict[str, Any]) -> FieldValueKind:
    return _lookup(_FIELD_VALUE_KINDS, value, "field value")


def field_kind(field: dict[str, Any]) -> FieldKind:
    return _lookup(_FIELD_KINDS, field, "field")


def _tag_content(content: dict[str, Any] | None) -> dict[str, Any] | None:
    # Redacted items (no access to the underlying issue) come back with null content.
    if content is None:
        return None
    if content.get("__typename") is None:
        return dict(content)
    return {**content, "kind": content_kind(content).value}


def _tag_field_value(value: dict[str, Any]) -> dict[str, Any]:
    kind = field_value_kind(value)
    if kind is FieldValueKind.UNSUPPORTED:
        return {"__typename": value.get("__typename"), "kind": kind.value}
    return {**value, "kind": kind.value}


def to_page(
    key: str,
    connection: dict[str, Any],
    shape: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Flatten a GraphQL connection into a forward-only page.

    Cursor values are copied from upstream as-is.
    """
    nodes = [n for n in connection.get("nodes") or [] if n is not None]
    page_info = connection.get("pageInfo") or {}
    return {
        key: [shape(n) for n in nodes] if shape else nodes,
        "totalCount": connection.get("totalCount"),
        "hasNextPage": page_info.get("hasNextPage", False),
        "endCursor": page_info.get("endCursor"),
    }


def shape_item(item: dict[str, Any]) -> dict[str, Any]:
    """Tag an item's content and field values with their kinds.

    Keys absent from the node are left absent; only values that are present are checked.
    """
    item_type = item.get("type")
    if item_type is not None:
        try:
            ItemType(item_type)
        except ValueError:
            raise UnexpectedResponseError(f"Unexpected item type: {item_type}") from None

    out = dict(item)
    if "content" in item:
        out["content"] = _tag_content(item["content"])

    field_values = item.get("fieldValues")
    if isinstance(field_values, dict):
        nodes = field_values.get("nodes") or []
        out["fieldValues"] = {
            **field_values,
            "nodes": [_tag_field_value(v) for v in nodes if isinstance(v, dict)],
        }
    return out


def shape_field(field: dict[str, Any]) -> dict[str, Any]:
    """Tag a field configuration with its kind (untagged when `__typename` was not returned)."""
    if field.get("__typename") is None:
        return dict(field)
    kind = field_kind(field)
    if kind is FieldKind.SINGLE_SELECT:
        return {**field, "kind": kind.value, "options": field.get("options") or []}
    return {**field, "kind": kind.value}


def shape_view(view: dict[str, Any]) -> dict[str, Any]:
    """Check a view's layout and flatten its sort/group connections."""
    layout = view.get("layout")
    if layout is not None:
        try:
            ViewLayout(layout)
        except ValueError:
            raise UnexpectedResponseError(f"Unexpected view layout: {layout}") from None

    out = dict(view)
    for key in ("sortByFields", "groupByFields"):
        conn = view.get(key)
        if isinstance(conn, dict):
            out[key] = conn.get("nodes") or []
    return out
