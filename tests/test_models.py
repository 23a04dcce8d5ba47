"""Kind tagging for polymorphic payloads and page flattening."""

from __future__ import annotations

import pytest
from conftest import item_node, page
from github_projects_mcp.models import (
    ContentKind,
    FieldKind,
    UnexpectedResponseError,
    shape_field,
    shape_item,
    shape_view,
    to_page,
)


def test_shape_item_tags_content_and_field_values() -> None:
    out = shape_item(item_node())

    assert out["content"]["kind"] == ContentKind.ISSUE.value
    assert out["content"]["number"] == 7
    values = out["fieldValues"]["nodes"]
    assert values[0]["kind"] == "single_select"
    assert values[0]["optionId"] == "opt_1"
    assert values[1] == {"__typename": "ProjectV2ItemFieldLabelValue", "kind": "unsupported"}
    assert out["fieldValues"]["pageInfo"] == {"hasNextPage": False, "endCursor": "fv1"}


def test_shape_item_does_not_mutate_input() -> None:
    node = item_node()
    _ = shape_item(node)

    assert "kind" not in node["content"]


def test_shape_item_redacted_item_keeps_null_content() -> None:
    out = shape_item(item_node(type="REDACTED", content=None))

    assert out["content"] is None


@pytest.mark.parametrize(
    ("typename", "kind"),
    [("DraftIssue", "draft_issue"), ("Issue", "issue"), ("PullRequest", "pull_request")],
)
def test_shape_item_content_kinds(typename: str, kind: str) -> None:
    out = shape_item(item_node(content={"__typename": typename, "title": "t"}))

    assert out["content"]["kind"] == kind


def test_shape_item_unknown_content_type_raises() -> None:
    with pytest.raises(UnexpectedResponseError) as exc:
        _ = shape_item(item_node(content={"__typename": "Discussion"}))

    assert "Discussion" in str(exc.value)


def test_shape_item_unknown_item_type_raises() -> None:
    with pytest.raises(UnexpectedResponseError):
        _ = shape_item(item_node(type="CARD"))


def test_shape_item_unknown_field_value_type_raises() -> None:
    node = item_node(fieldValues=page([{"__typename": "ProjectV2ItemFieldMysteryValue"}]))

    with pytest.raises(UnexpectedResponseError):
        _ = shape_item(node)


def test_shape_field_kinds() -> None:
    plain = shape_field({"__typename": "ProjectV2Field", "id": "F_1", "name": "Title", "dataType": "TITLE"})
    select = shape_field({"__typename": "ProjectV2SingleSelectField", "id": "F_2", "name": "Status", "dataType": "SINGLE_SELECT", "options": None})
    iteration = shape_field(
        {
            "__typename": "ProjectV2IterationField",
            "id": "F_3",
            "name": "Sprint",
            "dataType": "ITERATION",
            "configuration": {"iterations": [], "completedIterations": [], "duration": 14, "startDay": 1},
        }
    )

    assert plain["kind"] == FieldKind.FIELD.value
    assert select["kind"] == "single_select"
    assert select["options"] == []
    assert iteration["kind"] == "iteration"
    assert iteration["configuration"]["duration"] == 14


def test_shape_field_unknown_type_raises() -> None:
    with pytest.raises(UnexpectedResponseError):
        _ = shape_field({"__typename": "ProjectV2SomethingField"})


def test_shape_view_flattens_sort_and_group_connections() -> None:
    out = shape_view(
        {
            "id": "PVTV_1",
            "name": "Board",
            "number": 2,
            "layout": "BOARD_LAYOUT",
            "filter": "is:open",
            "sortByFields": {"nodes": [{"direction": "ASC", "field": {"id": "F_1", "name": "Title"}}]},
            "groupByFields": {"nodes": [{"id": "F_2", "name": "Status"}]},
        }
    )

    assert out["sortByFields"] == [{"direction": "ASC", "field": {"id": "F_1", "name": "Title"}}]
    assert out["groupByFields"] == [{"id": "F_2", "name": "Status"}]


def test_shape_view_unknown_layout_raises() -> None:
    with pytest.raises(UnexpectedResponseError):
        _ = shape_view({"id": "PVTV_1", "layout": "CALENDAR_LAYOUT"})


def test_to_page_copies_cursor_verbatim() -> None:
    out = to_page("things", page([{"id": 1}], has_next=False, end_cursor="Y3Vyc29yOjE=", total=9))

    assert out == {"things": [{"id": 1}], "totalCount": 9, "hasNextPage": False, "endCursor": "Y3Vyc29yOjE="}


def test_nodes_without_discriminators_pass_through_untagged() -> None:
    assert shape_item({"id": "PVTI_1"}) == {"id": "PVTI_1"}
    assert shape_item(item_node(content={"id": "I_1"}))["content"] == {"id": "I_1"}
    assert shape_field({"id": "F_1"}) == {"id": "F_1"}
    assert shape_view({"id": "PVTV_1"}) == {"id": "PVTV_1"}
