"""Shared fixtures: an in-memory GraphQL client stub and sample upstream nodes."""

from __future__ import annotations

from typing import Any

import github_projects_mcp.tools as tools
import pytest


class FakeGraphQL:
    """Replays canned `data` objects (or raises canned exceptions) in call order."""

    def __init__(self, responses: list[dict[str, Any] | Exception]) -> None:
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    async def request(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        self.calls.append({"query": query, "variables": variables})
        if not self._responses:
            raise AssertionError("Unexpected GraphQL call")
        val = self._responses.pop(0)
        if isinstance(val, Exception):
            raise val
        return val


@pytest.fixture
def fake_graphql() -> type[FakeGraphQL]:
    return FakeGraphQL


@pytest.fixture(autouse=True)
def _reset_runtime(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(tools, "_RUNTIME", None)


def project_node(**overrides: Any) -> dict[str, Any]:
    node = {
        "id": "PVT_1",
        "number": 1,
        "title": "Roadmap",
        "shortDescription": None,
        "public": False,
        "closed": False,
        "closedAt": None,
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-02T00:00:00Z",
        "url": "https://github.com/users/alice/projects/1",
        "readme": None,
        "owner": {"__typename": "User", "login": "alice", "id": "U_1"},
    }
    node.update(overrides)
    return node


def item_node(**overrides: Any) -> dict[str, Any]:
    node = {
        "id": "PVTI_1",
        "type": "ISSUE",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-02T00:00:00Z",
        "isArchived": False,
        "content": {
            "__typename": "Issue",
            "id": "I_1",
            "number": 7,
            "title": "Fix the thing",
            "body": "",
            "state": "OPEN",
            "url": "https://github.com/octo/repo/issues/7",
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-01-02T00:00:00Z",
            "repository": {"name": "repo", "owner": {"login": "octo"}},
        },
        "fieldValues": {
            "nodes": [
                {
                    "__typename": "ProjectV2ItemFieldSingleSelectValue",
                    "name": "Todo",
                    "optionId": "opt_1",
                    "field": {"id": "F_status", "name": "Status", "dataType": "SINGLE_SELECT"},
                },
                {"__typename": "ProjectV2ItemFieldLabelValue"},
            ],
            "pageInfo": {"hasNextPage": False, "endCursor": "fv1"},
            "totalCount": 2,
        },
    }
    node.update(overrides)
    return node


def page(nodes: list[dict[str, Any]], *, has_next: bool = False, end_cursor: str | None = None, total: int | None = None) -> dict[str, Any]:
    return {
        "nodes": nodes,
        "pageInfo": {"hasNextPage": has_next, "endCursor": end_cursor},
        "totalCount": len(nodes) if total is None else total,
    }
