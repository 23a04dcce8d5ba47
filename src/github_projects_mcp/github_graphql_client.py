"""GitHub GraphQL transport.

One POST per call against a single endpoint:
- a fresh bearer token is fetched from the auth provider for every request
- no retries and no timeout are applied
- a response carrying a GraphQL `errors` array is a failure, even if `data` is present

This client is intended only for the fixed documents in `queries` and `mutations`.
"""

from __future__ import annotations

from typing import Any

import httpx

from . import __version__
from .auth import AuthProvider
from .config import DEFAULT_API_URL

USER_AGENT = f"github-projects-mcp/{__version__}"


class GraphQLRequestError(Exception):
    """The upstream GraphQL call failed (transport, HTTP status, or GraphQL errors)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []


def _graphql_error_message(errors: list[Any]) -> str:
    messages = [e["message"] for e in errors if isinstance(e, dict) and isinstance(e.get("message"), str)]
    if not messages:
        return "GitHub GraphQL request failed"
    return "GitHub GraphQL request failed: " + "; ".join(messages)


class GitHubGraphQLClient:
    """Minimal GitHub GraphQL client (POST <api_url> only)."""

    def __init__(
        self,
        *,
        auth: AuthProvider,
        api_url: str = DEFAULT_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._auth = auth
        self._api_url = api_url
        self._transport = transport

    def _headers(self, token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }

    async def request(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a query/mutation document and return its `data` object."""
        token = await self._auth.get_token()

        try:
            async with httpx.AsyncClient(
                follow_redirects=False,
                timeout=None,
                transport=self._transport,
            ) as client:
                resp = await client.post(
                    self._api_url,
                    headers=self._headers(token),
                    json={"query": query, "variables": variables or {}},
                )
        except httpx.HTTPError as exc:
            raise GraphQLRequestError(f"Network request failed: {exc}") from exc

        payload: Any = None
        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if resp.status_code >= 400:
            message = f"GitHub GraphQL request failed with status {resp.status_code}"
            if isinstance(payload, dict) and isinstance(payload.get("message"), str):
                message = f"{message}: {payload['message']}"
            raise GraphQLRequestError(message, status_code=resp.status_code)

        if not isinstance(payload, dict):
            raise GraphQLRequestError("GitHub returned invalid JSON", status_code=resp.status_code)

        errors = payload.get("errors")
        if isinstance(errors, list) and errors:
            raise GraphQLRequestError(
                _graphql_error_message(errors),
                status_code=resp.status_code,
                errors=[e for e in errors if isinstance(e, dict)],
            )

        data = payload.get("data")
        if not isinstance(data, dict):
            raise GraphQLRequestError("GitHub GraphQL returned no data", status_code=resp.status_code)

        return data
