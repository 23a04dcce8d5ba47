"""Bearer token providers.

Two variants share one contract, an async `get_token()`:
- PatAuthProvider returns a fixed personal access token.
- GitHubAppAuthProvider signs an App JWT and exchanges it for an installation token.
  The exchanged token is not cached: every call performs a fresh exchange.

Secrets (private key content, tokens, installation IDs) must never be exposed.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Protocol

import httpx
import jwt

from .config import AppAuthConfig, PatAuthConfig

logger = logging.getLogger(__name__)

GITHUB_REST_API_URL = "https://api.github.com"


class AuthProvider(Protocol):
    """Anything that can produce a bearer token on demand."""

    async def get_token(self) -> str:
        """Return a bearer token for the next upstream request."""


class InstallationTokenError(Exception):
    """The installation token exchange failed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PatAuthProvider:
    """Returns the configured token unconditionally."""

    def __init__(self, config: PatAuthConfig) -> None:
        self._token = config.token

    async def get_token(self) -> str:
        return self._token


class GitHubAppAuthProvider:
    """Exchanges a GitHub App identity for an installation access token."""

    def __init__(
        self,
        config: AppAuthConfig,
        *,
        api_base_url: str = GITHUB_REST_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a provider for a single app installation."""
        self._config = config
        self._api_base_url = api_base_url.rstrip("/")
        self._transport = transport

    def _build_app_jwt(self) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            # Backdated to tolerate clock drift between us and GitHub.
            "iat": int((now - timedelta(seconds=60)).timestamp()),
            "exp": int((now + timedelta(minutes=10)).timestamp()),
            "iss": self._config.app_id,
        }
        return jwt.encode(payload, self._config.private_key, algorithm="RS256")

    async def get_token(self) -> str:
        """Perform the JWT -> installation token exchange and return the token."""
        app_jwt = self._build_app_jwt()
        headers = {
            "Authorization": f"Bearer {app_jwt}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

        url = f"{self._api_base_url}/app/installations/{self._config.installation_id}/access_tokens"
        async with httpx.AsyncClient(follow_redirects=False, timeout=None, transport=self._transport) as client:
            resp = await client.post(url, headers=headers, json={})

        if resp.status_code in (401, 403):
            raise InstallationTokenError("GitHub App authentication failed", status_code=resp.status_code)
        if resp.status_code >= 400:
            raise InstallationTokenError(
                f"Failed to obtain installation token (status {resp.status_code})",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise InstallationTokenError("GitHub token response was not valid JSON") from exc

        token = data.get("token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise InstallationTokenError("GitHub token response missing required fields")

        logger.debug("Obtained installation token for app %s", self._config.app_id)
        return token


def create_auth_provider(config: PatAuthConfig | AppAuthConfig) -> AuthProvider:
    """Build the provider matching the configured auth mode."""
    if isinstance(config, PatAuthConfig):
        return PatAuthProvider(config)
    return GitHubAppAuthProvider(config)
