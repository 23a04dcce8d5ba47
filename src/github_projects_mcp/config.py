"""Configuration loading for github-projects-mcp.

Configuration is supplied by the host (explicit options or environment), never by the
agent. Tokens and private keys are secrets and must never be logged or returned.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

from .errors import CONFIG_ERROR, ProjectsError

DEFAULT_API_URL = "https://api.github.com/graphql"

_MISSING_AUTH_MESSAGE = (
    "GitHub authentication required. Set GITHUB_TOKEN or GITHUB_APP_ID, "
    "GITHUB_APP_PRIVATE_KEY, and GITHUB_APP_INSTALLATION_ID"
)


@dataclass(frozen=True, slots=True)
class ConfigOptions:
    """Explicit configuration values; any value set here wins over the environment."""

    token: str | None = None
    app_id: str | None = None
    private_key: str | None = None
    installation_id: str | None = None
    api_url: str | None = None


@dataclass(frozen=True, slots=True)
class PatAuthConfig:
    """Static bearer token (personal access token) authentication."""

    token: str

    def __repr__(self) -> str:
        return "PatAuthConfig(token=<redacted>)"


@dataclass(frozen=True, slots=True)
class AppAuthConfig:
    """GitHub App installation authentication."""

    app_id: str
    private_key: str
    installation_id: int

    def __repr__(self) -> str:
        return f"AppAuthConfig(app_id={self.app_id!r}, private_key=<redacted>, installation_id=<redacted>)"


@dataclass(frozen=True, slots=True)
class Config:
    """Resolved server configuration."""

    auth: PatAuthConfig | AppAuthConfig
    api_url: str = DEFAULT_API_URL


def _pick(explicit: str | None, env_name: str) -> str | None:
    if explicit is not None:
        return explicit
    return os.getenv(env_name)


def _normalize_private_key(value: str) -> str:
    # Single-line env vars often carry the PEM with escaped newlines.
    if "\\n" in value and "\n" not in value:
        return value.replace("\\n", "\n")
    return value


def _validate_api_url(value: str) -> str:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise ProjectsError(code=CONFIG_ERROR, message="GITHUB_API_URL must be a valid URL") from exc
    if url.scheme not in {"http", "https"} or not url.host:
        raise ProjectsError(code=CONFIG_ERROR, message="GITHUB_API_URL must be an absolute http(s) URL")
    return value


def load_config(options: ConfigOptions | None = None) -> Config:
    """Resolve configuration from explicit options, falling back to the environment.

    App installation auth wins when all three app values are present; otherwise a
    token is required.

    Raises:
        ProjectsError: CONFIG_ERROR if no complete auth set is available or a value
            is invalid.
    """
    opts = options or ConfigOptions()

    token = _pick(opts.token, "GITHUB_TOKEN")
    app_id = _pick(opts.app_id, "GITHUB_APP_ID")
    private_key = _pick(opts.private_key, "GITHUB_APP_PRIVATE_KEY")
    installation_id_raw = _pick(opts.installation_id, "GITHUB_APP_INSTALLATION_ID")
    api_url = _pick(opts.api_url, "GITHUB_API_URL") or DEFAULT_API_URL

    auth: PatAuthConfig | AppAuthConfig
    if app_id and private_key and installation_id_raw:
        try:
            installation_id = int(installation_id_raw.strip())
        except ValueError as exc:
            raise ProjectsError(code=CONFIG_ERROR, message="GITHUB_APP_INSTALLATION_ID must be an integer") from exc
        if installation_id < 1:
            raise ProjectsError(code=CONFIG_ERROR, message="GITHUB_APP_INSTALLATION_ID must be a positive integer")
        auth = AppAuthConfig(
            app_id=app_id.strip(),
            private_key=_normalize_private_key(private_key),
            installation_id=installation_id,
        )
    elif token:
        auth = PatAuthConfig(token=token)
    else:
        raise ProjectsError(code=CONFIG_ERROR, message=_MISSING_AUTH_MESSAGE)

    return Config(auth=auth, api_url=_validate_api_url(api_url))
