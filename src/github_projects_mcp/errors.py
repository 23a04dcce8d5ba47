"""Typed errors and error payload helpers.

Errors returned to agents carry a stable string code and a human-readable message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

VALIDATION_ERROR = "VALIDATION_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"
CONFIG_ERROR = "CONFIG_ERROR"


@dataclass(frozen=True, slots=True)
class ProjectsError(Exception):
    """A domain error raised by a tool handler (or by config/validation).

    `details` is a mapping for domain errors and a list of violations for
    validation errors.
    """

    code: str
    message: str
    details: dict[str, Any] | list[dict[str, Any]] | None = None

    def __str__(self) -> str:
        return self.message


def to_error_result(*, code: str, message: str, details: Any = None) -> dict[str, Any]:
    """Build a standard tool error payload."""
    out: dict[str, Any] = {"error": code, "message": message}
    if details is not None:
        out["details"] = details
    return out


def projects_error_to_result(err: ProjectsError) -> dict[str, Any]:
    """Convert a ProjectsError into the standard error payload."""
    return to_error_result(code=err.code, message=err.message, details=err.details)


def internal_error(message: str) -> dict[str, Any]:
    """Error payload for anything unclassified (transport, auth, unexpected)."""
    return to_error_result(code=INTERNAL_ERROR, message=message or "Internal error")


def not_found(code: str, message: str, **details: Any) -> ProjectsError:
    """Domain error for a queried node that came back null."""
    return ProjectsError(code=code, message=message, details=details or None)
