"""Tool argument validation against the declared input schemas.

This is intentionally a small validator covering only the JSON Schema subset the tool
catalog uses:
- required fields
- no extra properties when additionalProperties=false
- basic JSON types (string/integer/number/boolean/array/object)
- enum, nested object properties and array items

Every violation is collected, so the caller sees all problems in one response.
It does NOT implement full JSON Schema.
"""

from __future__ import annotations

from typing import Any

from .errors import VALIDATION_ERROR, ProjectsError

Path = list[str | int]


def _type_ok(expected: str, value: Any) -> bool:
    # bool is an int subclass in Python but never a JSON number.
    if expected == "string":
        return isinstance(value, str)
    if expected == "integer":
        return isinstance(value, int) and not isinstance(value, bool)
    if expected == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if expected == "boolean":
        return isinstance(value, bool)
    if expected == "array":
        return isinstance(value, list)
    if expected == "object":
        return isinstance(value, dict)
    return True


def _article(expected: str) -> str:
    return "an" if expected[0] in "aeiou" else "a"


def _check(schema: dict[str, Any], value: Any, path: Path, issues: list[dict[str, Any]]) -> None:
    expected = schema.get("type")
    if isinstance(expected, str) and not _type_ok(expected, value):
        issues.append({"path": path, "message": f"Expected {_article(expected)} {expected}"})
        return

    enum = schema.get("enum")
    if isinstance(enum, list) and value not in enum:
        allowed = ", ".join(repr(v) for v in enum)
        issues.append({"path": path, "message": f"Must be one of: {allowed}"})

    if expected == "object":
        _check_object(schema, value, path, issues)
    elif expected == "array":
        items = schema.get("items")
        if isinstance(items, dict):
            for i, element in enumerate(value):
                _check(items, element, [*path, i], issues)


def _check_object(schema: dict[str, Any], value: dict[str, Any], path: Path, issues: list[dict[str, Any]]) -> None:
    props: dict[str, Any] = schema.get("properties", {})
    required: list[str] = schema.get("required", [])

    for key in required:
        if key not in value:
            issues.append({"path": [*path, key], "message": "Required"})

    if schema.get("additionalProperties", True) is False:
        for key in value:
            if key not in props:
                issues.append({"path": [*path, key], "message": "Unrecognized field"})

    for key, prop_schema in props.items():
        if key in value:
            _check(prop_schema, value[key], [*path, key], issues)


def schema_violations(schema: dict[str, Any], arguments: Any) -> list[dict[str, Any]]:
    """Return every violation of `schema` by `arguments` (empty when valid)."""
    issues: list[dict[str, Any]] = []
    _check(schema, arguments, [], issues)
    return issues


def validate_arguments(schema: dict[str, Any], arguments: Any) -> None:
    """Validate tool arguments, failing closed.

    Raises:
        ProjectsError: VALIDATION_ERROR with one detail entry per violation.
    """
    issues = schema_violations(schema, arguments)
    if issues:
        raise ProjectsError(code=VALIDATION_ERROR, message="Invalid input parameters", details=issues)
