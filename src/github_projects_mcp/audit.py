"""Structured per-call audit events.

Exactly one JSON line is written to stderr per tool call. Events never contain tool
arguments, tokens or other credential material.
"""

from __future__ import annotations

import json
import sys
import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TextIO

SUCCEEDED = "succeeded"
REJECTED = "rejected"
FAILED = "failed"


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def _now_rfc3339() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class AuditEvent:
    """A single tool-call outcome."""

    timestamp: str
    correlation_id: str
    tool: str
    outcome: str
    error_code: str | None
    duration_ms: int | None


class AuditLogger:
    """Writes audit events as JSONL to a text stream (stderr by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write_event(self, event: AuditEvent) -> None:
        payload: dict[str, object] = {
            "timestamp": event.timestamp,
            "correlation_id": event.correlation_id,
            "tool": event.tool,
            "outcome": event.outcome,
        }
        if event.error_code is not None:
            payload["error_code"] = event.error_code
        if event.duration_ms is not None:
            payload["duration_ms"] = event.duration_ms

        line = json.dumps(payload, sort_keys=True, separators=(",", ":"))
        print(line, file=self._stream or sys.stderr)

    def measure_start(self) -> float:
        """Return a monotonic start timestamp for duration measurement."""
        return time.monotonic()

    def measure_duration_ms(self, start: float) -> int:
        """Convert a monotonic start timestamp into elapsed milliseconds."""
        return int((time.monotonic() - start) * 1000)


def build_event(
    *,
    correlation_id: str,
    tool: str,
    outcome: str,
    error_code: str | None = None,
    duration_ms: int | None = None,
) -> AuditEvent:
    """Construct an audit event stamped with the current time."""
    return AuditEvent(
        timestamp=_now_rfc3339(),
        correlation_id=correlation_id,
        tool=tool,
        outcome=outcome,
        error_code=error_code,
        duration_ms=duration_ms,
    )
