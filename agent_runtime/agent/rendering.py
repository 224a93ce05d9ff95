"""Deterministic text rendering for runtime results.

No model backend exists: run() output is a fixed template around the
session id, the input and the session context.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from agent_runtime.session.models import ContextValue, Session

EMPTY_CONTEXT_LABEL = "none"
OUTPUT_TRAILER = "Drafted a plan with steps and checks."


def to_json(value: Any) -> str:
    """Compact JSON, used for non-scalar values and whole tool results."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def render_value(value: ContextValue) -> str:
    """Render one context value for the "k=v" listing.

    Booleans render as true/false and floats keep their decimal point (1.0),
    unlike a PHP-style string cast, which yields 1/"" and 1.
    """
    match value:
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case int() | float():
            return str(value)
        case _:
            # None, mappings and sequences
            return to_json(value)


def render_context(context: Mapping[str, ContextValue]) -> str:
    """Render context as "k=v, k2=v2", or "none" when empty."""
    if not context:
        return EMPTY_CONTEXT_LABEL
    return ", ".join(f"{key}={render_value(value)}" for key, value in context.items())


def render_run_output(runtime_name: str, session: Session, prompt: str) -> str:
    return (
        f"[{runtime_name}] Session {session.id}\n"
        f"Input: {prompt}\n"
        f"Context: {render_context(session.context)}\n"
        f"Output: {OUTPUT_TRAILER}"
    )


def render_tool_output(tool_result: Mapping[str, Any]) -> str:
    """Pick the tool's "output" entry, falling back to the whole result as JSON."""
    output = tool_result.get("output")
    if output is None:
        return to_json(tool_result)
    if isinstance(output, str):
        return output
    return to_json(output)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 with seconds precision, e.g. 2025-01-01T00:00:00+00:00."""
    return moment.astimezone(UTC).replace(microsecond=0).isoformat()
