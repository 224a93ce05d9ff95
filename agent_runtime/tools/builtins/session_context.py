from __future__ import annotations

from typing import TYPE_CHECKING, Any

from agent_runtime.agent.rendering import to_json
from agent_runtime.tools.base import BaseTool

if TYPE_CHECKING:
    from agent_runtime.session.models import Session


class SessionContextTool(BaseTool):
    """Expose the calling session's context as JSON."""

    @property
    def name(self) -> str:
        return "session_context"

    @property
    def description(self) -> str:
        return "Return the context attached to the current session."

    def execute(self, session: Session, parameters: dict[str, Any]) -> dict:
        return {"output": to_json(dict(session.context)), "keys": list(session.context)}
