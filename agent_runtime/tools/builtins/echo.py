from __future__ import annotations

from typing import TYPE_CHECKING, Any

from agent_runtime.tools.base import BaseTool

if TYPE_CHECKING:
    from agent_runtime.session.models import Session


class EchoTool(BaseTool):
    """Echo the given text back, tagged with the calling session."""

    @property
    def name(self) -> str:
        return "echo"

    @property
    def description(self) -> str:
        return "Return the provided text unchanged."

    @property
    def parameters(self) -> dict:
        return {
            "type": "object",
            "properties": {
                "text": {"type": "string", "description": "Text to echo back."},
            },
            "required": ["text"],
        }

    def execute(self, session: Session, parameters: dict[str, Any]) -> dict:
        return {"output": str(parameters.get("text", "")), "session_id": session.id}
