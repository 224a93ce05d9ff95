from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import structlog

from agent_runtime.infra.errors import InvalidToolNameError, ToolNotFoundError

if TYPE_CHECKING:
    from agent_runtime.session.models import Session
    from agent_runtime.tools.base import BaseTool

logger = structlog.get_logger()

TOOL_NAME_RE = re.compile(r"[a-z0-9_]+")


class ToolRegistry:
    """Registry for runtime tools. Maps names to tool instances.

    Holds references only; tool lifecycle is owned by the caller.
    Re-registering a name replaces the tool but keeps its original position.
    Not thread-safe: callers sharing a registry across threads must guard
    register/remove/execute with their own lock.
    """

    def __init__(self, *, validate_names: bool = True) -> None:
        self._tools: dict[str, BaseTool] = {}
        self._validate_names = validate_names

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def register(self, tool: BaseTool) -> ToolRegistry:
        """Register a tool, replacing any tool with the same name. Chainable.

        Raises InvalidToolNameError if name validation is on and the name is malformed.
        """
        name = tool.name
        if self._validate_names and not (
            isinstance(name, str) and TOOL_NAME_RE.fullmatch(name)
        ):
            raise InvalidToolNameError(name)
        if name in self._tools:
            logger.info("tool_replaced", tool_name=name)
        else:
            logger.info("tool_registered", tool_name=name)
        self._tools[name] = tool
        return self

    def has(self, name: str) -> bool:
        return name in self._tools

    def get(self, name: str) -> BaseTool:
        """Get a tool by name. Raises ToolNotFoundError if not registered."""
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name, self._tools.keys())
        return tool

    def execute(
        self,
        name: str,
        session: Session,
        parameters: dict[str, Any] | None = None,
    ) -> dict:
        """Look up a tool and run it. The tool's result is returned unchanged.

        Session state is not checked here; AgentRuntime does that.
        """
        tool = self.get(name)
        result = tool.execute(session, parameters if parameters is not None else {})
        logger.info("tool_executed", tool_name=name, session_id=session.id)
        return result

    def list_tools(self) -> list[str]:
        """Return registered tool names in registration order."""
        return list(self._tools)

    def describe_tools(self) -> dict[str, str]:
        """Return name -> description for every tool, read at call time."""
        return {name: tool.description for name, tool in self._tools.items()}

    def get_tools_schema(self) -> list[dict]:
        """Return tools in OpenAI function calling format.

        Output format:
        [{"type": "function", "function": {"name": ..., "description": ..., "parameters": ...}}]
        """
        return [
            {
                "type": "function",
                "function": {
                    "name": name,
                    "description": tool.description,
                    "parameters": tool.parameters,
                },
            }
            for name, tool in self._tools.items()
        ]

    def remove(self, name: str) -> ToolRegistry:
        """Unregister a tool. Removing an unknown name is a no-op. Chainable."""
        if self._tools.pop(name, None) is not None:
            logger.info("tool_removed", tool_name=name)
        return self
