from __future__ import annotations

from typing import TYPE_CHECKING

from agent_runtime.tools.builtins.current_time import CurrentTimeTool
from agent_runtime.tools.builtins.echo import EchoTool
from agent_runtime.tools.builtins.session_context import SessionContextTool

if TYPE_CHECKING:
    from agent_runtime.tools.registry import ToolRegistry


def register_builtins(registry: ToolRegistry) -> ToolRegistry:
    """Register all built-in tools with the registry."""
    return (
        registry.register(EchoTool())
        .register(CurrentTimeTool())
        .register(SessionContextTool())
    )
