"""In-process agent runtime facade: session lifecycle plus tool dispatch."""

from __future__ import annotations

from agent_runtime.agent.result import Result
from agent_runtime.agent.runtime import AgentRuntime
from agent_runtime.infra.errors import (
    AgentRuntimeError,
    InvalidToolNameError,
    SessionAlreadyClosedError,
    SessionClosedError,
    ToolNotFoundError,
)
from agent_runtime.session.models import Session
from agent_runtime.tools.base import BaseTool
from agent_runtime.tools.registry import ToolRegistry

__all__ = [
    "AgentRuntime",
    "AgentRuntimeError",
    "BaseTool",
    "InvalidToolNameError",
    "Result",
    "Session",
    "SessionAlreadyClosedError",
    "SessionClosedError",
    "ToolNotFoundError",
    "ToolRegistry",
]
