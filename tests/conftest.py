"""Shared pytest fixtures for agent_runtime tests."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from agent_runtime.agent.runtime import AgentRuntime
from agent_runtime.config.settings import RuntimeSettings
from agent_runtime.session.models import Session
from agent_runtime.tools.base import BaseTool
from agent_runtime.tools.registry import ToolRegistry

FIXED_NOW = datetime(2025, 1, 1, 12, 30, 45, 123456, tzinfo=UTC)


class StubTool(BaseTool):
    """Concrete tool for testing: returns a canned result and records calls."""

    def __init__(
        self,
        name: str = "stub",
        description: str = "A stub tool",
        result: dict | None = None,
    ) -> None:
        self._name = name
        self._description = description
        self._result = result if result is not None else {"output": "stub output"}
        self.calls: list[tuple[Session, dict[str, Any]]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    def execute(self, session: Session, parameters: dict[str, Any]) -> dict:
        self.calls.append((session, parameters))
        return self._result


@pytest.fixture
def registry() -> ToolRegistry:
    return ToolRegistry()


@pytest.fixture
def runtime(registry: ToolRegistry) -> AgentRuntime:
    """Runtime with a fixed clock and default settings."""
    return AgentRuntime(registry, settings=RuntimeSettings(), clock=lambda: FIXED_NOW)
