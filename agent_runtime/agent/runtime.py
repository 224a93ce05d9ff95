from __future__ import annotations

import secrets
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import structlog

from agent_runtime.agent.rendering import (
    format_timestamp,
    render_run_output,
    render_tool_output,
)
from agent_runtime.agent.result import Result
from agent_runtime.agent.token_estimate import estimate_tokens
from agent_runtime.config.settings import RuntimeSettings
from agent_runtime.infra.errors import SessionAlreadyClosedError, SessionClosedError
from agent_runtime.session.models import ContextValue, Session, snapshot_value
from agent_runtime.tools.builtins import register_builtins
from agent_runtime.tools.registry import ToolRegistry

if TYPE_CHECKING:
    from agent_runtime.config.settings import Settings

logger = structlog.get_logger()

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class AgentRuntime:
    """Facade over the session lifecycle and tool dispatch.

    start_session -> run / execute_tool -> close_session. Closed sessions are
    rejected before any output or metadata is computed.

    The registry is always passed in; use from_settings() for a runtime with
    a fresh one. Single-threaded: closing the same session from several
    threads needs an external lock.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        settings: RuntimeSettings | None = None,
        clock: Clock | None = None,
        id_factory: IdFactory | None = None,
    ) -> None:
        if settings is None:
            settings = RuntimeSettings()
        self._registry = registry
        self._name = settings.name
        self._tokens_per_word = settings.tokens_per_word
        self._clock: Clock = clock or _utc_now
        self._id_factory: IdFactory = id_factory or (
            lambda: settings.session_id_prefix + secrets.token_hex(settings.session_id_bytes)
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> AgentRuntime:
        """Build a runtime with a fresh registry configured from settings."""
        registry = ToolRegistry(validate_names=settings.tools.validate_names)
        if settings.tools.register_builtins:
            register_builtins(registry)
        return cls(registry, settings=settings.runtime)

    @property
    def name(self) -> str:
        return self._name

    @property
    def tool_registry(self) -> ToolRegistry:
        return self._registry

    def start_session(self, context: Mapping[str, ContextValue] | None = None) -> Session:
        """Create a new open session with a fresh random id."""
        session = Session(self._id_factory(), context)
        logger.info(
            "session_started",
            session_id=session.id,
            context_keys=list(session.context),
        )
        return session

    def close_session(self, session: Session) -> Session:
        """Close an open session and return it.

        Raises SessionAlreadyClosedError if the session is already closed.
        """
        if session.is_closed:
            raise SessionAlreadyClosedError(session.id)
        session.close()
        logger.info("session_closed", session_id=session.id)
        return session

    def run(self, session: Session, prompt: str) -> Result:
        """Run a prompt through the template renderer.

        Raises SessionClosedError if the session is closed.
        """
        if session.is_closed:
            raise SessionClosedError(session.id, action="run")

        metadata = {
            "runtime": self._name,
            "timestamp": format_timestamp(self._clock()),
            "tokens_estimate": estimate_tokens(prompt, self._tokens_per_word),
        }
        output = render_run_output(self._name, session, prompt)
        logger.info(
            "runtime_run",
            session_id=session.id,
            tokens_estimate=metadata["tokens_estimate"],
        )
        return Result(session.id, prompt, output, metadata)

    def execute_tool(
        self,
        session: Session,
        tool_name: str,
        parameters: dict[str, Any] | None = None,
    ) -> Result:
        """Execute a registered tool and wrap its result.

        Raises SessionClosedError if the session is closed and
        ToolNotFoundError if no tool is registered under tool_name.
        """
        if session.is_closed:
            raise SessionClosedError(session.id, action="execute tool")

        echoed = snapshot_value(parameters or {})
        tool_result = self._registry.execute(tool_name, session, snapshot_value(echoed))

        metadata = {
            "runtime": self._name,
            "timestamp": format_timestamp(self._clock()),
            "tool": tool_name,
            "parameters": echoed,
        }
        return Result(
            session.id,
            f"tool:{tool_name}",
            render_tool_output(tool_result),
            metadata,
        )
