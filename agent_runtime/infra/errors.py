"""Custom exception hierarchy for agent_runtime.

All package exceptions inherit from AgentRuntimeError, which carries an
error code so host layers can map failures without parsing messages.
"""

from __future__ import annotations

from collections.abc import Iterable


class AgentRuntimeError(Exception):
    """Base exception for all agent_runtime errors."""

    def __init__(self, message: str, *, code: str = "INTERNAL_ERROR") -> None:
        super().__init__(message)
        self.code = code


class SessionError(AgentRuntimeError):
    """Errors in the session lifecycle."""

    def __init__(self, message: str, *, code: str = "SESSION_ERROR") -> None:
        super().__init__(message, code=code)


class SessionAlreadyClosedError(SessionError):
    """Raised when closing a session that is already closed."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            f'Session "{session_id}" is already closed.',
            code="SESSION_ALREADY_CLOSED",
        )
        self.session_id = session_id


class SessionClosedError(SessionError):
    """Raised when running or executing a tool on a closed session."""

    def __init__(self, session_id: str, *, action: str = "run") -> None:
        super().__init__(
            f'Cannot {action} on closed session "{session_id}".',
            code="SESSION_CLOSED",
        )
        self.session_id = session_id


class ToolError(AgentRuntimeError):
    """Errors in tool registration and dispatch."""

    def __init__(self, message: str, *, code: str = "TOOL_ERROR") -> None:
        super().__init__(message, code=code)


class ToolNotFoundError(ToolError):
    """Requested tool name is not registered.

    available lists the names registered at lookup time, in registration order.
    """

    def __init__(self, tool_name: str, available: Iterable[str] = ()) -> None:
        self.tool_name = tool_name
        self.available = tuple(available)
        listing = ", ".join(self.available) or "(none)"
        super().__init__(
            f'Tool "{tool_name}" is not registered. Available tools: {listing}',
            code="TOOL_NOT_FOUND",
        )


class InvalidToolNameError(ToolError):
    """Tool name does not match the lowercase/digits/underscore format."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(
            f"Invalid tool name {tool_name!r}: expected a non-empty string of "
            "lowercase letters, digits and underscores",
            code="INVALID_TOOL_NAME",
        )
        self.tool_name = tool_name
