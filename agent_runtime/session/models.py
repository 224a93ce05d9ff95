from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, TypeAlias

from agent_runtime.infra.errors import SessionAlreadyClosedError

# Values callers may attach to a session context or a result's metadata.
ContextValue: TypeAlias = (
    str | int | float | bool | None | Mapping[str, Any] | Sequence[Any]
)


def snapshot_value(value: Any) -> Any:
    """Detached copy of a context value.

    Mappings (read-only views included) become dicts and lists/tuples are
    rebuilt, recursively; anything else is deep-copied.
    """
    match value:
        case str() | bytes():
            return value
        case Mapping():
            return {key: snapshot_value(item) for key, item in value.items()}
        case list():
            return [snapshot_value(item) for item in value]
        case tuple():
            return tuple(snapshot_value(item) for item in value)
        case _:
            return copy.deepcopy(value)


class Session:
    """Handle for one interaction scope.

    Two states: open (initial) and closed (terminal). id and context are
    fixed at construction; the only mutation is the close() transition.
    """

    __slots__ = ("_id", "_context", "_closed")

    def __init__(
        self, session_id: str, context: Mapping[str, ContextValue] | None = None
    ) -> None:
        self._id = session_id
        self._context: Mapping[str, ContextValue] = MappingProxyType(
            snapshot_value(context or {})
        )
        self._closed = False

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"Session(id={self._id!r}, {state})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def context(self) -> Mapping[str, ContextValue]:
        """Read-only view of the context supplied at creation."""
        return self._context

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Transition open -> closed. Raises SessionAlreadyClosedError if closed."""
        if self._closed:
            raise SessionAlreadyClosedError(self._id)
        self._closed = True
