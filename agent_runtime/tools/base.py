from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from agent_runtime.session.models import Session


class BaseTool(ABC):
    """Abstract base class for runtime tools.

    Tool names must be non-empty and contain only lowercase letters, digits
    and underscores (e.g. "file_search"). ToolRegistry enforces this on
    register unless name validation is disabled.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool name used for registration and lookup."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        ...

    @property
    def parameters(self) -> dict:
        """JSON Schema describing the tool's input parameters."""
        return {"type": "object", "properties": {}}

    @abstractmethod
    def execute(self, session: Session, parameters: dict[str, Any]) -> dict:
        """Execute the tool within the given session.

        Returns a dict that should contain at least an "output" entry.
        Session state is checked by the runtime before this is called.
        """
        ...
