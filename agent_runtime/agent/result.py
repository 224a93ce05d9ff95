from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from agent_runtime.session.models import snapshot_value


@dataclass(frozen=True)
class Result:
    """Structured output of a runtime invocation (templated run or tool call).

    metadata is stored as a read-only view over a private copy.
    """

    session_id: str
    input: str
    output: str
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "metadata", MappingProxyType(snapshot_value(self.metadata))
        )
