from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from agent_runtime.tools.base import BaseTool

if TYPE_CHECKING:
    from agent_runtime.session.models import Session


class CurrentTimeTool(BaseTool):
    """Returns the current date and time."""

    @property
    def name(self) -> str:
        return "current_time"

    @property
    def description(self) -> str:
        return "Get the current date and time, optionally in a specific timezone."

    @property
    def parameters(self) -> dict:
        return {
            "type": "object",
            "properties": {
                "timezone": {
                    "type": "string",
                    "description": (
                        "IANA timezone name, e.g. 'Europe/Berlin'. "
                        "Defaults to UTC."
                    ),
                },
            },
            "required": [],
        }

    def execute(self, session: Session, parameters: dict[str, Any]) -> dict:
        tz_name = parameters.get("timezone", "UTC")
        try:
            if tz_name == "UTC":
                tz = UTC
            else:
                tz = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError, TypeError):
            return {"error_code": "INVALID_TIMEZONE", "message": f"Unknown timezone: {tz_name}"}

        now = datetime.now(tz)
        return {
            "output": now.isoformat(timespec="seconds"),
            "timezone": tz_name,
        }
