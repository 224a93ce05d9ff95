from __future__ import annotations

import re

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env once at module import so every BaseSettings subclass sees the env vars
load_dotenv()

_SESSION_PREFIX_RE = re.compile(r"^[A-Za-z0-9_-]+$")
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


class RuntimeSettings(BaseSettings):
    """Runtime identity and session settings. Env vars prefixed with RUNTIME_."""

    model_config = SettingsConfigDict(env_prefix="RUNTIME_")

    name: str = "Agent Runtime"  # label stamped into output and metadata
    session_id_prefix: str = "agent_"
    session_id_bytes: int = Field(8, ge=8, le=64)  # random bytes, hex-encoded
    tokens_per_word: float = Field(1.3, gt=0)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("RUNTIME_NAME must not be blank")
        return v

    @field_validator("session_id_prefix")
    @classmethod
    def _validate_session_id_prefix(cls, v: str) -> str:
        if not _SESSION_PREFIX_RE.match(v):
            msg = (
                "RUNTIME_SESSION_ID_PREFIX must contain only letters, digits, "
                f"'_' or '-' (got '{v}')"
            )
            raise ValueError(msg)
        return v


class ToolSettings(BaseSettings):
    """Tool registry settings. Env vars prefixed with TOOLS_."""

    model_config = SettingsConfigDict(env_prefix="TOOLS_")

    validate_names: bool = True  # enforce ^[a-z0-9_]+$ on register
    register_builtins: bool = False


class LoggingSettings(BaseSettings):
    """Log output settings. Env vars prefixed with LOG_."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    json_output: bool = True
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            msg = f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)} (got '{v}')"
            raise ValueError(msg)
        return level


class Settings(BaseSettings):
    """Root settings composing all sub-configurations."""

    model_config = SettingsConfigDict(extra="ignore")

    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)
    tools: ToolSettings = Field(default_factory=ToolSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def get_settings() -> Settings:
    """Load and validate settings. Raises ValidationError on invalid values."""
    return Settings()
