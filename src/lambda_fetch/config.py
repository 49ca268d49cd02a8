"""
Settings for the Lambda adapter, read once from the environment at start-up.
"""

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TIMEOUT = 30.0

ENV_FIELDS = {
    "LOG_LEVEL": "log_level",
    "FETCH_TIMEOUT": "timeout",
    "FETCH_VERIFY_TLS": "verify_tls",
    "FETCH_DEADLINE_MARGIN": "deadline_margin",
}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = "ERROR"
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    verify_tls: bool = True
    deadline_margin: float = Field(default=0.5, ge=0)  # seconds kept back from the Lambda deadline

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``); unset variables keep their defaults."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {field: env[var] for var, field in ENV_FIELDS.items() if env.get(var)}
        return cls.model_validate(values)
