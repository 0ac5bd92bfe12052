from __future__ import annotations

from enum import Enum
from typing import Literal, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)
"""Level names accepted by ``DemoSettings.log_level``."""


class ConnectionKind(str, Enum):
    """Name the ``Connection`` implementers the composition root can build."""

    REAL = "real"
    """Build a ``RealConnection``."""

    MOCK = "mock"
    """Build a ``MockConnection``."""

    IN_MEMORY = "in-memory"
    """Build an ``InMemoryConnection`` serving ``DemoSettings.answer``."""


class DemoSettings(BaseSettings):
    """Settings read by the demo entry point.

    Values come from ``DEPINJ_``-prefixed environment variables, for example
    ``DEPINJ_CONNECTION=mock``. Services never read these settings; only the
    composition root does.
    """

    model_config = SettingsConfigDict(env_prefix="DEPINJ_")

    connection: ConnectionKind = ConnectionKind.REAL
    answer: int = 0
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
