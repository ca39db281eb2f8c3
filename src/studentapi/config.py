"""Environment-driven configuration.

Values come from the process environment; a ``.env`` file in the working
directory is loaded first and never overrides variables that are already set.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///students.db"
DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 4000
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_OWNER_FULL_NAME = "Trinh Xuan Sang"
DEFAULT_OWNER_STUDENT_CODE = "QE170101"


class ConfigError(ValueError):
    """Configuration value is invalid."""


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError as e:
        raise ConfigError(f"PORT must be an integer, got {raw!r}") from e
    if not 0 < port < 65536:
        raise ConfigError(f"PORT must be between 1 and 65535, got {port}")
    return port


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    database_url: str = DEFAULT_DATABASE_URL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_dir: str = DEFAULT_LOG_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    owner_full_name: str = DEFAULT_OWNER_FULL_NAME
    owner_student_code: str = DEFAULT_OWNER_STUDENT_CODE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ConfigError: If PORT is not a valid port number
        """
        env = os.environ if environ is None else environ
        return cls(
            database_url=env.get("DATABASE_URL", DEFAULT_DATABASE_URL),
            host=env.get("HOST", DEFAULT_HOST),
            port=_parse_port(env.get("PORT", str(DEFAULT_PORT))),
            log_dir=env.get("STUDENTAPI_LOG_DIR", DEFAULT_LOG_DIR),
            log_level=env.get("STUDENTAPI_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            owner_full_name=env.get("OWNER_FULL_NAME", DEFAULT_OWNER_FULL_NAME),
            owner_student_code=env.get("OWNER_STUDENT_CODE", DEFAULT_OWNER_STUDENT_CODE),
        )

    def with_overrides(self, **overrides: Any) -> Settings:
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    load_dotenv()
    return Settings.from_env()
