"""Environment-driven configuration.

Enable production mode (no access log) with:
  MOCK_ENV=production   (NODE_ENV is honoured as a fallback)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_PORT = 4000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_BODY_LIMIT = 2 * 1024 * 1024


def _truthy(value: str | None) -> bool:
    v = (value or "").strip().lower()
    return v in {"1", "true", "yes", "y", "on"}


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    return int(raw)


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    env: str = "development"
    log_level: str = "info"
    reload: bool = False
    body_limit: int = DEFAULT_BODY_LIMIT

    @property
    def production(self) -> bool:
        return self.env == "production"

    @property
    def access_log(self) -> bool:
        return not self.production


def load_settings() -> Settings:
    """Read settings from the process environment."""

    env = (os.getenv("MOCK_ENV") or os.getenv("NODE_ENV") or "development").strip().lower()
    return Settings(
        host=os.getenv("MOCK_HOST", DEFAULT_HOST),
        port=_int_env("PORT", DEFAULT_PORT),
        env=env,
        log_level=os.getenv("MOCK_LOG_LEVEL", "info").lower(),
        reload=_truthy(os.getenv("MOCK_RELOAD")),
        body_limit=_int_env("MOCK_BODY_LIMIT", DEFAULT_BODY_LIMIT),
    )
