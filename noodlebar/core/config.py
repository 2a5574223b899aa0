"""Runtime settings read from the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

# Environment variable keys
_ENV_DATABASE_URL = "NOODLEBAR_DATABASE_URL"
_ENV_HOST = "NOODLEBAR_HOST"
_ENV_PORT = "PORT"
_ENV_BCRYPT_ROUNDS = "NOODLEBAR_BCRYPT_ROUNDS"
_ENV_CORS_ORIGINS = "NOODLEBAR_CORS_ORIGINS"
_ENV_CREATE_TABLES = "NOODLEBAR_CREATE_TABLES"
_ENV_LOG_LEVEL = "NOODLEBAR_LOG_LEVEL"
_ENV_LOG_FORMAT = "NOODLEBAR_LOG_FORMAT"

DEFAULT_DATABASE_URL = "postgresql+asyncpg://localhost/noodlebar"
DEFAULT_PORT = 5678
DEFAULT_BCRYPT_ROUNDS = 12


def _env_bool(key: str, default: bool) -> bool:
    raw = os.environ.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{key} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Process configuration. Build with :meth:`from_env`."""

    database_url: str = DEFAULT_DATABASE_URL
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    create_tables: bool = True
    log_level: str = "INFO"
    log_format: str = "console"

    @classmethod
    def from_env(cls) -> Settings:
        """Read settings from environment variables, falling back to defaults."""
        origins = os.environ.get(_ENV_CORS_ORIGINS, "*")
        return cls(
            database_url=os.environ.get(_ENV_DATABASE_URL, DEFAULT_DATABASE_URL),
            host=os.environ.get(_ENV_HOST, "0.0.0.0"),
            port=_env_int(_ENV_PORT, DEFAULT_PORT),
            bcrypt_rounds=_env_int(_ENV_BCRYPT_ROUNDS, DEFAULT_BCRYPT_ROUNDS),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            create_tables=_env_bool(_ENV_CREATE_TABLES, True),
            log_level=os.environ.get(_ENV_LOG_LEVEL, "INFO"),
            log_format=os.environ.get(_ENV_LOG_FORMAT, "console"),
        )
