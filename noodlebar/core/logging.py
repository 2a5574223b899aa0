"""structlog on top of stdlib logging, driven by :class:`Settings`."""

from __future__ import annotations

import logging
import logging.config
from typing import Any

import structlog

from noodlebar.core.config import Settings

# event keys that must never reach a log sink
REDACTED_KEYS = frozenset({"password", "password_hash"})

_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "asyncpg", "aiosqlite")


def drop_secrets(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor that masks credential fields bound by mistake."""
    for key in REDACTED_KEYS & event_dict.keys():
        event_dict[key] = "***"
    return event_dict


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(settings: Settings) -> None:
    """Route structlog and stdlib records through one stdout handler.

    ``settings.log_level`` applies to the ``noodlebar`` loggers and the root;
    request lines come from RequestIDMiddleware, so uvicorn's access log and
    the driver loggers are held at WARNING.
    """
    level = settings.log_level.upper()
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        drop_secrets,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    loggers: dict[str, dict[str, Any]] = {name: {"level": "WARNING"} for name in _QUIET_LOGGERS}
    loggers["noodlebar"] = {"level": level}
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "noodlebar": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(settings.log_format.lower()),
                    ],
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "noodlebar",
                },
            },
            "root": {"handlers": ["stdout"], "level": level},
            "loggers": loggers,
        }
    )
