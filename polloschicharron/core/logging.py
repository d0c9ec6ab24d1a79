"""structlog setup for the service layer and the seed script."""

from __future__ import annotations

import logging.config
import os

import structlog

# Driver and ORM chatter stays at WARNING unless asked for.
_QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "aiosqlite")


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Route structlog events through one stdout handler.

    *level* and *fmt* fall back to ``POLLOS_LOG_LEVEL`` (default ``INFO``)
    and ``POLLOS_LOG_FORMAT`` (``console`` or ``json``, default ``console``).
    """
    level = (level or os.environ.get("POLLOS_LOG_LEVEL", "INFO")).upper()
    fmt = (fmt or os.environ.get("POLLOS_LOG_FORMAT", "console")).lower()

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    loggers: dict[str, dict] = {"polloschicharron": {"level": level}}
    loggers.update({name: {"level": "WARNING"} for name in _QUIET_LOGGERS})
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "events": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "events",
                },
            },
            "root": {"handlers": ["stdout"], "level": "WARNING"},
            "loggers": loggers,
        }
    )
