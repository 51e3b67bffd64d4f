"""Observability – configure_logging.

Routes structlog through the stdlib :mod:`logging` machinery so tag
diagnostics land wherever the embedding runtime already sends its logs.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

from flag_tags.config.settings import FlagTagSettings


def configure_logging(
    level: int | str = logging.INFO,
    *,
    json: bool = False,
    settings: FlagTagSettings | None = None,
) -> None:
    """Configure structlog for console or JSON output.

    When *settings* is given its ``log_level`` and ``json_logs`` win over the
    keyword arguments.
    """
    if settings is not None:
        level = settings.log_level
        json = settings.json_logs
    if isinstance(level, str):
        level = logging.getLevelNamesMapping()[level.upper()]

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


__all__ = ["configure_logging"]
