"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
import sys
from typing import Any, ClassVar, TextIO

import structlog

from mp_flags.observability.logging.processors import SensitiveFieldsRedactor

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def level_from_name(name: str) -> int:
    """Map a ``LOG_LEVEL`` token to a :mod:`logging` level (unknown → INFO)."""
    return _LEVELS.get(name.strip().lower(), logging.INFO)


class JsonLoggerFactory:
    """One JSON line per event, routed through the stdlib root logger.

    structlog events and plain :mod:`logging` records from drivers
    (SQLAlchemy, redis) share the same renderer. Calling :meth:`configure`
    again replaces the handler it installed before and leaves any other
    root handlers alone.
    """

    _handler: ClassVar[logging.Handler | None] = None

    @classmethod
    def configure(
        cls,
        level: int | str = logging.INFO,
        *,
        sensitive_fields: frozenset[str] | None = None,
        stream: TextIO | None = None,
    ) -> logging.Handler:
        if isinstance(level, str):
            level = level_from_name(level)

        pre_chain: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            SensitiveFieldsRedactor(sensitive_fields),
        ]
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *pre_chain,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=pre_chain,
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(),
                ],
            )
        )

        root = logging.getLogger()
        if cls._handler is not None:
            root.removeHandler(cls._handler)
        root.addHandler(handler)
        root.setLevel(level)
        cls._handler = handler
        return handler


__all__ = ["JsonLoggerFactory", "level_from_name"]
