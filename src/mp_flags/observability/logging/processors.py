"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class SensitiveFieldsRedactor:
    """structlog processor that masks the values of sensitive keys.

    Nested dicts are walked; matching is case-insensitive. Connection
    strings such as ``postgres_dsn`` carry credentials and are masked by
    default.
    """

    MASK = "***"
    DEFAULT_FIELDS: frozenset[str] = frozenset({"password", "secret", "token", "postgres_dsn", "dsn"})

    def __init__(self, fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (fields or self.DEFAULT_FIELDS))

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._redact(event_dict)

    def _redact(self, data: dict[str, Any]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, value in data.items():
            if key.lower() in self._fields:
                out[key] = self.MASK
            elif isinstance(value, dict):
                out[key] = self._redact(value)
            else:
                out[key] = value
        return out


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["SensitiveFieldsRedactor", "get_logger"]
