"""Infrastructure errors – store, cache and serialisation failures."""

from __future__ import annotations

from typing import Any

from mp_flags.kernel.errors.base import BaseError, ErrorKind


class InfrastructureError(BaseError):
    """I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"
    kind = ErrorKind.INFRA


class StoreError(InfrastructureError):
    """The durable store is unreachable or returned an unrecognised failure."""

    default_code = "store_unavailable"

    def __init__(self, operation: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Flag store failed during '{operation}'", **kwargs)
        self.operation = operation
        self.detail.setdefault("operation", operation)


class CacheError(InfrastructureError):
    """The cache backend failed a write or delete.

    Never reaches callers of the flag service: it is absorbed and logged.
    """

    default_code = "cache_unavailable"
    kind = ErrorKind.CACHE_INFRA

    def __init__(self, operation: str, key: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Cache {operation} failed for '{key}'", **kwargs)
        self.operation = operation
        self.key = key


class SerializationError(InfrastructureError):
    """Failed to serialise or deserialise a payload."""

    default_code = "serialization_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """An I/O operation exceeded its deadline."""

    default_code = "infrastructure_timeout"


__all__ = [
    "CacheError",
    "InfrastructureError",
    "SerializationError",
    "StoreError",
    "TimeoutError",
]
