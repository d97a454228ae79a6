"""Kernel – framework-agnostic building blocks (errors, time)."""

from mp_flags.kernel.errors import (
    BaseError,
    CacheError,
    ConflictError,
    DomainError,
    ErrorKind,
    InfrastructureError,
    NotFoundError,
    StoreError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "CacheError",
    "ConflictError",
    "DomainError",
    "ErrorKind",
    "InfrastructureError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
]
