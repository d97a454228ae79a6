"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    └── InfrastructureError  (infrastructure.py)
        ├── StoreError
        ├── CacheError
        ├── SerializationError
        └── TimeoutError

Every class carries an :class:`ErrorKind` (``kind``) that the boundary maps
to an outcome; the flag-specific leaves live in :mod:`mp_flags.domain.errors`.
"""

from mp_flags.kernel.errors.base import BaseError, ErrorKind
from mp_flags.kernel.errors.domain import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from mp_flags.kernel.errors.infrastructure import (
    CacheError,
    InfrastructureError,
    SerializationError,
    StoreError,
)
from mp_flags.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError

__all__ = [
    "BaseError",
    "CacheError",
    "ConflictError",
    "DomainError",
    "ErrorKind",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "NotFoundError",
    "SerializationError",
    "StoreError",
    "ValidationError",
]
