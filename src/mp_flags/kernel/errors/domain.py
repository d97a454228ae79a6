"""Domain errors – validation failures, missing and conflicting resources."""

from __future__ import annotations

from typing import Any

from mp_flags.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A request broke a domain rule; never caused by I/O."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``field`` names the offending input, when there is a single one.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        if field is not None:
            self.detail.setdefault("field", field)


class NotFoundError(DomainError):
    """No resource matches the given identifier."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        label = resource if identifier is None else f"{resource} '{identifier}'"
        super().__init__(f"{label} not found", **kwargs)
        self.resource = resource
        self.identifier = identifier
        if identifier is not None:
            self.detail.setdefault("identifier", identifier)


class ConflictError(DomainError):
    """The resource already exists or is in a state that forbids the change."""

    default_code = "conflict"


__all__ = ["ConflictError", "DomainError", "NotFoundError", "ValidationError"]
