"""Flag domain errors."""

from __future__ import annotations

from typing import Any

from mp_flags.kernel.errors import ConflictError, ErrorKind, NotFoundError, ValidationError


class InvalidFlagNameError(ValidationError):
    """The flag name violates the naming rules.

    ``rule`` is the first rule that failed, in evaluation order.
    """

    default_code = "invalid_name"
    kind = ErrorKind.INVALID_NAME

    def __init__(self, name: str, rule: str, message: str, **kwargs: Any) -> None:
        super().__init__(message, field="name", **kwargs)
        self.name = name
        self.rule = rule
        self.detail["rule"] = rule


class InvalidFlagValueError(ValidationError):
    """Unknown flag type token or an unusable value payload."""

    default_code = "invalid_value"
    kind = ErrorKind.INVALID_VALUE


class TypeMismatchError(ValidationError):
    """The value variant disagrees with the flag's declared type."""

    default_code = "type_mismatch"
    kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, expected: str, actual: str | None, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"{expected} flag requires a {expected} value, got {actual or 'no value'}",
            field="value",
            **kwargs,
        )
        self.expected = expected
        self.actual = actual
        self.detail.update(expected=expected, actual=actual)


class FlagNotFoundError(NotFoundError):
    default_code = "not_found"
    kind = ErrorKind.NOT_FOUND

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__("Flag", name, **kwargs)
        self.name = name


class FlagAlreadyExistsError(ConflictError):
    default_code = "already_exists"
    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(f"Flag '{name}' already exists", **kwargs)
        self.name = name


__all__ = [
    "FlagAlreadyExistsError",
    "FlagNotFoundError",
    "InvalidFlagNameError",
    "InvalidFlagValueError",
    "TypeMismatchError",
]
