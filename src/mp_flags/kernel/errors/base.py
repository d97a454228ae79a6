"""Error kinds and the root of the mp-flags error hierarchy."""

from __future__ import annotations

import enum
from typing import Any, ClassVar


class ErrorKind(enum.StrEnum):
    """Closed set of error kinds callers branch on."""

    INVALID_NAME = "invalid_name"
    INVALID_VALUE = "invalid_value"
    TYPE_MISMATCH = "type_mismatch"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INFRA = "infra"
    CACHE_INFRA = "cache_infra"


class BaseError(Exception):
    """Root of every error raised by mp-flags.

    ``code`` is the stable slug clients match on. ``kind`` groups codes into
    the outcomes a transport understands; it is ``None`` for errors outside
    the flag taxonomy, such as configuration errors, which the boundary
    reports as internal. ``detail`` must stay JSON-serialisable.

    The triggering exception, if any, is passed as ``cause`` and chained as
    ``__cause__``.
    """

    default_code: ClassVar[str] = "base_error"
    kind: ClassVar[ErrorKind | None] = None

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"

    def to_dict(self, *, include_cause: bool = True) -> dict[str, Any]:
        """Plain-dict form for logs and response bodies.

        Pass ``include_cause=False`` when the dict leaves the process; the
        cause may describe internal hosts or drivers.
        """
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if include_cause and self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError", "ErrorKind"]
