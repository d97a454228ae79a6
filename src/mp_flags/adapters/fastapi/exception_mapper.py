"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any

from mp_flags.application.outcomes import Outcome, outcome_for
from mp_flags.kernel.errors import BaseError
from mp_flags.observability.logging import get_logger

_log = get_logger(__name__)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'mp-flags[fastapi]' to use the FastAPI adapter"
        ) from exc


HTTP_STATUS: dict[Outcome, int] = {
    Outcome.NOT_FOUND: 404,
    Outcome.CONFLICT: 409,
    Outcome.BAD_REQUEST: 400,
    Outcome.SERVICE_UNAVAILABLE: 503,
    Outcome.INTERNAL_ERROR: 500,
}


class FastAPIExceptionMapper:
    """Register flag error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "not_found", "message": "...", "detail": {...}}

    Mappings
    --------
    ``FlagNotFoundError``                       → 404
    ``FlagAlreadyExistsError``                  → 409
    ``InvalidFlagNameError``,
    ``InvalidFlagValueError``,
    ``TypeMismatchError``                       → 400
    ``InfrastructureError`` (store unreachable) → 503
    anything else                               → 500

    Internal errors never echo their message to the client.
    """

    def __init__(self, *, catch_all: bool = True) -> None:
        _require_fastapi()
        self._catch_all = catch_all

    @staticmethod
    def status_for(exc: BaseException) -> int:
        return HTTP_STATUS[outcome_for(exc)]

    def register(self, app: Any) -> None:
        """Register the error handlers on a ``FastAPI`` or ``Starlette`` app."""
        app.add_exception_handler(BaseError, self._handle)
        if self._catch_all:
            app.add_exception_handler(Exception, self._handle)

    async def _handle(self, request: Any, exc: Exception) -> Any:  # noqa: ARG002
        from fastapi.responses import JSONResponse

        outcome = outcome_for(exc)
        status = HTTP_STATUS[outcome]
        body: dict[str, Any]
        if isinstance(exc, BaseError) and outcome is not Outcome.INTERNAL_ERROR:
            body = exc.to_dict(include_cause=False)
        else:
            _log.error("http.unhandled_error", error=repr(exc))
            body = {"code": outcome.value, "message": "Internal server error"}
        return JSONResponse(status_code=status, content=body)


__all__ = ["HTTP_STATUS", "FastAPIExceptionMapper"]
