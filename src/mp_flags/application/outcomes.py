"""Error kind → transport outcome table.

The service raises typed errors only; this is the single place where a
kind becomes an outcome class, and adapters (HTTP, gRPC, CLI) translate the
outcome to their own status codes.
"""
from __future__ import annotations

import enum
from typing import Final

from mp_flags.kernel.errors import BaseError, ErrorKind


class Outcome(enum.StrEnum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    BAD_REQUEST = "bad_request"
    SERVICE_UNAVAILABLE = "service_unavailable"
    INTERNAL_ERROR = "internal_error"


OUTCOMES: Final[dict[ErrorKind, Outcome]] = {
    ErrorKind.NOT_FOUND: Outcome.NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: Outcome.CONFLICT,
    ErrorKind.TYPE_MISMATCH: Outcome.BAD_REQUEST,
    ErrorKind.INVALID_NAME: Outcome.BAD_REQUEST,
    ErrorKind.INVALID_VALUE: Outcome.BAD_REQUEST,
    ErrorKind.INFRA: Outcome.SERVICE_UNAVAILABLE,
}


def outcome_for(exc: BaseException) -> Outcome:
    """Return the outcome class for *exc*; unrecognised errors are internal."""
    if isinstance(exc, BaseError) and exc.kind is not None:
        return OUTCOMES.get(exc.kind, Outcome.INTERNAL_ERROR)
    return Outcome.INTERNAL_ERROR


__all__ = ["OUTCOMES", "Outcome", "outcome_for"]
