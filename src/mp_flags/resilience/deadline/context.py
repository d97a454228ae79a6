"""Resilience – ambient deadlines and deadline-bounded awaits."""
from __future__ import annotations

import asyncio
import contextlib
import inspect
from contextvars import ContextVar, Token
from typing import AsyncIterator, Awaitable, TypeVar

from mp_flags.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError
from mp_flags.resilience.deadline.deadline import Deadline

T = TypeVar("T")

_current: ContextVar[Deadline | None] = ContextVar("mp_flags_deadline", default=None)


class DeadlineExceededError(InfrastructureTimeoutError):
    """A store or cache call did not finish before its deadline."""

    default_code = "deadline_exceeded"


class DeadlineContext:
    """The deadline of the current request, visible to every task it spawns.

    Usage::

        async with DeadlineContext.scoped(Deadline.after(2.0)):
            await service.get_flag_value("dark-mode")
    """

    @staticmethod
    def get() -> Deadline | None:
        return _current.get()

    @staticmethod
    def set(deadline: Deadline) -> Token[Deadline | None]:
        return _current.set(deadline)

    @staticmethod
    def reset(token: Token[Deadline | None]) -> None:
        _current.reset(token)

    @staticmethod
    @contextlib.asynccontextmanager
    async def scoped(deadline: Deadline) -> AsyncIterator[Deadline]:
        token = _current.set(deadline)
        try:
            yield deadline
        finally:
            _current.reset(token)


def effective_deadline(
    explicit: Deadline | None = None, default_timeout: float | None = None
) -> Deadline | None:
    """Pick the deadline for a call.

    An explicit deadline wins, then the ambient one; *default_timeout*
    seconds from now is the fallback. ``None`` means unbounded.
    """
    if explicit is not None:
        return explicit
    ambient = _current.get()
    if ambient is not None:
        return ambient
    if default_timeout is not None:
        return Deadline.after(default_timeout)
    return None


async def deadline_aware(aw: Awaitable[T], deadline: Deadline | None = None) -> T:
    """Await *aw*, giving up when *deadline* (or the ambient one) passes.

    An expired deadline fails before *aw* starts. Cancellation of the
    calling task is not converted and propagates as usual.
    """
    if deadline is None:
        deadline = _current.get()
    if deadline is None:
        return await aw

    budget = deadline.remaining_seconds
    if budget == 0.0:
        if inspect.iscoroutine(aw):
            aw.close()
        raise DeadlineExceededError("Deadline already exceeded")

    try:
        async with asyncio.timeout(budget):
            return await aw
    except TimeoutError as exc:
        raise DeadlineExceededError(
            f"Deadline exceeded after {budget:.3f}s", cause=exc
        ) from exc


__all__ = [
    "DeadlineContext",
    "DeadlineExceededError",
    "deadline_aware",
    "effective_deadline",
]
