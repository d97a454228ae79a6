"""Kernel time – the clock port used to stamp flag timestamps."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Source of timezone-aware UTC timestamps."""

    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Clock that only moves when told to.

    A naive start time is taken to be UTC, matching how the store reads
    timestamps back.
    """

    def __init__(self, start: datetime) -> None:
        self._at = start if start.tzinfo is not None else start.replace(tzinfo=UTC)

    def now(self) -> datetime:
        return self._at

    def advance(self, delta: timedelta | None = None, **parts: float) -> datetime:
        """Move forward by *delta* or by ``timedelta(**parts)``; return the new time."""
        self._at += delta if delta is not None else timedelta(**parts)
        return self._at


__all__ = ["Clock", "FrozenClock", "SystemClock"]
