"""Resilience – Deadline."""
from __future__ import annotations

import dataclasses
import time


@dataclasses.dataclass(frozen=True)
class Deadline:
    """Absolute point on the monotonic clock after which a call is abandoned.

    Wall-clock adjustments never move a deadline. Build one from a relative
    timeout with :meth:`after`.
    """

    expires_at: float

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        if seconds < 0:
            raise ValueError(f"timeout must not be negative, got {seconds}")
        return cls(time.monotonic() + seconds)

    @classmethod
    def expired(cls) -> "Deadline":
        """A deadline that has already passed."""
        return cls(time.monotonic())

    @property
    def remaining_seconds(self) -> float:
        return max(0.0, self.expires_at - time.monotonic())

    @property
    def is_expired(self) -> bool:
        return self.remaining_seconds == 0.0


__all__ = ["Deadline"]
