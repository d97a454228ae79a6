"""Application ports – FlagCache (fast read path)."""
from __future__ import annotations

import abc

from mp_flags.domain import FlagValue


class FlagCache(abc.ABC):
    """Port: derived, possibly stale copy of flag values keyed by name.

    Only the value is cached, never the full flag.
    """

    @abc.abstractmethod
    async def get(self, name: str) -> FlagValue | None:
        """Return the cached value, or ``None`` on a miss.

        A miss is reported the same way whether the key is absent or the
        backend is unreachable.
        """

    @abc.abstractmethod
    async def set(self, name: str, value: FlagValue) -> None:
        """Store or overwrite the value. Raises :class:`CacheError` on failure."""

    @abc.abstractmethod
    async def delete(self, name: str) -> None:
        """Remove the entry; an absent key is not an error."""


__all__ = ["FlagCache"]
