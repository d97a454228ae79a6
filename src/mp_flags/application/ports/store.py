"""Application ports – FlagStore (durable persistence)."""
from __future__ import annotations

import abc

from mp_flags.domain import Flag, FlagValue


class FlagStore(abc.ABC):
    """Port: durable source of truth for flags.

    Error contract:

    * :class:`~mp_flags.domain.FlagAlreadyExistsError` from :meth:`create`
      when the name is taken.
    * :class:`~mp_flags.domain.FlagNotFoundError` from :meth:`get_by_name`
      and :meth:`update_value` when no flag has that name.
    * :class:`~mp_flags.kernel.errors.StoreError` for any other
      persistence failure.
    """

    @abc.abstractmethod
    async def create(self, flag: Flag) -> None: ...

    @abc.abstractmethod
    async def get_by_name(self, name: str) -> Flag: ...

    @abc.abstractmethod
    async def update_value(self, name: str, value: FlagValue) -> Flag:
        """Overwrite the value, refresh ``updated_at`` and return the stored flag.

        Does not check the value against the flag's type.
        """


__all__ = ["FlagStore"]
