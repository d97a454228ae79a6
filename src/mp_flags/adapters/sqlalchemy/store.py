"""SQLAlchemy adapter – SqlAlchemyFlagStore."""
from __future__ import annotations

from typing import Any, Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mp_flags.adapters.sqlalchemy.models import Base, FlagRecord
from mp_flags.application.ports import FlagStore
from mp_flags.domain import Flag, FlagAlreadyExistsError, FlagNotFoundError, FlagValue
from mp_flags.kernel.errors import StoreError
from mp_flags.kernel.time import Clock, SystemClock
from mp_flags.observability.logging import get_logger

_log = get_logger(__name__)


class SqlAlchemyFlagStore(FlagStore):
    """Durable :class:`FlagStore` backed by a relational database.

    Each call runs in its own session and transaction. Driver failures are
    re-raised as :class:`StoreError`; a uniqueness violation on insert is
    reported as :class:`FlagAlreadyExistsError`.

    The store **does not** migrate the table automatically.  Call
    :meth:`create_schema` once (e.g. in app startup or a migration) before
    using it.

    Parameters
    ----------
    session_factory:
        Zero-argument callable returning an
        :class:`~sqlalchemy.ext.asyncio.AsyncSession`, such as
        :class:`~mp_flags.adapters.sqlalchemy.SqlAlchemySessionFactory`.
    clock:
        Source of ``updated_at`` for value updates.
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        *,
        clock: Clock | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._clock = clock or SystemClock()

    @staticmethod
    async def create_schema(bind: Any) -> None:
        """Create the ``flags`` table if it does not exist.

        Parameters
        ----------
        bind:
            An :class:`~sqlalchemy.ext.asyncio.AsyncEngine`.
        """
        async with bind.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def create(self, flag: Flag) -> None:
        try:
            async with self._session_factory() as session, session.begin():
                session.add(FlagRecord.from_domain(flag))
        except IntegrityError as exc:
            if await self._exists(flag.name):
                raise FlagAlreadyExistsError(flag.name, cause=exc) from exc
            raise StoreError("create", cause=exc) from exc
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError("create", cause=exc) from exc

    async def get_by_name(self, name: str) -> Flag:
        try:
            async with self._session_factory() as session:
                record = await session.get(FlagRecord, name)
                if record is None:
                    raise FlagNotFoundError(name)
                return record.to_domain()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError("get_by_name", cause=exc) from exc

    async def update_value(self, name: str, value: FlagValue) -> Flag:
        try:
            async with self._session_factory() as session, session.begin():
                record = await session.get(FlagRecord, name, with_for_update=True)
                if record is None:
                    raise FlagNotFoundError(name)
                record.assign_value(value)
                record.updated_at = self._clock.now()
                await session.flush()
                return record.to_domain()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError("update_value", cause=exc) from exc

    async def _exists(self, name: str) -> bool:
        try:
            async with self._session_factory() as session:
                return await session.get(FlagRecord, name) is not None
        except (SQLAlchemyError, OSError) as exc:
            _log.warning("flag_store.conflict_check_failed", flag=name, error=repr(exc))
            return False


__all__ = ["SqlAlchemyFlagStore"]
