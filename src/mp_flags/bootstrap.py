"""Composition root – wires settings into a ready FlagService."""
from __future__ import annotations

import dataclasses
from typing import TextIO

from mp_flags.adapters.redis import RedisFlagCache
from mp_flags.adapters.sqlalchemy import SqlAlchemyFlagStore, SqlAlchemySessionFactory
from mp_flags.application import FlagService
from mp_flags.config import FlagServiceSettings
from mp_flags.kernel.time import Clock, SystemClock
from mp_flags.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)


@dataclasses.dataclass
class FlagServiceContainer:
    """Long-lived objects owned by the process; :meth:`close` releases them."""

    settings: FlagServiceSettings
    sessions: SqlAlchemySessionFactory
    store: SqlAlchemyFlagStore
    cache: RedisFlagCache
    service: FlagService

    async def create_schema(self) -> None:
        await SqlAlchemyFlagStore.create_schema(self.sessions.engine)

    async def close(self) -> None:
        await self.cache.close()
        await self.sessions.dispose()
        _log.info("container.closed")


def configure_logging(settings: FlagServiceSettings, *, stream: TextIO | None = None) -> None:
    """Install JSON logging at ``settings.log_level``; call once at process start."""
    JsonLoggerFactory.configure(settings.log_level, stream=stream)


def build_container(
    settings: FlagServiceSettings,
    *,
    clock: Clock | None = None,
) -> FlagServiceContainer:
    clock = clock or SystemClock()
    sessions = SqlAlchemySessionFactory(settings.database_url)
    store = SqlAlchemyFlagStore(sessions, clock=clock)
    cache = RedisFlagCache.from_url(settings.redis_url)
    service = FlagService(
        store,
        cache,
        clock=clock,
        default_timeout=settings.request_timeout_seconds,
    )
    _log.info(
        "container.built",
        http_addr=settings.http_addr,
        redis_addr=settings.redis_addr,
    )
    return FlagServiceContainer(
        settings=settings,
        sessions=sessions,
        store=store,
        cache=cache,
        service=service,
    )


__all__ = ["FlagServiceContainer", "build_container", "configure_logging"]
