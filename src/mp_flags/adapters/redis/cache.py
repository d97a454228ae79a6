"""Redis adapter – RedisFlagCache."""
from __future__ import annotations

from typing import Any

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from mp_flags.adapters.redis.codec import decode_value, encode_value
from mp_flags.application.ports import FlagCache
from mp_flags.domain import FlagValue
from mp_flags.kernel.errors import CacheError, SerializationError
from mp_flags.observability.logging import get_logger

_log = get_logger(__name__)


class RedisFlagCache(FlagCache):
    """Async Redis :class:`FlagCache`.

    Entries have no TTL; they are overwritten by the flag service whenever
    the durable value changes. ``get`` never raises: an unreachable server
    or an undecodable entry is logged and reported as a miss.
    """

    def __init__(self, client: Any, *, key_prefix: str = "flag:") -> None:
        self._client = client
        self._prefix = key_prefix

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "RedisFlagCache":
        return cls(aioredis.from_url(url, **kwargs))

    def key(self, name: str) -> str:
        return f"{self._prefix}{name}"

    async def get(self, name: str) -> FlagValue | None:
        key = self.key(name)
        try:
            raw = await self._client.get(key)
        except (RedisError, OSError) as exc:
            _log.warning("flag_cache.unavailable", key=key, error=repr(exc))
            return None
        if raw is None:
            return None
        try:
            return decode_value(raw)
        except SerializationError as exc:
            _log.warning("flag_cache.undecodable", key=key, error=exc.message)
            return None

    async def set(self, name: str, value: FlagValue) -> None:
        key = self.key(name)
        try:
            await self._client.set(key, encode_value(value))
        except (RedisError, OSError) as exc:
            raise CacheError("set", key, cause=exc) from exc

    async def delete(self, name: str) -> None:
        key = self.key(name)
        try:
            await self._client.delete(key)
        except (RedisError, OSError) as exc:
            raise CacheError("delete", key, cause=exc) from exc

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisFlagCache"]
