"""Unit tests for RedisFlagCache and its codec – no running Redis required."""
from __future__ import annotations

import asyncio
import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from mp_flags.adapters.redis import RedisFlagCache, decode_value, encode_value
from mp_flags.domain import BooleanValue, NumericValue
from mp_flags.kernel.errors import CacheError, SerializationError

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_cache() -> tuple[RedisFlagCache, MagicMock]:
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock()
    client.delete = AsyncMock()
    client.aclose = AsyncMock()
    return RedisFlagCache(client), client


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


class TestCodec:
    def test_encode_boolean(self) -> None:
        assert json.loads(encode_value(BooleanValue(True))) == {"type": "boolean", "value": True}

    def test_encode_numeric(self) -> None:
        assert json.loads(encode_value(NumericValue(2.5))) == {"type": "numeric", "value": 2.5}

    def test_decode_accepts_str_and_bytes(self) -> None:
        assert decode_value('{"type":"numeric","value":3}') == NumericValue(3.0)
        assert decode_value(b'{"type":"boolean","value":false}') == BooleanValue(False)

    @pytest.mark.parametrize(
        "raw",
        [
            b"not-json",
            b'{"type":"string","value":"x"}',
            b'{"type":"boolean","value":1}',
            b'{"type":"numeric"}',
            b"[]",
            b'{"type":"numeric","value":' + b"9" * 400 + b"}",
        ],
    )
    def test_decode_rejects_garbage(self, raw: bytes) -> None:
        with pytest.raises(SerializationError):
            decode_value(raw)


# ---------------------------------------------------------------------------
# RedisFlagCache
# ---------------------------------------------------------------------------


class TestRedisFlagCache:
    def test_key_uses_flag_prefix(self) -> None:
        cache, _ = _make_cache()
        assert cache.key("dark-mode") == "flag:dark-mode"

    def test_get_miss(self) -> None:
        async def run() -> None:
            cache, client = _make_cache()
            assert await cache.get("dark-mode") is None
            client.get.assert_awaited_once_with("flag:dark-mode")

        asyncio.run(run())

    def test_get_hit(self) -> None:
        async def run() -> None:
            cache, client = _make_cache()
            client.get = AsyncMock(return_value=b'{"type":"boolean","value":true}')
            assert await cache.get("dark-mode") == BooleanValue(True)

        asyncio.run(run())

    def test_get_unreachable_is_a_miss(self) -> None:
        async def run() -> None:
            cache, client = _make_cache()
            client.get = AsyncMock(side_effect=RedisConnectionError("refused"))
            assert await cache.get("dark-mode") is None

        asyncio.run(run())

    def test_get_undecodable_is_a_miss(self) -> None:
        async def run() -> None:
            cache, client = _make_cache()
            client.get = AsyncMock(return_value=b"garbage")
            assert await cache.get("dark-mode") is None

        asyncio.run(run())

    def test_get_out_of_range_number_is_a_miss(self) -> None:
        async def run() -> None:
            cache, client = _make_cache()
            client.get = AsyncMock(return_value=b'{"type":"numeric","value":1' + b"0" * 400 + b"}")
            assert await cache.get("rate-limit") is None

        asyncio.run(run())

    def test_set_writes_encoded_value_without_ttl(self) -> None:
        async def run() -> None:
            cache, client = _make_cache()
            await cache.set("rate-limit", NumericValue(10))
            client.set.assert_awaited_once_with("flag:rate-limit", encode_value(NumericValue(10)))

        asyncio.run(run())

    def test_set_unreachable_raises_cache_error(self) -> None:
        async def run() -> None:
            cache, client = _make_cache()
            client.set = AsyncMock(side_effect=RedisConnectionError("refused"))
            with pytest.raises(CacheError) as exc_info:
                await cache.set("dark-mode", BooleanValue(True))
            assert exc_info.value.key == "flag:dark-mode"

        asyncio.run(run())

    def test_delete(self) -> None:
        async def run() -> None:
            cache, client = _make_cache()
            await cache.delete("dark-mode")
            client.delete.assert_awaited_once_with("flag:dark-mode")

        asyncio.run(run())

    def test_delete_unreachable_raises_cache_error(self) -> None:
        async def run() -> None:
            cache, client = _make_cache()
            client.delete = AsyncMock(side_effect=OSError("down"))
            with pytest.raises(CacheError):
                await cache.delete("dark-mode")

        asyncio.run(run())

    def test_close(self) -> None:
        async def run() -> None:
            cache, client = _make_cache()
            await cache.close()
            client.aclose.assert_awaited_once()

        asyncio.run(run())

    def test_from_url(self) -> None:
        import mp_flags.adapters.redis.cache as cache_mod

        client: Any = MagicMock()
        with patch.object(cache_mod.aioredis, "from_url", return_value=client) as from_url:
            cache = RedisFlagCache.from_url("redis://localhost:6379/0")
        from_url.assert_called_once_with("redis://localhost:6379/0")
        assert cache._client is client
