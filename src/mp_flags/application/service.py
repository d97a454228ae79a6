"""FlagService – orchestrates the flag store and the flag cache.

The store is the single source of truth and a hard dependency: its failures
always reach the caller. The cache is an optimisation and a soft
dependency: its failures are logged and absorbed, and a stale or missing
entry is repaired by the next read-through miss.
"""
from __future__ import annotations

from mp_flags.application.dto import (
    CreateFlagRequest,
    FlagResponse,
    FlagValueResponse,
    UpdateFlagValueRequest,
)
from mp_flags.application.ports import FlagCache, FlagStore
from mp_flags.domain import (
    Flag,
    FlagValue,
    parse_flag_type,
    validate_flag_name,
    validate_flag_value,
)
from mp_flags.kernel.errors import CacheError
from mp_flags.kernel.time import Clock, SystemClock
from mp_flags.observability.logging import get_logger
from mp_flags.resilience.deadline import (
    Deadline,
    DeadlineExceededError,
    deadline_aware,
    effective_deadline,
)

_log = get_logger(__name__)


class FlagService:
    """Create, read and update typed feature flags.

    Parameters
    ----------
    store:
        Durable :class:`FlagStore`.
    cache:
        :class:`FlagCache` for the value read path.
    clock:
        Source of creation timestamps; defaults to :class:`SystemClock`.
    default_timeout:
        Seconds allowed for an operation when the caller supplies no
        deadline, either explicitly or through
        :class:`~mp_flags.resilience.deadline.DeadlineContext`.
        ``None`` leaves such calls unbounded.
    """

    def __init__(
        self,
        store: FlagStore,
        cache: FlagCache,
        *,
        clock: Clock | None = None,
        default_timeout: float | None = None,
    ) -> None:
        self._store = store
        self._cache = cache
        self._clock = clock or SystemClock()
        self._default_timeout = default_timeout

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def create_flag(
        self, request: CreateFlagRequest, *, deadline: Deadline | None = None
    ) -> FlagResponse:
        name = validate_flag_name(request.name)
        flag_type = parse_flag_type(request.type)
        value = validate_flag_value(flag_type, request.value.to_domain())

        now = self._clock.now()
        flag = Flag(
            name=name,
            type=flag_type,
            description=request.description,
            value=value,
            created_at=now,
            updated_at=now,
        )

        dl = self._deadline(deadline)
        await deadline_aware(self._store.create(flag), dl)
        _log.info("flag.created", flag=name, type=flag_type.value)

        await self._cache_set(name, value, dl)
        return FlagResponse.from_flag(flag)

    async def get_flag(self, name: str, *, deadline: Deadline | None = None) -> FlagResponse:
        flag = await deadline_aware(self._store.get_by_name(name), self._deadline(deadline))
        return FlagResponse.from_flag(flag)

    async def get_flag_value(
        self, name: str, *, deadline: Deadline | None = None
    ) -> FlagValueResponse:
        dl = self._deadline(deadline)

        cached = await self._cache_get(name, dl)
        if cached is not None:
            _log.debug("flag.cache_hit", flag=name)
            return FlagValueResponse.from_value(cached)

        _log.debug("flag.cache_miss", flag=name)
        flag = await deadline_aware(self._store.get_by_name(name), dl)
        await self._cache_set(name, flag.value, dl)
        return FlagValueResponse.from_value(flag.value)

    async def update_flag_value(
        self,
        name: str,
        request: UpdateFlagValueRequest,
        *,
        deadline: Deadline | None = None,
    ) -> FlagResponse:
        dl = self._deadline(deadline)

        existing = await deadline_aware(self._store.get_by_name(name), dl)
        value = validate_flag_value(existing.type, request.value.to_domain())

        # Hard dependency: a failure here propagates and the cache stays untouched.
        updated = await deadline_aware(self._store.update_value(name, value), dl)
        _log.info("flag.value_updated", flag=name, type=updated.type.value)

        await self._cache_set(name, updated.value, dl)
        return FlagResponse.from_flag(updated)

    # ------------------------------------------------------------------
    # Cache helpers (soft dependency)
    # ------------------------------------------------------------------

    async def _cache_get(self, name: str, deadline: Deadline | None) -> FlagValue | None:
        try:
            return await deadline_aware(self._cache.get(name), deadline)
        except (CacheError, DeadlineExceededError) as exc:
            _log.warning("flag.cache_get_failed", flag=name, error=exc.code)
            return None

    async def _cache_set(self, name: str, value: FlagValue, deadline: Deadline | None) -> None:
        try:
            await deadline_aware(self._cache.set(name, value), deadline)
        except (CacheError, DeadlineExceededError) as exc:
            _log.warning("flag.cache_set_failed", flag=name, error=exc.code)

    def _deadline(self, explicit: Deadline | None) -> Deadline | None:
        return effective_deadline(explicit, self._default_timeout)


__all__ = ["FlagService"]
