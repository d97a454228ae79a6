"""Testing fakes – in-memory doubles for the store and cache ports."""
from mp_flags.testing.fakes.cache import InMemoryFlagCache
from mp_flags.testing.fakes.store import InMemoryFlagStore
from mp_flags.kernel.time import FrozenClock

__all__ = ["FrozenClock", "InMemoryFlagCache", "InMemoryFlagStore"]
