"""Testing support – in-memory fakes and Hypothesis strategies.

The strategies need ``hypothesis``; import them from
:mod:`mp_flags.testing.strategies` directly.
"""

from mp_flags.testing.fakes import FrozenClock, InMemoryFlagCache, InMemoryFlagStore

__all__ = ["FrozenClock", "InMemoryFlagCache", "InMemoryFlagStore"]
