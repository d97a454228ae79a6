"""Application ports – store and cache contracts."""
from mp_flags.application.ports.cache import FlagCache
from mp_flags.application.ports.store import FlagStore

__all__ = ["FlagCache", "FlagStore"]
