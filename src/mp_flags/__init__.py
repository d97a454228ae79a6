"""
mp_flags – typed feature flags over a durable store and a read cache.

Import path convention::

    from mp_flags.domain import FlagType, BooleanValue, NumericValue
    from mp_flags.application import FlagService, CreateFlagRequest
    from mp_flags.adapters.sqlalchemy import SqlAlchemyFlagStore
    from mp_flags.adapters.redis import RedisFlagCache
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
