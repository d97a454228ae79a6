"""Redis adapter – flag value cache."""
from mp_flags.adapters.redis.cache import RedisFlagCache
from mp_flags.adapters.redis.codec import decode_value, encode_value

__all__ = ["RedisFlagCache", "decode_value", "encode_value"]
