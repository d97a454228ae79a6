"""JSON codec for cached flag values."""
from __future__ import annotations

import json

from mp_flags.domain import FlagType, FlagValue, InvalidFlagValueError, flag_value_of
from mp_flags.kernel.errors import SerializationError


def encode_value(value: FlagValue) -> bytes:
    """Encode as ``{"type": "boolean"|"numeric", "value": ...}``."""
    return json.dumps(
        {"type": value.flag_type.value, "value": value.value}, separators=(",", ":")
    ).encode()


def decode_value(raw: bytes | str) -> FlagValue:
    try:
        payload = json.loads(raw)
        flag_type = FlagType(payload["type"])
        return flag_value_of(flag_type, payload["value"])
    except (ValueError, TypeError, KeyError, OverflowError, InvalidFlagValueError) as exc:
        raise SerializationError(f"Undecodable cached flag value: {raw!r}", cause=exc) from exc


__all__ = ["decode_value", "encode_value"]
