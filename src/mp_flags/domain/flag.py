"""Flag entity."""

from __future__ import annotations

import dataclasses
from datetime import datetime

from mp_flags.domain.value import FlagType, FlagValue
from mp_flags.domain.validation import validate_flag_value


@dataclasses.dataclass(frozen=True)
class Flag:
    """A named, typed feature flag with its current value.

    ``name`` and ``type`` are fixed for the life of the flag; the value may
    only change through :meth:`with_value`, which also refreshes
    ``updated_at``.
    """

    name: str
    type: FlagType
    value: FlagValue
    created_at: datetime
    updated_at: datetime
    description: str = ""

    def __post_init__(self) -> None:
        validate_flag_value(self.type, self.value)

    def with_value(self, value: FlagValue, at: datetime) -> "Flag":
        return dataclasses.replace(self, value=value, updated_at=at)


__all__ = ["Flag"]
