"""Flag types and the flag value sum type."""

from __future__ import annotations

import dataclasses
import enum
import math
from typing import ClassVar

from mp_flags.domain.errors import InvalidFlagValueError


class FlagType(enum.StrEnum):
    BOOLEAN = "boolean"
    NUMERIC = "numeric"


def parse_flag_type(raw: str | FlagType) -> FlagType:
    """Map a type token to :class:`FlagType`.

    Raises :class:`InvalidFlagValueError` for any token other than
    ``"boolean"`` or ``"numeric"``.
    """
    try:
        return FlagType(raw)
    except ValueError:
        raise InvalidFlagValueError(f"unknown flag type {raw!r}", field="type") from None


@dataclasses.dataclass(frozen=True, slots=True)
class BooleanValue:
    """Payload of a ``boolean`` flag."""

    value: bool
    flag_type: ClassVar[FlagType] = FlagType.BOOLEAN

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise InvalidFlagValueError(
                f"boolean value must be a bool, got {type(self.value).__name__}", field="value"
            )


@dataclasses.dataclass(frozen=True, slots=True)
class NumericValue:
    """Payload of a ``numeric`` flag; always stored as a finite float."""

    value: float
    flag_type: ClassVar[FlagType] = FlagType.NUMERIC

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a number here
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise InvalidFlagValueError(
                f"numeric value must be a number, got {type(self.value).__name__}", field="value"
            )
        try:
            number = float(self.value)
        except OverflowError:
            raise InvalidFlagValueError("numeric value out of range", field="value") from None
        if not math.isfinite(number):
            raise InvalidFlagValueError("numeric value must be finite", field="value")
        object.__setattr__(self, "value", number)


FlagValue = BooleanValue | NumericValue


def flag_value_of(flag_type: FlagType, raw: bool | float) -> FlagValue:
    """Build the variant for *flag_type* from a raw Python value."""
    if flag_type is FlagType.BOOLEAN:
        return BooleanValue(raw)  # type: ignore[arg-type]
    return NumericValue(raw)


__all__ = [
    "BooleanValue",
    "FlagType",
    "FlagValue",
    "NumericValue",
    "flag_value_of",
    "parse_flag_type",
]
